"""Unit tests for the Ok/Err result type."""

import pytest

from cratemap.core.result import Err, Ok


class TestResult:
    def test_ok(self):
        result = Ok(3)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 3
        with pytest.raises(ValueError):
            result.unwrap_err()

    def test_err(self):
        result = Err("boom")
        assert result.is_err() and not result.is_ok()
        assert result.unwrap_err() == "boom"
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()
