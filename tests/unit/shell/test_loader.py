"""Unit tests for reading and fetching graph documents."""

import json
from unittest.mock import MagicMock, patch

import requests

from cratemap.shell.loader import GraphLoadError, fetch_graph, is_remote, parse_graph


class TestLocalFiles:
    def test_reads_file(self, graph_file):
        result = fetch_graph(str(graph_file))
        assert result.is_ok()
        assert len(result.unwrap().nodes) == 6

    def test_reads_directory_default_file(self, graph_file):
        result = fetch_graph(str(graph_file.parent))
        assert result.is_ok()
        assert result.unwrap().root == 0

    def test_missing_file(self, tmp_path):
        result = fetch_graph(str(tmp_path / "nope.json"))
        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, GraphLoadError)
        assert "cannot read file" in error.message
        assert isinstance(error.cause, OSError)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        result = fetch_graph(str(path))
        assert result.is_err()
        assert "not valid JSON" in result.unwrap_err().message

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "g.json"
        path.write_text(json.dumps({"nodes": [{"name": "no id"}]}))
        result = fetch_graph(str(path))
        assert result.is_err()
        assert "invalid graph document" in result.unwrap_err().message
        assert str(path) in str(result.unwrap_err())


class TestRemote:
    def test_is_remote(self):
        assert is_remote("http://localhost:8000/api/graph")
        assert is_remote("https://example.com/g.json")
        assert not is_remote("crate_graph.json")

    @patch("cratemap.shell.loader.requests.get")
    def test_fetches_url(self, mock_get, graph_data):
        response = MagicMock()
        response.json.return_value = graph_data
        mock_get.return_value = response

        result = fetch_graph("http://127.0.0.1:8000/api/graph", timeout=5)

        assert result.is_ok()
        mock_get.assert_called_once_with("http://127.0.0.1:8000/api/graph", timeout=5)
        response.raise_for_status.assert_called_once()

    @patch("cratemap.shell.loader.requests.get")
    def test_transport_failure(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")
        result = fetch_graph("http://127.0.0.1:1/api/graph")
        assert result.is_err()
        assert "request failed" in result.unwrap_err().message

    @patch("cratemap.shell.loader.requests.get")
    def test_http_error_status(self, mock_get):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        mock_get.return_value = response
        result = fetch_graph("http://127.0.0.1:8000/api/graph")
        assert result.is_err()
        assert "500" in result.unwrap_err().message


class TestParseGraph:
    def test_tolerates_unknown_kinds_and_dangling_children(self):
        result = parse_graph({
            "root": 1,
            "nodes": [{"id": 1, "name": "x", "kind": {"externCrate": {}}, "children": [5]}],
        })
        assert result.is_ok()
        assert result.unwrap().nodes[0].kind.tag.value == "unknown"

    def test_node_without_kind_does_not_fail_graph(self):
        result = parse_graph({
            "root": 1,
            "nodes": [
                {"id": 1, "name": "src/lib.rs", "kind": {"module": {"path": "src/lib.rs"}}, "children": [2]},
                {"id": 2, "name": "x", "children": []},
            ],
        })
        assert result.is_ok()
        assert result.unwrap().get_node(2).kind.tag.value == "unknown"
