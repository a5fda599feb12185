"""Unit tests for the viewer session context object."""

import pytest

from cratemap.core.selection import Idle, Selected, SelectionController
from cratemap.core.types import RawGraph
from cratemap.shell.session import GraphSession, NodeNotFoundError


class TestGraphSession:
    @pytest.fixture
    def session(self, raw_graph):
        session = GraphSession()
        session.load(raw_graph)
        return session

    def test_starts_empty(self):
        session = GraphSession()
        assert not session.is_loaded
        assert session.current_detail() is None
        with pytest.raises(NodeNotFoundError):
            session.pick(1)

    def test_load_builds_render_graph(self, session):
        assert session.is_loaded
        assert session.graph.node_count == 6

    def test_pick_returns_detail_and_selects(self, session):
        detail = session.pick(5)
        assert detail.type_label == "function"
        assert session.selection.state == Selected(5)
        assert session.current_detail() == detail

    def test_pick_same_node_twice(self, session):
        session.pick(5)
        session.pick(5)
        assert session.selection.is_detail_visible
        assert session.selected_node().id == 5

    def test_pick_unknown_node_keeps_selection(self, session):
        session.pick(3)
        with pytest.raises(NodeNotFoundError) as exc_info:
            session.pick(99)
        assert exc_info.value.node_id == 99
        assert session.selection.state == Selected(3)

    def test_dismiss(self, session):
        session.pick(3)
        session.dismiss()
        assert session.selection.state == Idle()
        assert session.current_detail() is None

    def test_reload_clears_selection(self, session):
        session.pick(3)
        session.load(RawGraph.model_validate({
            "root": 3,
            "nodes": [{"id": 3, "name": "Other", "kind": "trait"}],
        }))
        assert session.selection.state == Idle()
        assert session.graph.node_count == 1

    def test_successful_load_clears_error(self, raw_graph):
        session = GraphSession()
        session.record_error("boom")
        assert session.last_error == "boom"
        session.load(raw_graph)
        assert session.last_error is None

    def test_detail_follows_shared_controller(self, raw_graph):
        controller = SelectionController()
        session = GraphSession(selection=controller)
        session.load(raw_graph)

        controller.pick(4)
        assert session.current_detail().title == "Kind"

        controller.pick(42)
        assert session.current_detail() is None

        controller.pick(3)
        controller.dismiss()
        assert session.current_detail() is None
