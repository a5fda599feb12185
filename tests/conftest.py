"""Shared fixtures: a small crate graph in the analyzer's wire format."""

import json

import pytest

from cratemap.core.types import RawGraph


@pytest.fixture
def graph_data():
    """Workspace → package → module → items, plus one dangling child (99)."""
    return {
        "root": 0,
        "nodes": [
            {
                "id": 0,
                "name": "workspace",
                "kind": {"workspace": {"path": "/src/workspace"}},
                "children": [1],
                "documentation": "",
            },
            {
                "id": 1,
                "name": "crates/cratemap",
                "kind": {"package": {"path": "/src/workspace/crates/cratemap"}},
                "children": [2],
                "documentation": "",
            },
            {
                "id": 2,
                "name": "src/graph/mod.rs",
                "kind": {"module": {"path": "/src/workspace/crates/cratemap/src/graph/mod.rs"}},
                "children": [3, 4, 5, 99],
                "documentation": "Graph module.",
            },
            {
                "id": 3,
                "name": "Node",
                "kind": {
                    "struct": {
                        "fields": [
                            {"name": "id", "typeName": "usize"},
                            {"name": "name", "typeName": "String"},
                        ]
                    }
                },
                "children": [],
                "documentation": "A node.",
                "sourceCode": "struct Node { id: usize, name: String }",
            },
            {
                "id": 4,
                "name": "Kind",
                "kind": {"enum": {"variants": ["Module", "Struct", "Enum"]}},
                "children": [],
                "documentation": "",
            },
            {
                "id": 5,
                "name": "analyze",
                "kind": {
                    "function": {
                        "arguments": [{"name": "crate_path", "typeName": "& Path"}],
                        "returnType": "Result < Graph >",
                    }
                },
                "children": [],
                "documentation": "",
            },
        ],
    }


@pytest.fixture
def raw_graph(graph_data):
    return RawGraph.model_validate(graph_data)


@pytest.fixture
def graph_file(tmp_path, graph_data):
    path = tmp_path / "crate_graph.json"
    path.write_text(json.dumps(graph_data))
    return path
