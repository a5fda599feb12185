"""
Unit tests for the 'inspect' command.
"""

import json

from click.testing import CliRunner

from cratemap.cli.main import main


class TestInspectCommand:
    def test_text_output(self, graph_file):
        runner = CliRunner()

        result = runner.invoke(main, ["inspect", str(graph_file), "5"])

        assert result.exit_code == 0, result.output
        assert "analyze" in result.output
        assert "function" in result.output
        assert "crate_path" in result.output

    def test_json_output(self, graph_file):
        runner = CliRunner()

        result = runner.invoke(main, ["inspect", str(graph_file), "3", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["type_label"] == "struct"
        assert data["sections"][0]["items"] == ["id: usize", "name: String"]

    def test_unknown_node(self, graph_file):
        runner = CliRunner()

        result = runner.invoke(main, ["inspect", str(graph_file), "99"])

        assert result.exit_code == 1
        assert "Node 99 is not in the current graph" in result.output

    def test_unknown_node_json(self, graph_file):
        runner = CliRunner()

        result = runner.invoke(main, ["inspect", str(graph_file), "99", "--json"])

        assert result.exit_code == 1
        assert "\"status\": \"error\"" in result.output
