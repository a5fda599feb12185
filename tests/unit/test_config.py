"""Unit tests for settings loading."""

from cratemap.config import DEFAULT_GRAPH_FILE, ViewerSettings, load_settings


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "config.yaml")
        assert settings == ViewerSettings()
        assert settings.source == DEFAULT_GRAPH_FILE
        assert settings.layout.direction == "LR"
        assert settings.server.port == 8000

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "source: http://127.0.0.1:8000/api/graph\n"
            "request_timeout: 5\n"
            "layout:\n"
            "  direction: UD\n"
            "  node_spacing: 80\n"
            "server:\n"
            "  port: 9000\n"
        )
        settings = load_settings(path)
        assert settings.source == "http://127.0.0.1:8000/api/graph"
        assert settings.request_timeout == 5
        assert settings.layout.direction == "UD"
        assert settings.layout.node_spacing == 80
        assert settings.layout.level_separation == 150
        assert settings.server.port == 9000

    def test_invalid_values_fall_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("layout:\n  direction: sideways\n")
        assert load_settings(path) == ViewerSettings()

    def test_broken_yaml_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("layout: [unclosed\n")
        assert load_settings(path) == ViewerSettings()

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        assert load_settings(path) == ViewerSettings()
