"""Unit tests for the vis.js layout options."""

from cratemap.config import LayoutSettings
from cratemap.graph.layout import LayoutOptions


class TestLayoutOptions:
    def test_defaults(self):
        options = LayoutOptions().to_vis_options()
        hierarchical = options["layout"]["hierarchical"]

        assert hierarchical["enabled"] is True
        assert hierarchical["direction"] == "LR"
        assert hierarchical["sortMethod"] == "directed"
        assert hierarchical["levelSeparation"] == 150
        assert hierarchical["nodeSpacing"] == 150
        assert options["physics"] == {"enabled": False}
        assert options["edges"]["arrows"]["to"]["enabled"] is True
        assert options["interaction"] == {"navigationButtons": True, "keyboard": True}

    def test_from_settings(self):
        settings = LayoutSettings(direction="UD", level_separation=200, node_spacing=90)
        options = LayoutOptions.from_settings(settings)

        assert options.direction == "UD"
        assert options.to_vis_options()["layout"]["hierarchical"]["levelSeparation"] == 200
        assert options.to_vis_options()["physics"]["enabled"] is False

    def test_dot_rankdir(self):
        assert LayoutOptions().dot_rankdir == "LR"
        assert LayoutOptions(direction="UD").dot_rankdir == "TB"
        assert LayoutOptions(direction="DU").dot_rankdir == "BT"
