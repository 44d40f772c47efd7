"""Tests for the debug field emission helpers."""

from specificity.config import SpecificityConfig
from specificity.debug import annotate_stylesheet, debug_fields, render_debug_block


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------


class TestDebugFields:
    def test_fields(self):
        assert debug_fields("div.foo") == {
            "specificity": "0, 1, 1",
            "specificity-value": "257",
        }

    def test_field_order(self):
        assert list(debug_fields("#a")) == ["specificity", "specificity-value"]

    def test_selector_list_reports_max(self):
        assert debug_fields("a.x, #b")["specificity"] == "1, 0, 0"

    def test_empty_selector(self):
        assert debug_fields("") == {"specificity": "0, 0, 0", "specificity-value": "0"}

    def test_custom_base(self):
        fields = debug_fields(".a", SpecificityConfig(base=100))
        assert fields["specificity-value"] == "100"


class TestRenderDebugBlock:
    def test_block(self):
        assert render_debug_block(" #a ") == (
            "#a {\n"
            "  specificity: 1, 0, 0;\n"
            "  specificity-value: 65536;\n"
            "}"
        )


# ---------------------------------------------------------------------------
# Stylesheet annotation
# ---------------------------------------------------------------------------


class TestAnnotateStylesheet:
    def test_single_rule(self):
        assert annotate_stylesheet("a { color: red; }") == (
            "a { color: red;\n"
            "  specificity: 0, 0, 1;\n"
            "  specificity-value: 1;\n"
            "}"
        )

    def test_missing_trailing_semicolon(self):
        assert annotate_stylesheet("a{color:red}") == (
            "a{color:red;\n"
            "  specificity: 0, 0, 1;\n"
            "  specificity-value: 1;\n"
            "}"
        )

    def test_empty_body(self):
        assert annotate_stylesheet(".x {}") == (
            ".x {\n"
            "  specificity: 0, 1, 0;\n"
            "  specificity-value: 256;\n"
            "}"
        )

    def test_multiple_rules(self):
        source = """
        .nav a { color: red; }
        #main { margin: 0; }
        """
        result = annotate_stylesheet(source)
        assert result.count("specificity-value") == 2
        assert "specificity: 0, 1, 1;" in result
        assert "specificity: 1, 0, 0;" in result

    def test_nested_in_media_query(self):
        result = annotate_stylesheet("@media screen { .x { color: red; } }")
        assert result.startswith("@media screen { .x { color: red;\n")
        assert result.count("specificity-value") == 1
        assert "specificity: 0, 1, 0;" in result

    def test_at_rule_block_untouched(self):
        source = "@font-face { font-family: x; }"
        assert annotate_stylesheet(source) == source

    def test_keyframe_steps_untouched(self):
        source = "@keyframes spin { from { top: 0; } 50% { top: 5px; } to { top: 9px; } }"
        assert annotate_stylesheet(source) == source

    def test_prefixed_keyframes_untouched(self):
        source = "@-webkit-keyframes spin { from { top: 0; } }"
        assert annotate_stylesheet(source) == source

    def test_rules_around_keyframes_still_annotated(self):
        source = ".a { top: 0; }\n@keyframes spin { from { top: 0; } }\n#b { top: 1px; }"
        result = annotate_stylesheet(source)
        assert result.count("specificity-value") == 2
        assert "from { top: 0; }" in result
        assert "specificity: 1, 0, 0;" in result

    def test_comment_before_selector_ignored(self):
        result = annotate_stylesheet("/* nav */ .nav a { color: red; }")
        assert result.startswith("/* nav */ .nav a {")
        assert "specificity: 0, 1, 1;" in result

    def test_empty_source(self):
        assert annotate_stylesheet("") == ""
