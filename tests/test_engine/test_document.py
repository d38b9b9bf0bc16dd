"""Tests for the @layer insertion point handling."""

from token_utilities.engine import CssDocument


class TestReplaceLayer:
    def test_empty_block(self):
        doc = CssDocument("a { color: red; }\n@layer utilities-gen {}\n")
        assert doc.replace_layer("utilities-gen", ".flex { display: flex }")
        assert doc.text == "a { color: red; }\n@layer utilities-gen {\n  .flex { display: flex }\n}\n"

    def test_multiline_css_indented(self):
        doc = CssDocument("@layer u {}")
        doc.replace_layer("u", ".a { x: 1 }\n.b { x: 2 }")
        assert doc.text == "@layer u {\n  .a { x: 1 }\n  .b { x: 2 }\n}"

    def test_existing_children_replaced(self):
        doc = CssDocument("@layer u {\n  .old { x: 1 }\n  @media (x) { .y { z: 1 } }\n}\nafter")
        doc.replace_layer("u", ".new { x: 2 }")
        assert doc.text == "@layer u {\n  .new { x: 2 }\n}\nafter"

    def test_empty_css_clears_block(self):
        doc = CssDocument("@layer u { .old { x: 1 } }")
        assert doc.replace_layer("u", "")
        assert doc.text == "@layer u {}"

    def test_statement_form(self):
        doc = CssDocument("@layer u;\nbody {}")
        doc.replace_layer("u", ".a { x: 1 }")
        assert doc.text == "@layer u {\n  .a { x: 1 }\n}\nbody {}"

    def test_statement_form_kept_when_nothing_to_insert(self):
        doc = CssDocument("@layer u;")
        assert doc.replace_layer("u", "")
        assert doc.text == "@layer u;"

    def test_other_layers_untouched(self):
        text = "@layer base { a { x: 1 } }\n@layer u {}"
        doc = CssDocument(text)
        doc.replace_layer("u", ".a { x: 1 }")
        assert doc.text.startswith("@layer base { a { x: 1 } }\n")

    def test_prefix_named_layer_untouched(self):
        doc = CssDocument("@layer utilities-gen-extra {}")
        assert not doc.replace_layer("utilities-gen", ".a {}")
        assert doc.text == "@layer utilities-gen-extra {}"

    def test_every_matching_block(self):
        doc = CssDocument("@layer u {}\n@layer u {}")
        doc.replace_layer("u", ".a { x: 1 }")
        assert doc.text.count(".a { x: 1 }") == 2

    def test_not_found(self):
        doc = CssDocument("body {}")
        assert not doc.replace_layer("u", ".a {}")
        assert doc.text == "body {}"

    def test_commented_out_layer_ignored(self):
        text = "/* @layer u {} */\nbody {}"
        doc = CssDocument(text)
        assert not doc.replace_layer("u", ".a {}")
        assert doc.text == text

    def test_braces_inside_strings_and_comments(self):
        doc = CssDocument('@layer u { a::after { content: "}"; } /* } */ }\nend')
        doc.replace_layer("u", ".a { x: 1 }")
        assert doc.text == "@layer u {\n  .a { x: 1 }\n}\nend"

    def test_unterminated_block_left_alone(self):
        doc = CssDocument("@layer u { .a { x: 1 }")
        assert not doc.replace_layer("u", ".b {}")

    def test_str(self):
        assert str(CssDocument("a {}")) == "a {}"
