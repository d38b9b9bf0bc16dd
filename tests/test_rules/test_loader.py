"""Tests for loading rule extensions from data and from a project rules module."""

import logging
import sys

import pytest

from token_utilities.errors import ConfigError
from token_utilities.rules import (
    BuilderKind,
    Rules,
    StaticRule,
    VariantKind,
    VariantRule,
    find_rules_file,
    load_rules_file,
    rules_from_dict,
)


# ---------------------------------------------------------------------------
# rules_from_dict
# ---------------------------------------------------------------------------


class TestRulesFromDict:
    def test_empty(self):
        assert rules_from_dict(None) == Rules()
        assert rules_from_dict({}) == Rules()

    def test_static_rules(self):
        rules = rules_from_dict({"staticRules": [{"class": "btn", "css": "padding: 0"}]})
        assert rules.static_rules == (StaticRule("btn", "padding: 0"),)

    def test_token_rule_with_template(self):
        rules = rules_from_dict(
            {"tokenRules": [{"token": "color", "prefix": "caret-", "css": "caret-color: {value};"}]}
        )
        rule = rules.token_rules[0]
        assert rule.kind is BuilderKind.TEMPLATE
        assert rule.css("red", "var(--color-red)") == "caret-color: var(--color-red);"

    def test_token_rule_with_properties(self):
        rules = rules_from_dict(
            {"tokenRules": [{"token": "spacing", "prefix": "sx-", "properties": ["left", "right"]}]}
        )
        assert rules.token_rules[0].css("1", "V") == "left: V; right: V;"

    def test_token_rule_with_single_property_string(self):
        rules = rules_from_dict({"tokenRules": [{"token": "z", "prefix": "z-", "properties": "z-index"}]})
        assert rules.token_rules[0].properties == ("z-index",)

    def test_token_rule_callable_css(self):
        rules = rules_from_dict(
            {"tokenRules": [{"token": "c", "prefix": "c-", "css": lambda k, v: f"color: {v};"}]}
        )
        assert rules.token_rules[0].kind is BuilderKind.CUSTOM

    def test_variant_rules(self):
        rules = rules_from_dict(
            {
                "variantRules": [
                    {"name": "print", "type": "media", "condition": "print"},
                    {"name": "peer-hover", "type": "ancestor", "selector": ".peer:hover ~"},
                    {"name": "visited", "type": "pseudo"},
                ]
            }
        )
        assert [v.kind for v in rules.variant_rules] == [
            VariantKind.MEDIA,
            VariantKind.ANCESTOR,
            VariantKind.PSEUDO,
        ]

    def test_pseudo_class_option(self):
        rules = rules_from_dict(
            {"variantRules": [{"name": "second", "type": "pseudo", "pseudo": "nth-child(2)"}]}
        )
        assert rules.variant_rules[0].pseudo == "nth-child(2)"

    def test_incomplete_variant_kept(self):
        rules = rules_from_dict({"variantRules": [{"name": "wide", "type": "media"}]})
        assert rules.variant_rules == (VariantRule("wide", VariantKind.MEDIA),)

    def test_unknown_variant_type_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="token_utilities"):
            rules = rules_from_dict({"variantRules": [{"name": "x", "type": "container"}]})
        assert rules.variant_rules == ()
        assert any("unknown type" in r.message for r in caplog.records)

    def test_rule_objects_pass_through(self):
        static = StaticRule("btn", "padding: 0")
        assert rules_from_dict({"staticRules": [static]}).static_rules == (static,)

    def test_static_rule_missing_css(self):
        with pytest.raises(ConfigError, match="static rule"):
            rules_from_dict({"staticRules": [{"class": "btn"}]})

    def test_token_rule_missing_prefix(self):
        with pytest.raises(ConfigError, match="token rule"):
            rules_from_dict({"tokenRules": [{"token": "spacing"}]})

    def test_not_an_object(self):
        with pytest.raises(ConfigError):
            rules_from_dict(["staticRules"])  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Project rules module
# ---------------------------------------------------------------------------


class TestRulesModule:
    def test_no_module(self, tmp_path):
        assert find_rules_file(tmp_path) is None
        assert load_rules_file(tmp_path) is None

    def test_module_level_lists(self, tmp_path):
        (tmp_path / "token_utilities_rules.py").write_text(
            "from token_utilities.rules import StaticRule, TokenRule\n"
            "\n"
            "def glow(key, value):\n"
            "    return f'filter: drop-shadow(0 0 4px {value});'\n"
            "\n"
            "static_rules = [StaticRule('btn', 'padding: 0')]\n"
            "token_rules = [TokenRule(token='color', prefix='glow-', builder=glow)]\n"
            "variant_rules = [{'name': 'print', 'type': 'media', 'condition': 'print'}]\n"
        )
        rules = load_rules_file(tmp_path)
        assert rules is not None
        assert rules.static_rules == (StaticRule("btn", "padding: 0"),)
        assert rules.token_rules[0].css("a", "V") == "filter: drop-shadow(0 0 4px V);"
        assert rules.variant_rules[0].condition == "print"

    def test_rules_object(self, tmp_path):
        (tmp_path / "token_utilities_rules.py").write_text(
            "from token_utilities.rules import Rules, StaticRule\n"
            "rules = Rules(static_rules=(StaticRule('card', 'padding: 1rem'),))\n"
        )
        rules = load_rules_file(tmp_path)
        assert rules is not None
        assert rules.static_rules[0].class_name == "card"

    def test_module_reloaded_each_call(self, tmp_path):
        path = tmp_path / "token_utilities_rules.py"
        path.write_text("static_rules = [{'class': 'a', 'css': 'x: 1'}]\n")
        assert load_rules_file(tmp_path).static_rules[0].class_name == "a"
        path.write_text("static_rules = [{'class': 'b', 'css': 'x: 1'}]\n")
        assert load_rules_file(tmp_path).static_rules[0].class_name == "b"

    def test_broken_module_logged(self, tmp_path, caplog):
        (tmp_path / "token_utilities_rules.py").write_text("raise RuntimeError('boom')\n")
        with caplog.at_level(logging.WARNING, logger="token_utilities"):
            assert load_rules_file(tmp_path) is None
        assert any("boom" in r.getMessage() for r in caplog.records)

    def test_no_bytecode_left_behind(self, tmp_path):
        (tmp_path / "token_utilities_rules.py").write_text("static_rules = []\n")
        before = sys.dont_write_bytecode
        load_rules_file(tmp_path)
        assert not (tmp_path / "__pycache__").exists()
        assert sys.dont_write_bytecode == before

    def test_same_size_edit_picked_up(self, tmp_path):
        path = tmp_path / "token_utilities_rules.py"
        for name in ("a", "b", "c"):
            path.write_text(f"static_rules = [{{'class': '{name}', 'css': 'x: 1'}}]\n")
            assert load_rules_file(tmp_path).static_rules[0].class_name == name
