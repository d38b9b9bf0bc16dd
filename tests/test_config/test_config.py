"""Tests for the JSON configuration loader."""

import json

import pytest

from token_utilities.config import (
    DEFAULT_GENERATED_PATH,
    DEFAULT_LAYER,
    ConfigError,
    UtilityConfig,
    config_from_dict,
    load_config,
)
from token_utilities.rules import DefaultRules, StaticRule


class TestConfigFromDict:
    def test_minimal(self):
        config = config_from_dict({"designTokenSource": "tokens.css", "content": ["src/**/*.jsx"]})
        assert config.design_token_source == "tokens.css"
        assert config.content == ("src/**/*.jsx",)
        assert config.custom_media_source is None
        assert config.generated is None
        assert config.layer == DEFAULT_LAYER
        assert config.default_rules == DefaultRules()
        assert config.rules_file

    def test_empty(self):
        assert config_from_dict({}) == UtilityConfig()

    def test_content_string(self):
        assert config_from_dict({"content": "src/**/*.vue"}).content == ("src/**/*.vue",)

    def test_class_matchers_merged(self):
        config = config_from_dict(
            {
                "classMatcher": ["tw"],
                "extraction": {"attributes": ["styleName", "tw"], "functions": ["cx"]},
            }
        )
        assert config.class_matchers == ("tw", "styleName", "cx")

    @pytest.mark.parametrize(
        "value, expected",
        [
            (False, None),
            (True, DEFAULT_GENERATED_PATH),
            (None, None),
            ("out/u.css", "out/u.css"),
            ({"path": "out/u.css"}, "out/u.css"),
            ({}, DEFAULT_GENERATED_PATH),
        ],
    )
    def test_generated(self, value, expected):
        assert config_from_dict({"generated": value}).generated == expected

    def test_generated_absent_means_no_reference_file(self):
        assert UtilityConfig().generated is None
        assert config_from_dict({"content": ["src/**"]}).generated is None

    def test_generated_wrong_type(self):
        with pytest.raises(ConfigError, match="'generated'"):
            config_from_dict({"generated": 3})

    def test_default_rules_flags(self):
        config = config_from_dict({"defaultRules": {"staticRules": False, "variantRules": False}})
        assert config.default_rules == DefaultRules(static=False, token=True, variant=False)

    def test_extend(self):
        config = config_from_dict({"extend": {"staticRules": [{"class": "btn", "css": "padding: 0"}]}})
        assert config.extend.static_rules == (StaticRule("btn", "padding: 0"),)

    def test_misc_options(self):
        config = config_from_dict({"layer": "gen", "rulesFile": False, "logs": True})
        assert config.layer == "gen"
        assert not config.rules_file
        assert config.logs

    def test_unknown_option(self):
        with pytest.raises(ConfigError, match="unknown option\\(s\\): designTokens"):
            config_from_dict({"designTokens": "x"})

    def test_not_an_object(self):
        with pytest.raises(ConfigError, match="config must be an object"):
            config_from_dict(["x"])

    def test_bad_content(self):
        with pytest.raises(ConfigError, match="'content' must be a list of strings"):
            config_from_dict({"content": [1]})


class TestLoadConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "token-utilities.json"
        path.write_text(json.dumps({"designTokenSource": "t.css", "content": ["*.html"]}), encoding="utf-8")
        assert load_config(path).design_token_source == "t.css"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="config file not found") as info:
            load_config(tmp_path / "nope.json")
        assert info.value.source.endswith("nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_config(path)

    def test_errors_name_the_file(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"bogus": 1}', encoding="utf-8")
        with pytest.raises(ConfigError) as info:
            load_config(path)
        assert str(info.value).startswith(str(path))
        assert "unknown option(s): bogus" in str(info.value)
