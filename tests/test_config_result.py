"""Tests for the ConfigResult class in ManagePath."""

import pytest

from managepath.config_result import ConfigResult


class TestConfigResultUnit:
    """Unit tests for the ConfigResult class."""

    def test_empty_result_defaults(self):
        result = ConfigResult()
        assert result.target is None
        assert result.number is False
        assert result.validate is False
        assert result.extensions is None

    def test_dict_style_access(self):
        result = ConfigResult({"target": "user"})
        assert "target" in result
        assert "number" not in result
        assert result["target"] == "user"
        assert result.get("number", "false") == "false"

    def test_equality_with_dict_and_result(self):
        assert ConfigResult({"number": "true"}) == {"number": "true"}
        assert ConfigResult({"number": "true"}) == ConfigResult({"number": "true"})
        assert ConfigResult({"number": "true"}) != ConfigResult({"number": "false"})

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("1", True), ("on", True), ("false", False), ("0", False)],
    )
    def test_boolean_settings(self, value, expected):
        result = ConfigResult({"number": value, "validate": value})
        assert result.number is expected
        assert result.validate is expected

    def test_extensions_are_split(self):
        result = ConfigResult({"extensions": ".exe;.py;;"})
        assert result.extensions == (".exe", ".py")

    def test_empty_extensions_setting(self):
        assert ConfigResult({"extensions": ""}).extensions == ()

    def test_settings_are_copied(self):
        source = {"target": "user"}
        result = ConfigResult(source)
        source["target"] = "machine"
        assert result.target == "user"
