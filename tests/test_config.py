"""Converter configuration tests."""

import dataclasses

import pytest

from pyxml2json import ConverterConfig, InvalidConfigError


class TestConverterConfig:
    def test_defaults(self, default_config):
        assert default_config.attribute_prefix == "@"
        assert default_config.content_id == "#content"
        assert default_config.child_group_suffix == "s"

    def test_override_one(self):
        config = ConverterConfig(child_group_suffix="List")
        assert config.child_group_suffix == "List"
        assert config.attribute_prefix == "@"

    def test_frozen(self, default_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            default_config.content_id = "text"

    def test_empty_strings_allowed(self):
        config = ConverterConfig(attribute_prefix="", child_group_suffix="")
        assert config.attribute_prefix == ""

    @pytest.mark.parametrize("field", ["attribute_prefix", "content_id", "child_group_suffix"])
    def test_non_string_rejected(self, field):
        with pytest.raises(InvalidConfigError) as exc_info:
            ConverterConfig(**{field: 1})
        assert field in exc_info.value.internal()
