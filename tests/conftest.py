"""Shared test fixtures."""

import pytest

from pyxml2json import ConverterConfig, Tag


@pytest.fixture
def default_config():
    return ConverterConfig()


@pytest.fixture
def custom_config():
    return ConverterConfig(attribute_prefix="-", content_id="text", child_group_suffix="_list")


@pytest.fixture
def nested_tree():
    return Tag(
        "a",
        attributes={"a_a": "1"},
        content="hola",
        children=(
            Tag("b", children=(Tag("d", attributes={"a_a": "2"}),)),
            Tag("c"),
        ),
    )
