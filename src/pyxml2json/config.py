"""Converter configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields

from pyxml2json._constants import (
    DEFAULT_ATTRIBUTE_PREFIX,
    DEFAULT_CHILD_GROUP_SUFFIX,
    DEFAULT_CONTENT_ID,
)
from pyxml2json._errors import ERR_MSG_INVALID_CONFIG, InvalidConfigError


@dataclass(frozen=True)
class ConverterConfig:
    """Key naming options for the generated JSON.

    Values are inserted into the output as they are, without escaping, and
    no check is made that they keep generated keys unique.
    """

    attribute_prefix: str = DEFAULT_ATTRIBUTE_PREFIX
    content_id: str = DEFAULT_CONTENT_ID
    child_group_suffix: str = DEFAULT_CHILD_GROUP_SUFFIX

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise InvalidConfigError(
                    ERR_MSG_INVALID_CONFIG,
                    f"{f.name} must be a string, got {type(value).__name__}",
                )
