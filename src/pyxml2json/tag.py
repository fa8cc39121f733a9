"""Parsed XML tag tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Tag:
    """A single XML element with its attributes, text and children."""

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    content: str = ""
    children: Sequence[Tag] = ()
