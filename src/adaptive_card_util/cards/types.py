# -*- coding: utf-8 -*-
"""Card model: display blocks, facts and collaborator protocols.

A Card is an ordered, append-only sequence of display blocks. The block
variants carry only what their element needs; mapping to the Adaptive Card
JSON shape happens in ``cards.renderer``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Protocol, Union


class TextSize(str, Enum):
    """Adaptive Card text sizes used by the builders."""

    DEFAULT = "Default"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class TextWeight(str, Enum):
    """Adaptive Card font weights."""

    DEFAULT = "Default"
    BOLDER = "Bolder"


class Spacing(str, Enum):
    """Adaptive Card spacing before an element."""

    DEFAULT = "Default"
    SMALL = "Small"
    EXTRA_LARGE = "ExtraLarge"


@dataclass(frozen=True, slots=True)
class Fact:
    """A labeled key-value pair inside a fact set. Value is never empty."""

    title: str
    value: str


@dataclass(frozen=True, slots=True)
class HeaderBlock:
    """Card title or subtitle."""

    text: str
    size: TextSize = TextSize.MEDIUM
    weight: TextWeight = TextWeight.BOLDER
    wrap: bool = True


@dataclass(frozen=True, slots=True)
class TextBlock:
    """Free text such as exception details or an additional body."""

    text: str
    size: TextSize = TextSize.SMALL
    wrap: bool = True


@dataclass(frozen=True, slots=True)
class FactSetBlock:
    """List of facts rendered as a two-column key/value set."""

    facts: tuple[Fact, ...] = ()


@dataclass(frozen=True, slots=True)
class RowBlock:
    """One table row; ``bold`` marks the header row."""

    cells: tuple[str, ...] = ()
    bold: bool = False
    spacing: Spacing = Spacing.DEFAULT


@dataclass(frozen=True, slots=True)
class FooterBlock:
    """Small, subtle metadata line at the bottom of a card."""

    text: str
    size: TextSize = TextSize.SMALL
    subtle: bool = True
    spacing: Spacing = Spacing.SMALL


DisplayBlock = Union[HeaderBlock, TextBlock, FactSetBlock, RowBlock, FooterBlock]


@dataclass(slots=True)
class Card:
    """Structured notification payload for one build call.

    Blocks are kept in visual top-to-bottom order. They can only be appended;
    ``blocks`` is exposed as a tuple so callers cannot reorder or remove them.
    """

    schema_version: str = "1.2"
    width: str = "Full"
    _blocks: list[DisplayBlock] = field(default_factory=list, repr=False)

    def append(self, block: DisplayBlock) -> None:
        self._blocks.append(block)

    @property
    def blocks(self) -> tuple[DisplayBlock, ...]:
        return tuple(self._blocks)

    def __iter__(self) -> Iterator[DisplayBlock]:
        return iter(tuple(self._blocks))

    def __len__(self) -> int:
        return len(self._blocks)


class ConfigSource(Protocol):
    """Key-based configuration lookup (e.g. ``Environment``, ``ProjectName``)."""

    def get_value(self, key: str) -> Optional[str]:
        ...


class MachineNameLookup(Protocol):
    """Return the host name; may raise."""

    def __call__(self) -> str:
        ...


class TimestampFormatter(Protocol):
    """Return the current moment formatted for ``zone``."""

    def __call__(self, zone: str) -> str:
        ...
