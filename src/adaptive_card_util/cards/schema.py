"""Adaptive Card JSON element types (schema 1.2 subset). Keys match the wire format (camelCase)."""

from __future__ import annotations

from typing import Literal, TypedDict, Union


class TextBlockSchema(TypedDict, total=False):
    """TextBlock element."""

    type: Literal["TextBlock"]
    text: str
    size: str
    weight: str
    wrap: bool
    isSubtle: bool
    spacing: str


class FactSchema(TypedDict):
    """FactSet entry."""

    title: str
    value: str


class FactSetSchema(TypedDict):
    """FactSet element."""

    type: Literal["FactSet"]
    facts: list[FactSchema]


class ColumnSchema(TypedDict):
    """Column inside a ColumnSet."""

    type: Literal["Column"]
    items: list[TextBlockSchema]


class ColumnSetSchema(TypedDict, total=False):
    """ColumnSet element (one table row)."""

    type: Literal["ColumnSet"]
    columns: list[ColumnSchema]
    spacing: str


ElementSchema = Union[TextBlockSchema, FactSetSchema, ColumnSetSchema]


class MsTeamsSchema(TypedDict):
    """Teams-specific card properties."""

    width: str


class AdaptiveCardSchema(TypedDict):
    """Top-level AdaptiveCard object."""

    type: Literal["AdaptiveCard"]
    version: str
    body: list[ElementSchema]
    msteams: MsTeamsSchema
