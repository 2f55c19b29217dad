# -*- coding: utf-8 -*-
"""Map Cards to the Adaptive Card JSON shape and back."""

from __future__ import annotations

import json
from typing import Any, Mapping, cast

from adaptive_card_util.cards.schema import (
    AdaptiveCardSchema,
    ColumnSchema,
    ColumnSetSchema,
    ElementSchema,
    FactSetSchema,
    TextBlockSchema,
)
from adaptive_card_util.cards.types import (
    Card,
    DisplayBlock,
    Fact,
    FactSetBlock,
    FooterBlock,
    HeaderBlock,
    RowBlock,
    Spacing,
    TextBlock,
    TextSize,
    TextWeight,
)
from adaptive_card_util.exceptions import CardRenderError


class AdaptiveCardRenderer:
    """Serialize display blocks to Adaptive Card elements.

    Header blocks always carry ``weight`` and footer blocks ``isSubtle``, which
    is how ``parse`` tells them apart from plain text blocks.
    """

    def render(self, card: Card) -> AdaptiveCardSchema:
        return {
            "type": "AdaptiveCard",
            "version": card.schema_version,
            "body": [self._render_block(block) for block in card.blocks],
            "msteams": {"width": card.width},
        }

    def to_json(self, card: Card, *, indent: int | None = None) -> str:
        return json.dumps(self.render(card), ensure_ascii=False, indent=indent)

    def parse(self, data: Mapping[str, Any]) -> Card:
        """Rebuild a Card from a rendered payload."""
        if data.get("type") != "AdaptiveCard":
            raise CardRenderError("Payload is not an AdaptiveCard", element_type=data.get("type"))
        msteams = data.get("msteams") or {}
        card = Card(
            schema_version=str(data.get("version", "1.2")),
            width=str(msteams.get("width", "Full")),
        )
        for element in data.get("body") or []:
            card.append(self._parse_element(element))
        return card

    def from_json(self, raw: str) -> Card:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CardRenderError("Invalid card JSON", cause=exc) from exc
        if not isinstance(data, dict):
            raise CardRenderError("Card JSON must be an object")
        return self.parse(cast(dict[str, Any], data))

    def _render_block(self, block: DisplayBlock) -> ElementSchema:
        if isinstance(block, HeaderBlock):
            return {
                "type": "TextBlock",
                "text": block.text,
                "size": block.size.value,
                "weight": block.weight.value,
                "wrap": block.wrap,
            }
        if isinstance(block, TextBlock):
            return {
                "type": "TextBlock",
                "text": block.text,
                "size": block.size.value,
                "wrap": block.wrap,
            }
        if isinstance(block, FactSetBlock):
            return {
                "type": "FactSet",
                "facts": [{"title": f.title, "value": f.value} for f in block.facts],
            }
        if isinstance(block, RowBlock):
            return self._render_row(block)
        if isinstance(block, FooterBlock):
            return {
                "type": "TextBlock",
                "text": block.text,
                "size": block.size.value,
                "isSubtle": block.subtle,
                "spacing": block.spacing.value,
            }
        raise CardRenderError(f"Unknown block type: {type(block).__name__}")

    @staticmethod
    def _render_row(block: RowBlock) -> ColumnSetSchema:
        columns: list[ColumnSchema] = []
        for cell in block.cells:
            item: TextBlockSchema = {"type": "TextBlock", "text": cell, "wrap": True}
            if block.bold:
                item["weight"] = TextWeight.BOLDER.value
            columns.append({"type": "Column", "items": [item]})
        row: ColumnSetSchema = {"type": "ColumnSet", "columns": columns}
        if block.spacing is not Spacing.DEFAULT:
            row["spacing"] = block.spacing.value
        return row

    def _parse_element(self, element: Mapping[str, Any]) -> DisplayBlock:
        element_type = element.get("type")
        try:
            if element_type == "TextBlock":
                return self._parse_text_block(element)
            if element_type == "FactSet":
                facts = cast(FactSetSchema, element)["facts"]
                return FactSetBlock(facts=tuple(Fact(f["title"], f["value"]) for f in facts))
            if element_type == "ColumnSet":
                return self._parse_row(element)
        except (KeyError, TypeError, ValueError) as exc:
            raise CardRenderError(
                f"Malformed {element_type} element", element_type=element_type, cause=exc
            ) from exc
        raise CardRenderError(
            f"Unsupported element type: {element_type!r}", element_type=element_type
        )

    @staticmethod
    def _parse_text_block(element: Mapping[str, Any]) -> DisplayBlock:
        text = element["text"]
        size = TextSize(element.get("size", TextSize.DEFAULT.value))
        if "isSubtle" in element:
            return FooterBlock(
                text=text,
                size=size,
                subtle=bool(element["isSubtle"]),
                spacing=Spacing(element.get("spacing", Spacing.DEFAULT.value)),
            )
        if "weight" in element:
            return HeaderBlock(
                text=text,
                size=size,
                weight=TextWeight(element["weight"]),
                wrap=bool(element.get("wrap", True)),
            )
        return TextBlock(text=text, size=size, wrap=bool(element.get("wrap", True)))

    @staticmethod
    def _parse_row(element: Mapping[str, Any]) -> RowBlock:
        cells: list[str] = []
        bold = False
        for column in element["columns"]:
            items = column.get("items") or []
            first = items[0] if items else {}
            cells.append(str(first.get("text", "")))
            bold = bold or first.get("weight") == TextWeight.BOLDER.value
        return RowBlock(
            cells=tuple(cells),
            bold=bold,
            spacing=Spacing(element.get("spacing", Spacing.DEFAULT.value)),
        )
