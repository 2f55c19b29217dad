"""Card building subsystem."""

from adaptive_card_util.cards.builder import AdaptiveCardUtil
from adaptive_card_util.cards.footer import FooterEnricher
from adaptive_card_util.cards.renderer import AdaptiveCardRenderer
from adaptive_card_util.cards.table_cache import (
    FieldDescriptor,
    TableCache,
    TableMeta,
    discover_fields,
    get_table_cache,
    mapping_meta,
)
from adaptive_card_util.cards.text_policy import TextPolicy, TextPolicyResult
from adaptive_card_util.cards.types import (
    Card,
    ConfigSource,
    DisplayBlock,
    Fact,
    FactSetBlock,
    FooterBlock,
    HeaderBlock,
    MachineNameLookup,
    RowBlock,
    Spacing,
    TextBlock,
    TextSize,
    TextWeight,
    TimestampFormatter,
)

__all__ = [
    "AdaptiveCardRenderer",
    "AdaptiveCardUtil",
    "Card",
    "ConfigSource",
    "DisplayBlock",
    "Fact",
    "FactSetBlock",
    "FieldDescriptor",
    "FooterBlock",
    "FooterEnricher",
    "HeaderBlock",
    "MachineNameLookup",
    "RowBlock",
    "Spacing",
    "TableCache",
    "TableMeta",
    "TextBlock",
    "TextPolicy",
    "TextPolicyResult",
    "TextSize",
    "TextWeight",
    "TimestampFormatter",
    "discover_fields",
    "get_table_cache",
    "mapping_meta",
]
