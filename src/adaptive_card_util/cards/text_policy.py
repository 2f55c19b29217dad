# -*- coding: utf-8 -*-
"""Size-bounded text policy for card text blocks.

Teams rejects cards above a payload limit, so a single text block is capped at
a UTF-8 byte ceiling. Measuring bytes needs a full pass over the text; the
policy skips that pass whenever the character count already decides it.
"""

from __future__ import annotations

import structlog
from dataclasses import dataclass
from typing import Any, Callable, Optional

MAX_TEXT_BYTES = 27 * 1024
TRUNCATE_CHARS = 5000
# Worst case UTF-8 is 4 bytes per character.
_MAX_BYTES_PER_CHAR = 4


@dataclass(frozen=True, slots=True)
class TextPolicyResult:
    """Outcome of applying the policy to one text payload."""

    text: Optional[str]
    was_truncated: bool = False


class TextPolicy:
    """Truncate text to ``truncate_chars`` characters when it exceeds ``max_bytes``."""

    def __init__(
        self,
        *,
        max_bytes: int = MAX_TEXT_BYTES,
        truncate_chars: int = TRUNCATE_CHARS,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        if max_bytes < _MAX_BYTES_PER_CHAR:
            raise ValueError(f"max_bytes must be at least {_MAX_BYTES_PER_CHAR}")
        safe_chars = max_bytes // _MAX_BYTES_PER_CHAR
        # A truncated prefix must always fit, so applying the policy twice is a no-op.
        if not 1 <= truncate_chars <= safe_chars:
            raise ValueError(f"truncate_chars must be between 1 and {safe_chars}")
        self.max_bytes = max_bytes
        self.truncate_chars = truncate_chars
        self._safe_chars = safe_chars
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def apply(self, text: Optional[str]) -> TextPolicyResult:
        """Return ``text`` unchanged when within budget, else its truncated prefix.

        Empty or missing text is returned as-is; callers decide not to render it.
        """
        if not text:
            return TextPolicyResult(text=text)

        length = len(text)
        if length <= self._safe_chars:
            return TextPolicyResult(text=text)

        if length > self.max_bytes:
            # UTF-8 never uses fewer bytes than characters.
            self._logger.error(
                "text_block_truncated",
                content_length=length,
                max_bytes=self.max_bytes,
                truncate_chars=self.truncate_chars,
            )
        else:
            # Lone surrogates (e.g. undecodable paths in tracebacks) count as 3 bytes.
            size = len(text.encode("utf-8", "surrogatepass"))
            if size <= self.max_bytes:
                return TextPolicyResult(text=text)
            self._logger.error(
                "text_block_truncated",
                size_bytes=size,
                max_bytes=self.max_bytes,
                truncate_chars=self.truncate_chars,
            )

        return TextPolicyResult(text=text[: min(self.truncate_chars, length)], was_truncated=True)
