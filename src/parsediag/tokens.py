from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


EOF_DISPLAY_TEXT = "<EOF>"
EOF_TOKEN_TYPE = -1
INVALID_TOKEN_TYPE = 0


class Token(Protocol):
    """What the formatter needs to know about a lexer token.

    `line` is 1-based, `column` is 0-based. `stop_index` is inclusive.
    """

    @property
    def line(self) -> int: ...

    @property
    def column(self) -> int: ...

    @property
    def start_index(self) -> int: ...

    @property
    def stop_index(self) -> int: ...

    @property
    def is_eof(self) -> bool: ...


def quote_display_text(text: str) -> str:
    escaped = text.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    return f"'{escaped}'"


@dataclass(frozen=True, slots=True)
class LocationToken:
    """Location-only token for errors that have no real token, e.g. lexer failures."""

    line: int
    column: int
    start_index: int
    stop_index: int
    text: str | None = None
    is_eof: bool = False
    type: int = INVALID_TOKEN_TYPE

    def __repr__(self) -> str:
        shown = "<no text>" if self.text is None else quote_display_text(self.text)
        return f"[@-1,{self.start_index}:{self.stop_index}={shown},{self.line}:{self.column}]"


def token_text(token: Token, source_text: str) -> str:
    """Text covered by a token; an explicit `text` attribute wins over the source slice."""
    text = getattr(token, "text", None)
    if text is not None:
        return text
    if token.start_index < 0 or token.stop_index < token.start_index:
        return ""
    return source_text[token.start_index : token.stop_index + 1]
