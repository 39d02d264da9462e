from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .tokens import EOF_DISPLAY_TEXT, EOF_TOKEN_TYPE, Token, quote_display_text


NO_TOKEN_DISPLAY_TEXT = "<no token>"


@dataclass(frozen=True, slots=True)
class TokenName:
    literal: str
    symbol: str


class Vocabulary:
    """Names for the token types of a grammar.

    Every vocabulary knows EOF as `<EOF>` (literal) / `EOF` (symbol). The
    display name of a token type is its literal name.

        vocab = Vocabulary({STRING: ("<string>", "STRING")})
        vocab.display_name(STRING)  # '<string>'
    """

    __slots__ = ("_names",)

    def __init__(self, names: Mapping[int, tuple[str, str]] | None = None) -> None:
        self._names: dict[int, TokenName] = {}
        self.add(EOF_TOKEN_TYPE, EOF_DISPLAY_TEXT, "EOF")
        for token_type, (literal, symbol) in (names or {}).items():
            self.add(token_type, literal, symbol)

    def add(self, token_type: int, literal: str, symbol: str) -> "Vocabulary":
        self._names[token_type] = TokenName(literal=literal, symbol=symbol)
        return self

    @property
    def max_token_type(self) -> int:
        return max(self._names)

    def literal_name(self, token_type: int) -> str | None:
        name = self._names.get(token_type)
        return None if name is None else name.literal

    def symbolic_name(self, token_type: int) -> str | None:
        name = self._names.get(token_type)
        return None if name is None else name.symbol

    def display_name(self, token_type: int) -> str | None:
        return self.literal_name(token_type)

    def __contains__(self, token_type: object) -> bool:
        return token_type in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        entries = ",".join(
            f"{{token={t},literal={n.literal},symbol={n.symbol}}}" for t, n in sorted(self._names.items())
        )
        return f"Vocabulary[{entries}]"


def token_display_text(token: Token | None, vocabulary: Vocabulary | None = None) -> str:
    """How a token is named in parser messages.

    Tries the vocabulary's display name for the token type, then `<EOF>` for
    EOF tokens, then the quoted token text, then `<type>`.
    """
    if token is None:
        return NO_TOKEN_DISPLAY_TEXT

    token_type = getattr(token, "type", None)
    if vocabulary is not None and token_type is not None:
        name = vocabulary.display_name(token_type)
        if name is not None:
            return name

    if getattr(token, "is_eof", False) or token_type == EOF_TOKEN_TYPE:
        return EOF_DISPLAY_TEXT
    text = getattr(token, "text", None)
    if text is None:
        return f"<{token_type}>"
    return quote_display_text(text)


def token_type_display_text(token_type: int, vocabulary: Vocabulary | None = None) -> str:
    if vocabulary is not None:
        name = vocabulary.display_name(token_type)
        if name is not None:
            return name
    if token_type == EOF_TOKEN_TYPE:
        return EOF_DISPLAY_TEXT
    return str(token_type)


def expected_display_text(expected: Iterable[int | str], vocabulary: Vocabulary | None = None) -> str:
    """Render a set of expected tokens: a single item bare, otherwise `{a, b}`."""
    items = [e if isinstance(e, str) else token_type_display_text(e, vocabulary) for e in expected]
    if len(items) == 1:
        return items[0]
    return "{" + ", ".join(items) + "}"
