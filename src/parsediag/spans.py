from __future__ import annotations

from dataclasses import dataclass

from .tokens import Token, token_text


@dataclass(frozen=True, slots=True, order=True)
class SourcePosition:
    """A (line, column) location, ordered lexicographically.

    Lines are 1-based, columns 0-based. Anything below that is invalid.
    """

    line: int
    column: int

    @property
    def is_valid(self) -> bool:
        return self.line >= 1 and self.column >= 0

    @property
    def line0(self) -> int:
        return self.line - 1

    @classmethod
    def of_start(cls, token: Token) -> "SourcePosition":
        return cls(line=token.line, column=token.column)

    @classmethod
    def of_stop(cls, token: Token, source_text: str) -> "SourcePosition":
        """Position of the last character of `token`.

        Multi-line tokens (block strings, comments) move the position down to
        the line their last character is on.
        """
        line, column = token.line, token.column
        if token.is_eof:
            return cls(line=line, column=column)

        text = token_text(token, source_text)
        for ch in text[:-1]:
            if ch == "\r":
                continue
            if ch == "\n":
                line += 1
                column = 0
            else:
                column += 1
        return cls(line=line, column=column)


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Inclusive [start, stop] range of offending positions."""

    start: SourcePosition
    stop: SourcePosition

    @classmethod
    def from_tokens(cls, start: Token, stop: Token, source_text: str) -> "SourceSpan":
        return cls(
            start=SourcePosition.of_start(start),
            stop=SourcePosition.of_stop(stop, source_text),
        )

    def normalized(self) -> "SourceSpan | None":
        """Make both ends valid and ordered, or return None if neither is valid.

        Start and stop are not checked against each other beyond ordering: a
        start after its stop collapses onto the stop position.
        """
        start, stop = self.start, self.stop
        if not start.is_valid and not stop.is_valid:
            return None
        if start.is_valid and not stop.is_valid:
            stop = start
        elif not start.is_valid or stop < start:
            start = stop
        return SourceSpan(start=start, stop=stop)
