from __future__ import annotations

from dataclasses import dataclass

from .tokens import Token


class ConfigError(ValueError):
    """Invalid formatter configuration, raised at construction time."""


@dataclass(slots=True)
class SyntaxErrorReport(Exception):
    message: str
    snippet: str
    start: Token | None = None
    stop: Token | None = None
    cause: BaseException | None = None

    def __post_init__(self) -> None:
        self.__cause__ = self.cause

    def __str__(self) -> str:
        if self.snippet:
            return f"{self.message}\n\n{self.snippet}"
        return self.message
