from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .errors import ConfigError


logger = logging.getLogger(__name__)

PYPROJECT_TABLE = "parsediag"


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Settings for `SnippetFormatter`.

    tab_size:      tab stop width used to expand tabs in displayed lines
    lines_before:  context lines shown above the first marked line
    lines_after:   context lines shown below the last marked line
    prefix:        literal text put in front of every emitted line
    marker:        character drawn under the offending columns
    """

    tab_size: int = 8
    lines_before: int = 0
    lines_after: int = 0
    prefix: str = " "
    marker: str = "^"

    def __post_init__(self) -> None:
        if self.tab_size < 1:
            raise ConfigError("tab_size must be at least 1")
        if self.lines_before < 0:
            raise ConfigError("lines_before must not be negative")
        if self.lines_after < 0:
            raise ConfigError("lines_after must not be negative")
        if len(self.marker) != 1:
            raise ConfigError(f"marker must be a single character, got {self.marker!r}")
        if "\n" in self.prefix or "\r" in self.prefix:
            raise ConfigError("prefix must not contain line breaks")

    @classmethod
    def with_indent(cls, indent: int, **kw: object) -> "FormatterConfig":
        if indent < 0:
            raise ConfigError("indent must not be negative")
        if "prefix" in kw:
            raise ConfigError("with_indent sets the prefix, do not pass prefix as well")
        return cls(prefix=" " * indent, **kw)  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "FormatterConfig":
        known = {f.name: f for f in fields(cls)}
        kw: dict[str, object] = {}
        for key, value in data.items():
            name = key.replace("-", "_")
            if name == "indent":
                if not isinstance(value, int) or isinstance(value, bool):
                    raise ConfigError(f"indent must be an integer, got {value!r}")
                kw["prefix"] = " " * value
                continue
            if name not in known:
                raise ConfigError(f"unknown formatter option: {key!r}")
            expected = int if name in ("tab_size", "lines_before", "lines_after") else str
            if not isinstance(value, expected) or isinstance(value, bool):
                raise ConfigError(f"{key} must be of type {expected.__name__}, got {value!r}")
            kw[name] = value
        return cls(**kw)  # type: ignore[arg-type]

    @classmethod
    def from_pyproject(cls, path: str | Path) -> "FormatterConfig":
        p = Path(path).expanduser()
        try:
            data = tomllib.loads(p.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{p}: {e}") from e

        table = data.get("tool", {}).get(PYPROJECT_TABLE)
        if table is None:
            logger.debug("no [tool.%s] table in %s, using defaults", PYPROJECT_TABLE, p)
            return cls()
        if not isinstance(table, dict):
            raise ConfigError(f"{p}: [tool.{PYPROJECT_TABLE}] must be a table")
        logger.debug("loaded formatter options from %s: %s", p, sorted(table))
        return cls.from_mapping(table)

    def evolve(self, **changes: object) -> "FormatterConfig":
        return replace(self, **changes)  # type: ignore[arg-type]
