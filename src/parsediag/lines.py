from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass


_LINE_BREAK_RE = re.compile(r"\r?\n")

# Unicode space separators (Zs), line separators (Zl), paragraph separators (Zp).
_SPACE_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})

def split_lines(text: str) -> list[str]:
    """Split on `\r?\n`, dropping trailing empty lines like a line-oriented reader would."""
    lines = _LINE_BREAK_RE.split(text)
    while len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def trim_right(line: str) -> str:
    end = len(line)
    while end > 0 and line[end - 1] <= " ":
        end -= 1
    return line[:end]


def expand_tabs(line: str, tab_size: int) -> str:
    if "\t" not in line:
        return line

    out: list[str] = []
    p = 0
    for ch in line:
        if ch == "\t":
            n = tab_size - (p % tab_size)
            out.append(" " * n)
            p += n
        else:
            out.append(ch)
            p += 1
    return "".join(out)


def adjust_location(raw_line: str, raw_column: int, tab_size: int) -> int:
    """Map a column of the raw line onto its tab-expanded rendering."""
    p = 0
    for ch in raw_line[: max(raw_column, 0)]:
        if ch == "\t":
            p = (p // tab_size + 1) * tab_size
        else:
            p += 1
    return max(p, raw_column)


def is_space_char(ch: str) -> bool:
    return unicodedata.category(ch) in _SPACE_CATEGORIES


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """A source line prepared for display: right-trimmed and tab-expanded."""

    raw: str
    text: str
    tab_size: int

    @classmethod
    def of(cls, line: str, tab_size: int) -> "RenderedLine":
        raw = trim_right(line)
        return cls(raw=raw, text=expand_tabs(raw, tab_size), tab_size=tab_size)

    def __len__(self) -> int:
        return len(self.text)

    def column(self, raw_column: int) -> int:
        return adjust_location(self.raw, raw_column, self.tab_size)

    def is_blank_at(self, column: int) -> bool:
        # Columns past the end of the text count as visible so markers can
        # point just behind the last character (e.g. at EOF).
        return column < len(self.text) and is_space_char(self.text[column])
