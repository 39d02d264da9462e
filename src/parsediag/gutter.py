from __future__ import annotations

from dataclasses import dataclass


def digit_width(highest: int) -> int:
    """Smallest number of digits d (at least 1) with 10**d > highest."""
    d = 1
    while 10**d <= highest:
        d += 1
    return d


@dataclass(frozen=True, slots=True)
class GutterFormat:
    """Fixed-width line number column, e.g. `07: `.

    Every string returned by `format()` has the same length so source lines
    and marker lines stay aligned.
    """

    width: int
    suffix: str = ": "
    pad: str = "0"

    @classmethod
    def empty(cls) -> "GutterFormat":
        return cls(width=0, suffix="", pad="")

    @classmethod
    def for_document(cls, total_lines: int, highest_line: int) -> "GutterFormat":
        if total_lines <= 1:
            return cls.empty()
        return cls(width=digit_width(highest_line))

    def __len__(self) -> int:
        return self.width + len(self.suffix)

    def format(self, line_number: int) -> str:
        if self.width == 0:
            return self.suffix
        digits = str(line_number)
        if len(digits) > self.width:
            raise ValueError(f"line number {line_number} does not fit a gutter of width {self.width}")
        return digits.rjust(self.width, self.pad) + self.suffix

    def blank(self) -> str:
        return " " * len(self)
