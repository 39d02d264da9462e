from __future__ import annotations

import logging

from .config import FormatterConfig
from .gutter import GutterFormat
from .lines import RenderedLine, split_lines
from .spans import SourceSpan
from .tokens import Token


logger = logging.getLogger(__name__)


class SnippetFormatter:
    """Render the source lines around an offending span with markers below it.

    Example (lines_before=1, lines_after=1):

         06: justo duo dolores et ea rebum.
         07: ipsum dolor sit amet.
                             ^^^^^
         08: Lorem ipsum

    Subclasses may override `gutter_format`, `format_missing_location` and
    `marker`. Instances hold no per-call state and can be shared.
    """

    __slots__ = ("config",)

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self.config = config if config is not None else FormatterConfig()

    @property
    def marker(self) -> str:
        return self.config.marker

    def gutter_format(self, total_lines: int, highest_line: int) -> GutterFormat:
        return GutterFormat.for_document(total_lines, highest_line)

    def format_missing_location(self, cause: BaseException | None) -> str:
        if cause is None:
            return ""
        return str(cause)

    def format(
        self,
        start: Token,
        stop: Token,
        source_text: str,
        cause: BaseException | None = None,
    ) -> str:
        return self.render(SourceSpan.from_tokens(start, stop, source_text), source_text, cause)

    def render(
        self,
        span: SourceSpan,
        source_text: str,
        cause: BaseException | None = None,
    ) -> str:
        resolved = span.normalized()
        if resolved is None:
            logger.debug("no usable location in %r, using fallback text", span)
            return self.format_missing_location(cause)

        cfg = self.config
        start, stop = resolved.start, resolved.stop
        start0, stop0 = start.line0, stop.line0

        lines = split_lines(source_text)
        if len(lines) <= stop0 < source_text.count("\n") + 1:
            # EOF tokens address the empty line after a final line break.
            lines.extend([""] * (stop0 + 1 - len(lines)))
        last_shown = min(stop0 + cfg.lines_after, len(lines) - 1)
        gutter = self.gutter_format(len(lines), last_shown + 1)

        out: list[str] = []
        for n in range(max(start0 - cfg.lines_before, 0), last_shown + 1):
            line = RenderedLine.of(lines[n], cfg.tab_size)
            out.append(f"{cfg.prefix}{gutter.format(n + 1)}{line.text}\n")

            if not start0 <= n <= stop0:
                continue
            # An empty line in the middle of a multi-line span gets no marker line.
            if start0 < n < stop0 and len(line) == 0:
                continue
            out.append(self._marker_line(line, n, resolved, gutter))

        return "".join(out)

    def _marker_line(self, line: RenderedLine, n: int, span: SourceSpan, gutter: GutterFormat) -> str:
        start0, stop0 = span.start.line0, span.stop.line0
        marker = self.marker

        extent = len(line)
        first = 0
        if n == start0:
            first = line.column(span.start.column)
            extent = max(first + 1, extent)
        if n == stop0:
            extent = line.column(span.stop.column) + 1

        buf = [self.config.prefix, gutter.blank(), " " * first]
        print_marker = False
        for c in range(first, extent):
            print_marker = print_marker or not line.is_blank_at(c)
            buf.append(marker if print_marker else " ")

        text = "".join(buf)
        if n < stop0:
            text = text.rstrip(" ")
        return text + "\n"


_DEFAULT = SnippetFormatter()


def format_snippet(
    span: SourceSpan,
    source_text: str,
    *,
    config: FormatterConfig | None = None,
    cause: BaseException | None = None,
) -> str:
    formatter = _DEFAULT if config is None else SnippetFormatter(config)
    return formatter.render(span, source_text, cause)
