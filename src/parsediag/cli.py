from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import FormatterConfig
from .errors import ConfigError
from .format import SnippetFormatter
from .spans import SourcePosition, SourceSpan


logger = logging.getLogger(__name__)


def _config_from_args(args: argparse.Namespace) -> FormatterConfig:
    cfg = FormatterConfig.from_pyproject(args.config) if args.config else FormatterConfig()
    changes: dict[str, object] = {}
    if args.tab_size is not None:
        changes["tab_size"] = args.tab_size
    if args.before is not None:
        changes["lines_before"] = args.before
    if args.after is not None:
        changes["lines_after"] = args.after
    if args.indent is not None:
        changes["prefix"] = " " * args.indent
    if args.marker is not None:
        changes["marker"] = args.marker
    return cfg.evolve(**changes) if changes else cfg


def _span_from_args(args: argparse.Namespace) -> SourceSpan:
    start = SourcePosition(line=args.line, column=args.column)
    if args.stop_line is not None or args.stop_column is not None:
        stop = SourcePosition(
            line=args.stop_line if args.stop_line is not None else args.line,
            column=args.stop_column if args.stop_column is not None else args.column,
        )
    else:
        stop = SourcePosition(line=args.line, column=args.column + max(args.length, 1) - 1)
    return SourceSpan(start=start, stop=stop)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="parsediag", description="Print a diagnostic snippet for a source location")
    ap.add_argument("file", help="Source file")
    ap.add_argument("--line", type=int, required=True, help="1-based line of the first offending character")
    ap.add_argument("--column", type=int, required=True, help="0-based column of the first offending character")
    ap.add_argument("--stop-line", type=int, help="1-based line of the last offending character")
    ap.add_argument("--stop-column", type=int, help="0-based column of the last offending character")
    ap.add_argument("--length", type=int, default=1, help="Characters to mark when no stop is given")
    ap.add_argument("--tab-size", type=int)
    ap.add_argument("--before", type=int, help="Context lines before the span")
    ap.add_argument("--after", type=int, help="Context lines after the span")
    ap.add_argument("--indent", type=int, help="Indent every line by this many spaces")
    ap.add_argument("--marker", help="Marker character (default ^)")
    ap.add_argument("--config", help="pyproject.toml with a [tool.parsediag] table")
    ap.add_argument("-m", "--message", help="Message printed above the snippet")
    ap.add_argument("--json", action="store_true", help="Print message and snippet as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = Path(args.file).expanduser()
    try:
        formatter = SnippetFormatter(_config_from_args(args))
        src = path.read_text(encoding="utf-8")
    except (ConfigError, OSError) as e:
        print(f"parsediag: {e}", file=sys.stderr)
        return 2

    span = _span_from_args(args)
    logger.debug("rendering %s for %s", span, path)
    snippet = formatter.render(span, src)

    if args.json:
        payload = {"file": str(path), "message": args.message, "snippet": snippet}
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0

    if args.message:
        print(f"{path}:{span.start.line}:{span.start.column}: {args.message}")
    sys.stdout.write(snippet)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
