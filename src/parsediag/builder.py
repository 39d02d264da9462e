from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NoReturn

from .errors import SyntaxErrorReport
from .format import SnippetFormatter
from .tokens import EOF_DISPLAY_TEXT, Token, quote_display_text
from .tree import RuleNode, TerminalNode
from .vocabulary import Vocabulary, expected_display_text, token_display_text


ExceptionFactory = Callable[[Token, Token, str, str, BaseException | None], BaseException]


def _default_exception(
    start: Token, stop: Token, snippet: str, message: str, cause: BaseException | None
) -> BaseException:
    return SyntaxErrorReport(message=message, snippet=snippet, start=start, stop=stop, cause=cause)


def _start_of(node: object) -> Token:
    if isinstance(node, RuleNode):
        if node.start is None:
            raise ValueError(f"rule node {node.rule_name!r} has no start token")
        return node.start
    if isinstance(node, TerminalNode):
        return node.symbol
    raise TypeError(f"unsupported syntax tree type: {type(node).__name__}")


def _stop_of(node: object) -> Token:
    if isinstance(node, RuleNode):
        if node.stop is None:
            raise ValueError(f"rule node {node.rule_name!r} has no stop token")
        return node.stop
    if isinstance(node, TerminalNode):
        return node.symbol
    raise TypeError(f"unsupported syntax tree type: {type(node).__name__}")


class SyntaxErrorBuilder:
    """Collect the location of a syntax error and raise it.

    Start and stop are not checked against each other. A start after its stop
    renders as a single point at the stop position.
    """

    def __init__(
        self,
        message: str,
        source_text: str,
        *,
        formatter: SnippetFormatter | None = None,
        exception_factory: ExceptionFactory | None = None,
    ) -> None:
        self.message = message
        self.source_text = source_text
        self.formatter = formatter if formatter is not None else SnippetFormatter()
        self.exception_factory = exception_factory or _default_exception
        self.start: Token | None = None
        self.stop: Token | None = None
        self.cause: BaseException | None = None

    def with_start(self, where: Token | RuleNode | TerminalNode) -> "SyntaxErrorBuilder":
        self.start = _start_of(where) if isinstance(where, (RuleNode, TerminalNode)) else where
        return self

    def with_stop(self, where: Token | RuleNode | TerminalNode) -> "SyntaxErrorBuilder":
        self.stop = _stop_of(where) if isinstance(where, (RuleNode, TerminalNode)) else where
        return self

    def with_token(self, token: Token) -> "SyntaxErrorBuilder":
        self.start = self.stop = token
        return self

    def with_node(self, node: RuleNode | TerminalNode) -> "SyntaxErrorBuilder":
        self.start = _start_of(node)
        self.stop = _stop_of(node)
        return self

    def with_cause(self, cause: BaseException | None) -> "SyntaxErrorBuilder":
        self.cause = cause
        return self

    def report(self) -> NoReturn:
        if self.start is None:
            raise ValueError("start token must be specified")
        if self.stop is None:
            raise ValueError("stop token must be specified")

        snippet = self.formatter.format(self.start, self.stop, self.source_text, self.cause)
        raise self.exception_factory(self.start, self.stop, snippet, self.message, self.cause)


def token_recognition_message(text: str, has_eof: bool = False) -> str:
    shown = EOF_DISPLAY_TEXT if has_eof else quote_display_text(text)
    return f"token recognition error at: {shown}"


def no_viable_alternative_message(text: str | None) -> str:
    shown = EOF_DISPLAY_TEXT if text is None else quote_display_text(text)
    return f"no viable alternative at input {shown}"


def _shown(token: Token | str | None, vocabulary: Vocabulary | None) -> str:
    # Strings are taken as already rendered.
    if isinstance(token, str):
        return token
    return token_display_text(token, vocabulary)


def mismatched_input_message(
    found: Token | str | None, expected: Iterable[int | str], vocabulary: Vocabulary | None = None
) -> str:
    return f"mismatched input {_shown(found, vocabulary)} expecting {expected_display_text(expected, vocabulary)}"


def missing_token_message(
    expected: Iterable[int | str], near: Token | str | None, vocabulary: Vocabulary | None = None
) -> str:
    return f"missing {expected_display_text(expected, vocabulary)} at {_shown(near, vocabulary)}"


def extraneous_input_message(
    found: Token | str | None, expected: Iterable[int | str], vocabulary: Vocabulary | None = None
) -> str:
    return f"extraneous input {_shown(found, vocabulary)} expecting {expected_display_text(expected, vocabulary)}"
