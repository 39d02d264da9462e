from __future__ import annotations

from .builder import SyntaxErrorBuilder
from .config import FormatterConfig
from .errors import ConfigError, SyntaxErrorReport
from .format import SnippetFormatter, format_snippet
from .gutter import GutterFormat
from .spans import SourcePosition, SourceSpan
from .tokens import LocationToken, Token
from .tree import ErrorNode, RuleNode, TerminalNode, TreeNode
from .vocabulary import Vocabulary, token_display_text
from .walker import ParseTreeListener, Strategy, TraversalCallbacks, TreeFrame, walk

__all__ = [
    "ConfigError",
    "ErrorNode",
    "FormatterConfig",
    "GutterFormat",
    "LocationToken",
    "ParseTreeListener",
    "RuleNode",
    "SnippetFormatter",
    "SourcePosition",
    "SourceSpan",
    "Strategy",
    "SyntaxErrorBuilder",
    "SyntaxErrorReport",
    "TerminalNode",
    "Token",
    "TraversalCallbacks",
    "TreeFrame",
    "TreeNode",
    "Vocabulary",
    "format_snippet",
    "token_display_text",
    "walk",
]
