from .ast_walker import ASTWalker
from .js_patterns import DeclaredName, JSPatterns
from .node_types import ParseResult, SyntaxIssue, Token, TokenKind
from .parser import JSParser
from .source_text import SourceText
from .tokens import tokenize

__all__ = [
    "ASTWalker",
    "DeclaredName",
    "JSParser",
    "JSPatterns",
    "ParseResult",
    "SourceText",
    "SyntaxIssue",
    "Token",
    "TokenKind",
    "tokenize",
]
