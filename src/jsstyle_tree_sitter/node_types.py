from dataclasses import dataclass, field
from enum import Enum
from typing import List

from tree_sitter import Tree

from .source_text import SourceText


class TokenKind(str, Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    STRING = "string"
    TEMPLATE = "template"
    NUMBER = "number"
    REGEX = "regex"
    PUNCTUATOR = "punctuator"
    COMMENT = "comment"
    ERROR = "error"


@dataclass(frozen=True)
class Token:
    """A lexical token with its position in the source (1-based line/column)"""

    kind: TokenKind
    text: str
    line: int
    column: int
    offset: int
    end_offset: int
    node_type: str = ""

    @property
    def end_line(self) -> int:
        return self.line + self.text.count("\n")


@dataclass
class SyntaxIssue:
    """A region tree-sitter could not parse"""

    line: int
    column: int
    offset: int
    missing: bool = False
    text: str = ""


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: SourceText
    errors: List[SyntaxIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
