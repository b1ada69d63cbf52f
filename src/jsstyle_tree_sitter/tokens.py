"""Flatten a tree-sitter tree into a token stream."""

import re
from typing import List

from tree_sitter import Node

from .node_types import ParseResult, Token, TokenKind
from .source_text import SourceText

# Nodes emitted as one token even though tree-sitter gives them children
ATOMIC_TYPES = {
    "string": TokenKind.STRING,
    "template_string": TokenKind.TEMPLATE,
    "regex": TokenKind.REGEX,
    "number": TokenKind.NUMBER,
    "comment": TokenKind.COMMENT,
    "html_comment": TokenKind.COMMENT,
}

LITERAL_KEYWORDS = {"true", "false", "null", "undefined", "this", "super"}

_WORD = re.compile(r"^[A-Za-z_$][\w$]*$")


def classify(node: Node, text: str) -> TokenKind:
    if node.type in ATOMIC_TYPES:
        return ATOMIC_TYPES[node.type]
    if node.type == "ERROR":
        return TokenKind.ERROR
    if node.type in LITERAL_KEYWORDS:
        return TokenKind.KEYWORD
    if node.is_named:
        # empty_statement and friends are named leaves spelled with punctuation
        return TokenKind.IDENTIFIER if _WORD.match(text) else TokenKind.PUNCTUATOR
    if _WORD.match(node.type):
        return TokenKind.KEYWORD
    return TokenKind.PUNCTUATOR


def _make_token(node: Node, source: SourceText) -> Token:
    start, end = source.node_span(node)
    line, column = source.position(start)
    text = source.text[start:end]
    return Token(
        kind=classify(node, text),
        text=text,
        line=line,
        column=column,
        offset=start,
        end_offset=end,
        node_type=node.type,
    )


def tokenize(parse_result: ParseResult) -> List[Token]:
    """Return the leaf tokens of the tree in source order.

    MISSING nodes inserted by error recovery are zero-width and produce no token.
    """
    source = parse_result.source
    root = parse_result.tree.root_node
    tokens: List[Token] = []
    stack = list(reversed(root.children))
    while stack:
        node = stack.pop()
        if node.is_missing:
            continue
        if node.type in ATOMIC_TYPES or node.child_count == 0:
            if node.end_byte > node.start_byte:
                tokens.append(_make_token(node, source))
            continue
        stack.extend(reversed(node.children))
    return tokens
