from pathlib import Path

import tree_sitter_javascript as tsjs
from tree_sitter import Language, Parser

from .ast_walker import ASTWalker
from .node_types import ParseResult, SyntaxIssue
from .source_text import SourceText

JS_LANGUAGE = Language(tsjs.language())


class JSParser:
    """Thin wrapper around the tree-sitter JavaScript grammar"""

    def __init__(self):
        self.language = JS_LANGUAGE

    def parse_string(self, source: str) -> ParseResult:
        """Parse source text. A new tree-sitter parser is used per call."""
        text = SourceText(source)
        tree = Parser(self.language).parse(text.data)
        return ParseResult(tree=tree, source=text, errors=self._collect_errors(tree.root_node, text))

    def parse_file(self, file_path: Path) -> ParseResult:
        return self.parse_string(Path(file_path).read_text(encoding="utf-8"))

    def _collect_errors(self, root, text: SourceText) -> list[SyntaxIssue]:
        errors = []
        for node in ASTWalker.find_errors(root):
            offset = text.char_offset(node.start_byte)
            line, column = text.position(offset)
            errors.append(
                SyntaxIssue(
                    line=line,
                    column=column,
                    offset=offset,
                    missing=node.is_missing,
                    text=node.type if node.is_missing else text.node_text(node)[:40],
                )
            )
        return errors
