"""Position bookkeeping between tree-sitter byte offsets and text offsets."""

from bisect import bisect_right
from typing import List, Tuple

from tree_sitter import Node


class SourceText:
    """Decoded source with byte/char offset mapping and a line table.

    tree-sitter reports byte offsets into the UTF-8 encoding; rules and
    violations work with character offsets, 1-based lines and 1-based columns.
    """

    def __init__(self, text: str):
        self.text = text
        self.data = text.encode("utf-8")
        self._line_starts = self._compute_line_starts(text)
        self._byte_to_char: List[int] | None = None
        if len(self.data) != len(text):
            self._byte_to_char = self._compute_byte_map(text)

    @staticmethod
    def _compute_line_starts(text: str) -> List[int]:
        starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                starts.append(i + 1)
        return starts

    @staticmethod
    def _compute_byte_map(text: str) -> List[int]:
        mapping: List[int] = []
        for i, ch in enumerate(text):
            mapping.extend([i] * len(ch.encode("utf-8")))
        mapping.append(len(text))
        return mapping

    def __len__(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def char_offset(self, byte_offset: int) -> int:
        if self._byte_to_char is None:
            return byte_offset
        return self._byte_to_char[min(byte_offset, len(self._byte_to_char) - 1)]

    def position(self, offset: int) -> Tuple[int, int]:
        """Return the (line, column) of a char offset, both 1-based."""
        line_idx = bisect_right(self._line_starts, offset) - 1
        return line_idx + 1, offset - self._line_starts[line_idx] + 1

    def line_start(self, line: int) -> int:
        return self._line_starts[line - 1]

    def node_span(self, node: Node) -> Tuple[int, int]:
        return self.char_offset(node.start_byte), self.char_offset(node.end_byte)

    def node_text(self, node: Node) -> str:
        start, end = self.node_span(node)
        return self.text[start:end]

    def lines(self) -> List[str]:
        """Lines without their terminators (a trailing '\\r' is dropped too)."""
        lines = self.text.split("\n")
        return [line[:-1] if line.endswith("\r") else line for line in lines]
