from typing import Callable, Iterator, List, Optional

from tree_sitter import Node


class ASTWalker:
    """Utilities for traversing and searching the JavaScript AST"""

    @staticmethod
    def iter_nodes(node: Node, skip: Callable[[Node], bool] | None = None) -> Iterator[Node]:
        """Pre-order traversal; children of skipped nodes are not visited"""
        stack = [node]
        while stack:
            current = stack.pop()
            if skip is not None and skip(current):
                continue
            yield current
            stack.extend(reversed(current.children))

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        return [n for n in ASTWalker.iter_nodes(node) if n.type == type_name]

    @staticmethod
    def find_errors(node: Node) -> List[Node]:
        """ERROR and MISSING nodes, in source order"""
        if not node.has_error:
            return []
        return [
            n
            for n in ASTWalker.iter_nodes(node, skip=lambda n: not n.has_error and not n.is_missing)
            if n.type == "ERROR" or n.is_missing
        ]
