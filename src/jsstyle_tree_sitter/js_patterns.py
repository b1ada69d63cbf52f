"""JavaScript-specific AST pattern recognition."""

from typing import Iterator, NamedTuple, Optional

from tree_sitter import Node

from .ast_walker import ASTWalker

SIMPLE_STATEMENTS = {
    "expression_statement",
    "variable_declaration",
    "lexical_declaration",
    "do_statement",
    "return_statement",
    "throw_statement",
    "break_statement",
    "continue_statement",
    "debugger_statement",
}

LOOP_STATEMENTS = {"for_statement", "for_in_statement", "while_statement", "do_statement"}

FUNCTION_VALUES = {
    "function",
    "function_expression",
    "generator_function",
    "arrow_function",
    "class",
}

COMMENT_TYPES = {"comment", "html_comment"}


class DeclaredName(NamedTuple):
    node: Node
    kind: str  # 'class', 'function', 'variable', 'parameter'
    value: Optional[Node] = None


class JSPatterns:
    """Recognize JavaScript patterns in the AST."""

    @staticmethod
    def is_block(node: Node | None) -> bool:
        return node is not None and node.type == "statement_block"

    @staticmethod
    def is_comment(node: Node) -> bool:
        return node.type in COMMENT_TYPES

    @staticmethod
    def control_body(node: Node) -> Optional[Node]:
        """The body statement of an if/else/loop node.

        For else clauses this is the statement after the 'else' keyword.
        """
        if node.type == "if_statement":
            return node.child_by_field_name("consequence")
        if node.type in LOOP_STATEMENTS:
            return node.child_by_field_name("body")
        if node.type == "else_clause":
            for child in node.named_children:
                if not JSPatterns.is_comment(child):
                    return child
        return None

    @staticmethod
    def last_significant_child(node: Node) -> Optional[Node]:
        """Last child that is not a comment"""
        for child in reversed(node.children):
            if not JSPatterns.is_comment(child):
                return child
        return None

    @staticmethod
    def is_simple_statement(node: Node) -> bool:
        if node.type not in SIMPLE_STATEMENTS:
            return False
        # Declarations used as a for-loop header carry their own ';'
        parent = node.parent
        if parent is not None and parent.type in ("for_statement", "for_in_statement"):
            return parent.child_by_field_name("body") == node
        return True

    @staticmethod
    def is_null_literal(node: Node | None) -> bool:
        return node is not None and node.type == "null"

    @staticmethod
    def is_function_value(node: Node | None) -> bool:
        return node is not None and node.type in FUNCTION_VALUES

    @staticmethod
    def declared_names(root: Node) -> Iterator[DeclaredName]:
        """Yield the identifiers introduced by declarations, in source order"""
        for node in ASTWalker.iter_nodes(root, skip=lambda n: n.type == "ERROR"):
            if node.type == "variable_declarator":
                name = node.child_by_field_name("name")
                if name is not None and name.type == "identifier":
                    yield DeclaredName(name, "variable", node.child_by_field_name("value"))
            elif node.type in ("function_declaration", "generator_function_declaration"):
                name = node.child_by_field_name("name")
                if name is not None:
                    yield DeclaredName(name, "function")
            elif node.type == "class_declaration":
                name = node.child_by_field_name("name")
                if name is not None:
                    yield DeclaredName(name, "class")
            elif node.type == "formal_parameters":
                for param in node.named_children:
                    ident = JSPatterns._parameter_identifier(param)
                    if ident is not None:
                        yield DeclaredName(ident, "parameter")
            elif node.type == "arrow_function":
                param = node.child_by_field_name("parameter")
                if param is not None and param.type == "identifier":
                    yield DeclaredName(param, "parameter")

    @staticmethod
    def _parameter_identifier(param: Node) -> Optional[Node]:
        if param.type == "identifier":
            return param
        if param.type == "assignment_pattern":
            left = param.child_by_field_name("left")
            return left if left is not None and left.type == "identifier" else None
        if param.type == "rest_pattern":
            return ASTWalker.get_child_of_type(param, "identifier")
        return None
