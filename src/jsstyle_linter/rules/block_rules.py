from typing import List

from jsstyle_tree_sitter import JSPatterns, TokenKind
from tree_sitter import Node

from ..models import Fix, Severity, Violation
from .base import ASTRule, RuleContext

BRACED_PARENTS = {
    "if_statement",
    "else_clause",
    "for_statement",
    "for_in_statement",
    "while_statement",
    "do_statement",
    "function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "generator_function_declaration",
    "arrow_function",
    "method_definition",
    "try_statement",
    "catch_clause",
    "finally_clause",
    "class_declaration",
    "class",
    "switch_statement",
}


class CurlyRule(ASTRule):
    """Bodies of if/else/for/while/do are always blocks, even one-liners"""

    node_types = frozenset(
        {"if_statement", "else_clause", "for_statement", "for_in_statement", "while_statement", "do_statement"}
    )

    @property
    def rule_id(self) -> str:
        return "curly"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Require braces around the body of if/else/for/while/do"

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        body = JSPatterns.control_body(node)
        if body is None or JSPatterns.is_block(body) or body.type == "ERROR":
            return []
        if node.type == "else_clause" and body.type == "if_statement":
            return []

        keyword = node.children[0]
        start, end = context.node_span(body)
        text = context.source.text
        lead = "" if start > 0 and text[start - 1].isspace() else " "
        if body.type == "empty_statement":
            fix = Fix(start, end, lead + "{}")
        else:
            last = context.previous_token(end)
            if last is not None and last.kind == TokenKind.COMMENT:
                # wrapping would put the closing brace inside the comment
                fix = None
            else:
                fix = Fix(start, end, lead + "{ " + text[start:end] + " }")

        return [
            self._create_violation(
                context,
                context.node_span(keyword)[0],
                f"Expected {{ after '{keyword.type}'",
                length=len(keyword.type),
                fix=fix,
            )
        ]


class BraceStyleRule(ASTRule):
    """K&R style: an opening brace shares the line of its statement"""

    node_types = frozenset({"statement_block", "class_body", "switch_body"})

    @property
    def rule_id(self) -> str:
        return "brace-style"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Opening braces go on the same line as the statement they belong to"

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        if node.parent is None or node.parent.type not in BRACED_PARENTS:
            return []
        brace = node.children[0] if node.children else None
        if brace is None or brace.type != "{":
            return []

        brace_start = context.node_span(brace)[0]
        prev = context.previous_token(brace_start)
        if prev is None:
            return []
        brace_line, _ = context.source.position(brace_start)
        if prev.end_line == brace_line:
            return []

        fix = None if prev.kind == TokenKind.COMMENT else Fix(prev.end_offset, brace_start, " ")
        return [
            self._create_violation(
                context,
                brace_start,
                "Opening brace should be on the same line as its statement",
                fix=fix,
            )
        ]
