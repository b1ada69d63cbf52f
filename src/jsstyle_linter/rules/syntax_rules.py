from typing import List

from jsstyle_tree_sitter import JSPatterns
from jsstyle_tree_sitter.js_patterns import SIMPLE_STATEMENTS
from tree_sitter import Node

from ..models import Fix, Severity, Violation
from .base import ASTRule, RuleContext


class SemicolonRule(ASTRule):
    node_types = frozenset(SIMPLE_STATEMENTS)

    @property
    def rule_id(self) -> str:
        return "semi"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Terminate simple statements with a semicolon instead of relying on ASI"

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        if not JSPatterns.is_simple_statement(node):
            return []
        last = JSPatterns.last_significant_child(node)
        # A MISSING token is already reported as a syntax error
        if last is None or last.type == ";" or last.is_missing:
            return []

        end = context.source.char_offset(last.end_byte)
        return [
            self._create_violation(
                context,
                end,
                "Missing semicolon",
                length=0,
                fix=Fix(end, end, ";"),
            )
        ]


class StrictEqualityRule(ASTRule):
    """`===`/`!==` everywhere, except `== null` which tests for undefined-or-null"""

    node_types = frozenset({"binary_expression"})

    @property
    def rule_id(self) -> str:
        return "eqeqeq"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        return "Use === and !== (x == null is allowed)"

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        op = node.child_by_field_name("operator")
        if op is None or op.type not in ("==", "!="):
            return []
        if JSPatterns.is_null_literal(node.child_by_field_name("right")):
            return []
        return [
            self._create_violation(
                context,
                context.node_span(op)[0],
                f"Expected '{op.type}=' and instead saw '{op.type}'",
                length=len(op.type),
            )
        ]


class TrailingCommaRule(ASTRule):
    node_types = frozenset(
        {
            "object",
            "array",
            "object_pattern",
            "array_pattern",
            "arguments",
            "formal_parameters",
            "named_imports",
            "export_clause",
        }
    )

    @property
    def rule_id(self) -> str:
        return "comma-dangle"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "No trailing comma before a closing bracket"

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        children = [c for c in node.children if not JSPatterns.is_comment(c)]
        if len(children) < 3:
            return []
        closing, comma, before = children[-1], children[-2], children[-3]
        if closing.type not in ("}", "]", ")") or comma.type != ",":
            return []
        # `[a,,]` and `[,]` are holes, removing the comma changes the length
        if before.type in (",", "[", "(", "{"):
            return []

        start, end = context.node_span(comma)
        return [
            self._create_violation(
                context,
                start,
                "Unexpected trailing comma",
                fix=Fix(start, end, ""),
            )
        ]
