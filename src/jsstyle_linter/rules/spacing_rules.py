from typing import List

from jsstyle_tree_sitter import Token, TokenKind
from tree_sitter import Node

from ..models import Fix, Severity, Violation
from .base import ASTRule, RuleContext, TokenRule

SPACE_BEFORE_PAREN = {"if", "for", "while", "switch", "catch", "with"}
SPACE_BEFORE_BRACE = {"else", "try", "finally", "do"}
SPACE_AFTER_BRACE = {"else", "catch", "finally", "while"}


class CommaSpacingRule(TokenRule):
    @property
    def rule_id(self) -> str:
        return "comma-spacing"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "A comma is followed by a space"

    def check_token(self, context: RuleContext, index: int, token: Token) -> List[Violation]:
        if token.kind != TokenKind.PUNCTUATOR or token.text != ",":
            return []
        if index + 1 >= len(context.tokens):
            return []
        nxt = context.tokens[index + 1]
        if nxt.offset != token.end_offset or nxt.text in (")", "]", "}", ","):
            return []
        return [
            self._create_violation(
                context,
                token.offset,
                "Missing space after ','",
                fix=Fix(token.end_offset, token.end_offset, " "),
            )
        ]


class KeywordSpacingRule(TokenRule):
    """`if (`, `} else {`, `try {`: keywords are separated from parens and braces"""

    @property
    def rule_id(self) -> str:
        return "keyword-spacing"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Put a space between control keywords and adjacent parentheses or braces"

    def check_token(self, context: RuleContext, index: int, token: Token) -> List[Violation]:
        if token.kind != TokenKind.KEYWORD:
            return []
        violations = []
        tokens = context.tokens

        if index > 0:
            prev = tokens[index - 1]
            if prev.end_offset == token.offset and prev.text == "}" and token.text in SPACE_AFTER_BRACE:
                violations.append(
                    self._create_violation(
                        context,
                        token.offset,
                        f"Expected space before '{token.text}'",
                        length=len(token.text),
                        fix=Fix(token.offset, token.offset, " "),
                    )
                )

        if index + 1 < len(tokens):
            nxt = tokens[index + 1]
            if nxt.offset == token.end_offset and (
                (token.text in SPACE_BEFORE_PAREN and nxt.text == "(")
                or (token.text in SPACE_BEFORE_BRACE and nxt.text == "{")
            ):
                violations.append(
                    self._create_violation(
                        context,
                        token.offset,
                        f"Expected space after '{token.text}'",
                        length=len(token.text),
                        fix=Fix(token.end_offset, token.end_offset, " "),
                    )
                )
        return violations


class InfixSpacingRule(ASTRule):
    node_types = frozenset(
        {"binary_expression", "assignment_expression", "augmented_assignment_expression", "variable_declarator"}
    )

    @property
    def rule_id(self) -> str:
        return "space-infix-ops"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Surround binary and assignment operators with spaces"

    def _operands(self, node: Node):
        if node.type == "variable_declarator":
            left = node.child_by_field_name("name")
            right = node.child_by_field_name("value")
            op = next((c for c in node.children if c.type == "="), None)
        elif node.type == "assignment_expression":
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            op = next((c for c in node.children if c.type == "="), None)
        else:
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            op = node.child_by_field_name("operator")
        return left, op, right

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        left, op, right = self._operands(node)
        if left is None or op is None or right is None:
            return []

        left_end = context.node_span(left)[1]
        op_start, op_end = context.node_span(op)
        right_start = context.node_span(right)[0]
        if left_end < op_start and op_end < right_start:
            return []

        operator = context.node_text(op)
        gap = context.source.text[left_end:right_start]
        fix = None
        if gap.strip() == operator and "\n" not in gap:
            fix = Fix(left_end, right_start, f" {operator} ")
        return [
            self._create_violation(
                context,
                op_start,
                f"Operator '{operator}' must be spaced",
                length=op_end - op_start,
                fix=fix,
            )
        ]
