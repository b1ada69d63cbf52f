import re
from typing import List

from tree_sitter import Node

from ..exceptions import MalformedInputError
from ..models import Fix, Severity, Violation
from .base import ASTRule, RuleContext

# ES5 keywords, future reserved words (strict mode included) and literals
RESERVED_WORDS = frozenset(
    """
    break case catch class const continue debugger default delete do else enum
    export extends false finally for function if implements import in
    instanceof interface let new null package private protected public return
    static super switch this throw true try typeof var void while with yield
    """.split()
)

IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def has_unescaped(content: str, quote: str) -> bool:
    i = 0
    while i < len(content):
        if content[i] == "\\":
            i += 2
            continue
        if content[i] == quote:
            return True
        i += 1
    return False


def to_single_quoted(content: str) -> str:
    """Requote the body of a double-quoted literal with single quotes.

    Only valid when the body has no unescaped single quote; escaped double
    quotes lose their backslash.
    """
    out = []
    i = 0
    while i < len(content):
        ch = content[i]
        if ch == "\\" and i + 1 < len(content):
            nxt = content[i + 1]
            out.append('"' if nxt == '"' else ch + nxt)
            i += 2
            continue
        out.append(ch)
        i += 1
    return "'" + "".join(out) + "'"


class QuoteStyleRule(ASTRule):
    node_types = frozenset({"string"})

    @property
    def rule_id(self) -> str:
        return "quotes"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Use single quotes, unless the string itself contains a single quote"

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        if node.parent is not None and node.parent.type == "jsx_attribute":
            return []
        text = context.node_text(node)
        if not text.startswith('"'):
            return []
        start, end = context.node_span(node)
        if len(text) < 2 or not text.endswith('"'):
            raise MalformedInputError("unterminated string literal", offset=start)

        content = text[1:-1]
        if has_unescaped(content, "'"):
            return []
        return [
            self._create_violation(
                context,
                start,
                "Strings must use single quotes",
                length=end - start,
                fix=Fix(start, end, to_single_quoted(content)),
            )
        ]


class QuotePropsRule(ASTRule):
    """Object keys are quoted only when they are reserved words"""

    node_types = frozenset({"pair", "pair_pattern"})

    @property
    def rule_id(self) -> str:
        return "quote-props"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Quote property names that are reserved words, and only those"

    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        key = node.child_by_field_name("key")
        if key is None:
            return []
        start, end = context.node_span(key)
        text = context.node_text(key)

        if key.type == "property_identifier" and text in RESERVED_WORDS:
            return [
                self._create_violation(
                    context,
                    start,
                    f"Reserved word '{text}' used as a property name must be quoted",
                    length=end - start,
                    fix=Fix(start, end, f"'{text}'"),
                )
            ]

        if key.type == "string" and len(text) >= 2:
            name = text[1:-1]
            if IDENTIFIER.match(name) and name not in RESERVED_WORDS:
                return [
                    self._create_violation(
                        context,
                        start,
                        f"Unnecessarily quoted property '{name}'",
                        length=end - start,
                        fix=Fix(start, end, name),
                    )
                ]
        return []
