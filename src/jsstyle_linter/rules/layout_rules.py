import re
from typing import List

from jsstyle_tree_sitter import TokenKind

from ..models import Fix, Severity, Violation
from .base import BaseRule, RuleContext, TextRule

_TRAILING_WS = re.compile(r"[ \t]+$")
_INDENT = re.compile(r"^[ \t]*")

LITERAL_KINDS = (TokenKind.STRING, TokenKind.TEMPLATE)


def _inside_literal(context: RuleContext, offset: int) -> bool:
    """Is `offset` strictly inside a string or template literal?"""
    token = context.token_at(offset)
    return token is not None and token.kind in LITERAL_KINDS and token.offset < offset


class MaxLineLengthRule(TextRule):
    @property
    def rule_id(self) -> str:
        return "max-line-length"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def description(self) -> str:
        return "Lines must not exceed the configured column limit (80 by default)"

    def check_line(self, context: RuleContext, line_no: int, line: str, line_start: int) -> List[Violation]:
        limit = context.options.max_line_length
        tab_width = context.options.tab_width

        width = 0
        first_over = None
        for idx, ch in enumerate(line):
            if ch == "\t" and tab_width > 1:
                width = (width // tab_width + 1) * tab_width
            else:
                width += 1
            if first_over is None and width > limit:
                first_over = idx

        if first_over is None:
            return []
        return [
            self._create_violation(
                context,
                line_start + first_over,
                f"Line is too long ({width} > {limit} columns)",
                length=len(line) - first_over,
            )
        ]


class TrailingWhitespaceRule(TextRule):
    @property
    def rule_id(self) -> str:
        return "no-trailing-spaces"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "No whitespace at the end of a line"

    def check_line(self, context: RuleContext, line_no: int, line: str, line_start: int) -> List[Violation]:
        m = _TRAILING_WS.search(line)
        if not m:
            return []
        start = line_start + m.start()
        if _inside_literal(context, start):
            return []
        end = line_start + m.end()
        return [
            self._create_violation(
                context,
                start,
                "Trailing whitespace",
                length=end - start,
                fix=Fix(start, end, ""),
            )
        ]


class NoTabsRule(TextRule):
    @property
    def rule_id(self) -> str:
        return "no-tabs"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Indent with spaces, not tabs"

    def check_line(self, context: RuleContext, line_no: int, line: str, line_start: int) -> List[Violation]:
        indent = _INDENT.match(line).group(0)
        if "\t" not in indent or _inside_literal(context, line_start):
            return []
        spaces = indent.replace("\t", " " * context.options.indent_size)
        return [
            self._create_violation(
                context,
                line_start + indent.index("\t"),
                "Tab character used for indentation",
                length=len(indent),
                fix=Fix(line_start, line_start + len(indent), spaces),
            )
        ]


class EolLastRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "eol-last"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def enabled_by_default(self) -> bool:
        return False

    @property
    def description(self) -> str:
        return "A non-empty file ends with a newline"

    def check(self, context: RuleContext) -> List[Violation]:
        text = context.source.text
        if not text or text.endswith("\n"):
            return []
        end = len(text)
        return [self._create_violation(context, end, "Missing newline at end of file", length=0, fix=Fix(end, end, "\n"))]
