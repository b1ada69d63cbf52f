from abc import ABC, abstractmethod
from bisect import bisect_right
from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional

from jsstyle_tree_sitter import ASTWalker, ParseResult, SourceText, Token
from tree_sitter import Node, Tree

from ..config import LintOptions
from ..exceptions import MalformedInputError
from ..models import UNPARSEABLE, Fix, Severity, Violation


@dataclass
class RuleContext:
    """Everything a rule may look at for one source text. Read-only by convention."""

    parse_result: ParseResult
    tokens: List[Token]
    options: LintOptions = field(default_factory=LintOptions)
    file_path: str = ""

    @property
    def source(self) -> SourceText:
        return self.parse_result.source

    @property
    def tree(self) -> Tree:
        return self.parse_result.tree

    @cached_property
    def lines(self) -> List[str]:
        return self.source.lines()

    @cached_property
    def _token_starts(self) -> List[int]:
        return [t.offset for t in self.tokens]

    @cached_property
    def _token_ends(self) -> List[int]:
        return [t.end_offset for t in self.tokens]

    def previous_token(self, offset: int) -> Optional[Token]:
        """Last token ending at or before `offset`"""
        idx = bisect_right(self._token_ends, offset) - 1
        return self.tokens[idx] if idx >= 0 else None

    def token_at(self, offset: int) -> Optional[Token]:
        """Token covering `offset`, if any"""
        idx = bisect_right(self._token_starts, offset) - 1
        if idx >= 0 and self.tokens[idx].end_offset > offset:
            return self.tokens[idx]
        return None

    def node_span(self, node: Node):
        return self.source.node_span(node)

    def node_text(self, node: Node) -> str:
        return self.source.node_text(node)


class BaseRule(ABC):
    """Abstract base class for all style rules.

    Rules are stateless: `check` depends only on the context it is given.
    """

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Stable identifier used in configuration and reports (e.g. 'quotes')."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Default severity for this rule."""
        pass

    @property
    def auto_fixable(self) -> bool:
        """Can this rule attach fixes to its violations?"""
        return False

    @property
    def enabled_by_default(self) -> bool:
        return True

    @property
    def description(self) -> str:
        """What this rule checks."""
        return ""

    @abstractmethod
    def check(self, context: RuleContext) -> List[Violation]:
        """Run the check and return found violations."""
        pass

    def _create_violation(
        self,
        context: RuleContext,
        offset: int,
        message: str,
        length: int = 1,
        fix: Fix | None = None,
    ) -> Violation:
        """Helper to create a violation with rule defaults."""
        line, column = context.source.position(offset)
        return Violation(
            rule_id=self.rule_id,
            severity=self.severity,
            line=line,
            column=column,
            message=message,
            offset=offset,
            length=length,
            fix=fix,
        )

    def _unparseable(self, context: RuleContext, offset: int, message: str) -> Violation:
        line, column = context.source.position(offset)
        return Violation(
            rule_id=UNPARSEABLE,
            severity=Severity.ERROR,
            line=line,
            column=column,
            message=f"{self.rule_id}: {message}",
            offset=offset,
            context=self.rule_id,
        )


class TextRule(BaseRule):
    """Rule over raw source lines"""

    def check(self, context: RuleContext) -> List[Violation]:
        violations = []
        for idx, line in enumerate(context.lines):
            violations.extend(self.check_line(context, idx + 1, line, context.source.line_start(idx + 1)))
        return violations

    def check_line(self, context: RuleContext, line_no: int, line: str, line_start: int) -> List[Violation]:
        return []


class TokenRule(BaseRule):
    """Rule over the token stream"""

    def check(self, context: RuleContext) -> List[Violation]:
        violations = []
        for idx, token in enumerate(context.tokens):
            violations.extend(self.check_token(context, idx, token))
        return violations

    @abstractmethod
    def check_token(self, context: RuleContext, index: int, token: Token) -> List[Violation]:
        pass


class ASTRule(BaseRule):
    """Rule over syntax tree nodes of the types listed in `node_types`.

    ERROR subtrees are not visited. A node the rule cannot analyse raises
    MalformedInputError, which becomes an 'unparseable' violation.
    """

    node_types: frozenset = frozenset()

    def check(self, context: RuleContext) -> List[Violation]:
        violations = []
        nodes = ASTWalker.iter_nodes(context.tree.root_node, skip=lambda n: n.type == "ERROR")
        for node in nodes:
            if node.type not in self.node_types:
                continue
            try:
                violations.extend(self.check_node(context, node))
            except MalformedInputError as e:
                offset = e.offset or context.source.char_offset(node.start_byte)
                violations.append(self._unparseable(context, offset, str(e)))
        return violations

    @abstractmethod
    def check_node(self, context: RuleContext, node: Node) -> List[Violation]:
        pass
