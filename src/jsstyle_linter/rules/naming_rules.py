"""Naming conventions. Advisory only: renaming can change program semantics."""

import re
from typing import List

from jsstyle_tree_sitter import DeclaredName, JSPatterns

from ..models import Severity, Violation
from .base import BaseRule, RuleContext

CAMEL_CASE = re.compile(r"^[_$]*[a-z][a-zA-Z0-9]*$")
PASCAL_CASE = re.compile(r"^[_$]*[A-Z][a-zA-Z0-9]*$")
UPPER_SNAKE = re.compile(r"^[_$]*[A-Z][A-Z0-9]*(_[A-Z0-9]+)*$")
PLACEHOLDER = re.compile(r"^[_$]+$")
ACRONYM_RUN = re.compile(r"[A-Z]{2,}")


def _allowed_styles(decl: DeclaredName) -> List[str]:
    if decl.kind == "class":
        return ["PascalCase"]
    if decl.kind == "function":
        return ["camelCase", "PascalCase"]
    if decl.kind == "variable":
        styles = ["camelCase", "UPPER_CASE"]
        if JSPatterns.is_function_value(decl.value):
            styles.append("PascalCase")
        return styles
    return ["camelCase"]


_STYLE_PATTERNS = {"camelCase": CAMEL_CASE, "PascalCase": PASCAL_CASE, "UPPER_CASE": UPPER_SNAKE}


def soften_acronyms(name: str) -> str:
    """elementID -> elementId, XMLHttpRequest -> XmlHttpRequest"""

    def repl(m: re.Match) -> str:
        run = m.group(0)
        end = m.end()
        # The last capital starts the next word when a lowercase letter follows
        if end < len(name) and name[end].islower():
            return run[0] + run[1:-1].lower() + run[-1]
        return run[0] + run[1:].lower()

    return ACRONYM_RUN.sub(repl, name)


class CamelCaseRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "camelcase"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def description(self) -> str:
        return "camelCase for variables and functions, PascalCase for classes and constructors"

    def check(self, context: RuleContext) -> List[Violation]:
        violations = []
        for decl in JSPatterns.declared_names(context.tree.root_node):
            name = context.node_text(decl.node)
            if PLACEHOLDER.match(name):
                continue
            styles = _allowed_styles(decl)
            if any(_STYLE_PATTERNS[style].match(name) for style in styles):
                continue
            start, end = context.node_span(decl.node)
            violations.append(
                self._create_violation(
                    context,
                    start,
                    f"{decl.kind.capitalize()} name '{name}' should be {' or '.join(styles)}",
                    length=end - start,
                )
            )
        return violations


class AcronymCaseRule(BaseRule):
    """Acronyms are capitalised like words: elementId, not elementID"""

    @property
    def rule_id(self) -> str:
        return "acronym-case"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def description(self) -> str:
        return "Treat acronyms as words in camelCase names (elementId, not elementID)"

    def check(self, context: RuleContext) -> List[Violation]:
        violations = []
        for decl in JSPatterns.declared_names(context.tree.root_node):
            name = context.node_text(decl.node)
            if UPPER_SNAKE.match(name) or not ACRONYM_RUN.search(name):
                continue
            start, end = context.node_span(decl.node)
            violations.append(
                self._create_violation(
                    context,
                    start,
                    f"Name '{name}' capitalises an acronym; prefer '{soften_acronyms(name)}'",
                    length=end - start,
                )
            )
        return violations
