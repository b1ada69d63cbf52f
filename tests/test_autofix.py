from typing import List

import pytest

from jsstyle_linter import (
    AutoFixEngine,
    Fix,
    FixPlan,
    LinterEngine,
    RuleRegistry,
    Severity,
    Violation,
    apply_fixes,
    evaluate,
)
from jsstyle_linter.rules import BaseRule, QuoteStyleRule
from jsstyle_linter.rules.base import RuleContext


def _violation(fix=None, column=1, rule_id="test-rule"):
    return Violation(
        rule_id=rule_id,
        severity=Severity.WARNING,
        line=1,
        column=column,
        message="test",
        offset=column - 1,
        fix=fix,
    )


class BreakEverythingRule(BaseRule):
    """Suggests a fix that turns valid code into a syntax error"""

    @property
    def rule_id(self) -> str:
        return "break-everything"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    def check(self, context: RuleContext) -> List[Violation]:
        text = context.source.text
        if text == "var = ;":
            return []
        return [self._create_violation(context, 0, "breaks", fix=Fix(0, len(text), "var = ;"))]


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (Fix(0, 3, "x"), Fix(2, 5, "y"), True),
        (Fix(0, 3, "x"), Fix(3, 5, "y"), False),
        (Fix(0, 3, "x"), Fix(3, 3, "y"), True),
        (Fix(0, 3, "x"), Fix(0, 0, "y"), True),
        (Fix(1, 2, "x"), Fix(4, 4, "y"), False),
        (Fix(4, 4, "x"), Fix(4, 4, "y"), True),
        (Fix(2, 4, ""), Fix(0, 6, "z"), True),
    ],
)
def test_fix_conflicts(a, b, expected):
    assert a.conflicts_with(b) is expected
    assert b.conflicts_with(a) is expected


def test_plan_keeps_first_of_overlapping_fixes():
    first = _violation(Fix(0, 3, "abc"), column=1)
    second = _violation(Fix(2, 5, "def"), column=3)
    third = _violation(Fix(6, 7, "g"), column=7)

    plan, conflicts = FixPlan.from_violations([first, second, third])
    assert plan.violations == [first, third]
    assert conflicts == [second]
    assert len(plan) == 2


def test_plan_rejects_overlap_on_construction():
    v = _violation()
    with pytest.raises(ValueError):
        FixPlan([(v, Fix(0, 3, "a")), (v, Fix(1, 2, "b"))])


def test_plan_applies_rightmost_first():
    plan = FixPlan(
        [
            (_violation(), Fix(0, 1, "AAA")),
            (_violation(), Fix(2, 3, "")),
            (_violation(), Fix(5, 5, "!")),
        ]
    )
    assert plan.apply("abcde") == "AAAbde!"


def test_violations_without_fix_are_unresolved():
    plain = _violation()
    fixable = _violation(Fix(0, 1, "X"), column=2)
    result = AutoFixEngine().apply("abc", [plain, fixable])
    assert result.source == "Xbc"
    assert result.applied == [fixable]
    assert result.unresolved == [plain]
    assert result.modified


def test_apply_fixes_without_changes():
    result = apply_fixes("abc", [_violation()])
    assert result.source == "abc"
    assert not result.modified


def test_fix_converges():
    source = 'var x = "abc"\nif(x == null) y()\nfoo(a,b,)\n'
    engine = LinterEngine()
    result = engine.fix(source)
    assert result.source == "var x = 'abc';\nif (x == null) { y(); }\nfoo(a, b);\n"
    assert result.unresolved == []
    assert result.modified


def test_fix_is_idempotent():
    source = 'var x = "abc"\nif(x == 1) y()\nfoo(a,b,)\n'
    engine = LinterEngine()
    once = engine.fix(source)
    twice = engine.fix(once.source)
    assert not twice.modified
    assert twice.source == once.source
    assert all(v.fix is None for v in evaluate(once.source))


def test_unfixable_violations_remain():
    result = LinterEngine().fix("a == b\n")
    assert result.source == "a == b;\n"
    assert [v.rule_id for v in result.unresolved] == ["eqeqeq"]


def test_overlapping_fixes_resolve_over_passes():
    assert LinterEngine().fix('var o = { "name": 1 };').source == "var o = { name: 1 };"


def test_fix_pass_breaking_syntax_is_discarded():
    registry = RuleRegistry(load_builtins=False)
    registry.register(BreakEverythingRule())
    registry.register(QuoteStyleRule())
    source = 'var x = "abc";'

    result = LinterEngine(registry=registry).fix(source)
    assert result.source == source
    assert not result.modified
    assert {v.rule_id for v in result.unresolved} == {"break-everything", "quotes"}
