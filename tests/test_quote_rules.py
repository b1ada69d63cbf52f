import pytest

from jsstyle_linter import LinterEngine, evaluate
from jsstyle_linter.rules.quote_rules import has_unescaped, to_single_quoted


def _only(violations, rule_id):
    return [v for v in violations if v.rule_id == rule_id]


def test_single_quoted_string_with_double_quotes_inside():
    assert evaluate("var html = '<div id=\"myId\"></div>';") == []


def test_double_quoted_string():
    violations = evaluate('var x = "abc";')
    assert len(violations) == 1
    assert violations[0].rule_id == "quotes"
    assert (violations[0].line, violations[0].column) == (1, 9)
    assert violations[0].message == "Strings must use single quotes"


def test_double_quotes_allowed_around_single_quote():
    assert _only(evaluate('var s = "it\'s";'), "quotes") == []


@pytest.mark.parametrize(
    "source,expected",
    [
        ('var x = "abc";\n', "var x = 'abc';\n"),
        ('var s = "say \\"hi\\"";\n', "var s = 'say \"hi\"';\n"),
        ('var s = "it\\\'s";\n', "var s = 'it\\'s';\n"),
        ('var e = "";\n', "var e = '';\n"),
    ],
)
def test_quotes_fix(source, expected):
    assert LinterEngine().fix(source).source == expected


def test_has_unescaped():
    assert has_unescaped("it's", "'")
    assert not has_unescaped("it\\'s", "'")
    assert not has_unescaped("plain", "'")


def test_to_single_quoted():
    assert to_single_quoted('a \\"b\\" \\n') == "'a \"b\" \\n'"


def test_reserved_word_key_must_be_quoted():
    violations = evaluate("var o = { package: 1 };")
    assert [v.rule_id for v in violations] == ["quote-props"]
    assert "package" in violations[0].message
    assert LinterEngine().fix("var o = { package: 1 };").source == "var o = { 'package': 1 };"


def test_quoted_reserved_word_key_is_fine():
    assert evaluate("var o = { 'package': 1 };") == []


def test_unnecessarily_quoted_key():
    violations = evaluate("var o = { 'name': 1 };")
    assert [v.rule_id for v in violations] == ["quote-props"]
    assert violations[0].message == "Unnecessarily quoted property 'name'"
    assert LinterEngine().fix("var o = { 'name': 1 };").source == "var o = { name: 1 };"


def test_key_that_needs_quotes():
    assert evaluate("var o = { 'data-id': 1 };") == []
