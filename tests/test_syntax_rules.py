import pytest

from jsstyle_linter import LinterEngine, evaluate


def _only(violations, rule_id):
    return [v for v in violations if v.rule_id == rule_id]


def test_loose_equality_with_null_is_allowed():
    assert evaluate("undefOrNull == null;") == []


def test_loose_equality():
    violations = evaluate("a == b;")
    assert len(violations) == 1
    assert violations[0].rule_id == "eqeqeq"
    assert violations[0].column == 3
    assert violations[0].message == "Expected '===' and instead saw '=='"
    assert violations[0].fix is None


@pytest.mark.parametrize(
    "source,count",
    [
        ("a != b;", 1),
        ("a === b;", 0),
        ("a !== null;", 0),
        ("null == a;", 1),
        ("x != null;", 0),
    ],
)
def test_equality_operators(source, count):
    assert len(_only(evaluate(source), "eqeqeq")) == count


def test_missing_semicolon():
    violations = evaluate("var a = 1\n")
    assert [(v.rule_id, v.line, v.column) for v in violations] == [("semi", 1, 10)]
    assert LinterEngine().fix("var a = 1\n").source == "var a = 1;\n"


def test_missing_semicolons_on_each_statement():
    source = "foo()\nbar()\n"
    violations = evaluate(source)
    assert [(v.rule_id, v.line, v.column) for v in violations] == [("semi", 1, 6), ("semi", 2, 6)]
    assert LinterEngine().fix(source).source == "foo();\nbar();\n"


def test_missing_semicolon_after_return():
    violations = _only(evaluate("function f() {\n    return 1\n}\n"), "semi")
    assert [(v.line, v.column) for v in violations] == [(2, 13)]


def test_missing_semicolon_after_do_while():
    assert len(_only(evaluate("do { a(); } while (b)\n"), "semi")) == 1


def test_for_header_is_not_a_statement():
    assert evaluate("for (var i = 0; i < 2; i++) { a(); }\n") == []


@pytest.mark.parametrize(
    "source,expected",
    [
        ("var a = [1, 2,];\n", "var a = [1, 2];\n"),
        ("var o = { a: 1, };\n", "var o = { a: 1 };\n"),
        ("f(a, b,);\n", "f(a, b);\n"),
        ("var o = {\n    a: 1,\n};\n", "var o = {\n    a: 1\n};\n"),
    ],
)
def test_trailing_comma_removed(source, expected):
    assert len(_only(evaluate(source), "comma-dangle")) == 1
    assert LinterEngine().fix(source).source == expected


def test_array_hole_keeps_its_comma():
    assert _only(evaluate("var a = [1,,];\n"), "comma-dangle") == []
