from jsstyle_linter import LinterEngine, RuleConfig, evaluate


def _only(violations, rule_id):
    return [v for v in violations if v.rule_id == rule_id]


def test_line_at_limit_is_compliant():
    line = "// " + "x" * 77
    assert len(line) == 80
    assert evaluate(line + "\n") == []


def test_line_over_limit():
    line = "// " + "x" * 78
    violations = evaluate(line + "\n")
    assert len(violations) == 1
    assert violations[0].rule_id == "max-line-length"
    assert (violations[0].line, violations[0].column) == (1, 81)
    assert "81 > 80" in violations[0].message
    assert violations[0].fix is None


def test_max_line_length_option():
    config = RuleConfig.from_mapping({"max-line-length": 100})
    assert evaluate("// " + "x" * 90 + "\n", config) == []


def test_tab_width_counts_for_line_length():
    line = "\t// " + "x" * 75
    assert _only(evaluate(line + "\n"), "max-line-length") == []

    config = RuleConfig.from_mapping({"tab-width": 4})
    violations = _only(evaluate(line + "\n", config), "max-line-length")
    assert len(violations) == 1
    assert violations[0].column == 78


def test_trailing_spaces_fixed():
    source = "var a = 1;   \nvar b = 2;\n"
    violations = evaluate(source)
    assert [(v.rule_id, v.line, v.column) for v in violations] == [("no-trailing-spaces", 1, 11)]

    result = LinterEngine().fix(source)
    assert result.source == "var a = 1;\nvar b = 2;\n"


def test_trailing_spaces_inside_template_are_content():
    source = "var t = `a   \nb`;\n"
    assert _only(evaluate(source), "no-trailing-spaces") == []


def test_tab_indentation_fixed():
    source = "if (a) {\n\tb();\n}\n"
    violations = evaluate(source)
    assert [(v.rule_id, v.line, v.column) for v in violations] == [("no-tabs", 2, 1)]
    assert LinterEngine().fix(source).source == "if (a) {\n    b();\n}\n"


def test_indent_size_option():
    config = RuleConfig.from_mapping({"indent-size": 2})
    assert LinterEngine(config).fix("if (a) {\n\tb();\n}\n").source == "if (a) {\n  b();\n}\n"


def test_eol_last_is_opt_in():
    assert evaluate("var a = 1;") == []

    config = RuleConfig(rules={"eol-last": True})
    violations = evaluate("var a = 1;", config)
    assert [v.rule_id for v in violations] == ["eol-last"]
    assert LinterEngine(config).fix("var a = 1;").source == "var a = 1;\n"
