import json

from typer.testing import CliRunner

from jsstyle_cli.main import app

runner = CliRunner()


def test_cli_lint_help():
    result = runner.invoke(app, ["lint", "--help"])
    assert result.exit_code == 0
    assert "Run linter on JavaScript files" in result.stdout


def test_cli_rules():
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    assert "quotes" in result.stdout
    assert "eol-last" in result.stdout
    assert "opt-in" in result.stdout


def test_cli_lint_clean(tmp_path):
    file_path = tmp_path / "clean.js"
    file_path.write_text("var a = 1;\n")

    result = runner.invoke(app, ["lint", str(file_path)])
    assert result.exit_code == 0
    assert "Total issues found: 0" in result.stdout


def test_cli_lint_errors(tmp_path):
    file_path = tmp_path / "loose.js"
    file_path.write_text("a == b;\n")

    result = runner.invoke(app, ["lint", str(file_path)])
    assert result.exit_code == 1  # eqeqeq is an ERROR
    assert "ERROR" in result.stdout
    assert f"{file_path}:1:3 [eqeqeq]" in result.stdout


def test_cli_warnings_only_exit_zero(tmp_path):
    file_path = tmp_path / "quotes.js"
    file_path.write_text('var x = "abc";\n')

    result = runner.invoke(app, ["lint", str(file_path)])
    assert result.exit_code == 0
    assert "WARNING" in result.stdout
    assert "[quotes]" in result.stdout


def test_cli_severity_filter(tmp_path):
    file_path = tmp_path / "quotes.js"
    file_path.write_text('var x = "abc";\n')

    result = runner.invoke(app, ["lint", str(file_path), "--severity", "ERROR"])
    assert result.exit_code == 0
    assert "[quotes]" not in result.stdout
    assert "Total issues found: 1 (0 reported)" in result.stdout


def test_cli_lint_directory(tmp_path):
    (tmp_path / "a.js").write_text("var a = 1;\n")
    sub = tmp_path / "lib"
    sub.mkdir()
    (sub / "b.js").write_text("a == b;\n")
    (sub / "notes.txt").write_text("a == b\n")

    result = runner.invoke(app, ["lint", str(tmp_path)])
    assert result.exit_code == 1
    assert "b.js" in result.stdout
    assert "notes.txt" not in result.stdout


def test_cli_fix(tmp_path):
    file_path = tmp_path / "fixme.js"
    file_path.write_text('var x = "abc"\nfoo(a,b)\n')

    result = runner.invoke(app, ["lint", str(file_path), "--fix"])
    assert result.exit_code == 0
    assert "Fixed 1 file(s)" in result.stdout
    assert file_path.read_text() == "var x = 'abc';\nfoo(a, b);\n"


def test_cli_json_output(tmp_path):
    file_path = tmp_path / "loose.js"
    file_path.write_text("a == b;\n")

    result = runner.invoke(app, ["lint", str(file_path), "--format", "json"])
    assert result.exit_code == 1
    report = json.loads(result.stdout)
    assert report["total_files"] == 1
    assert report["error_count"] == 1
    assert report["issues"][0]["rule_id"] == "eqeqeq"
    assert report["issues"][0]["auto_fixable"] is False


def test_cli_config_file(tmp_path):
    config_path = tmp_path / "style.toml"
    config_path.write_text('[rules]\neqeqeq = "warning"\n')
    file_path = tmp_path / "loose.js"
    file_path.write_text("a == b;\n")

    result = runner.invoke(app, ["lint", str(file_path), "--config", str(config_path)])
    assert result.exit_code == 0
    assert "WARNING" in result.stdout


def test_cli_unknown_rule_in_config(tmp_path):
    config_path = tmp_path / "style.toml"
    config_path.write_text("[rules]\ndoesNotExist = true\n")
    file_path = tmp_path / "a.js"
    file_path.write_text("var a = 1;\n")

    result = runner.invoke(app, ["lint", str(file_path), "--config", str(config_path)])
    assert result.exit_code == 2
    assert "doesNotExist" in result.output


def test_cli_missing_config_file(tmp_path):
    file_path = tmp_path / "a.js"
    file_path.write_text("var a = 1;\n")

    result = runner.invoke(app, ["lint", str(file_path), "--config", str(tmp_path / "nope.toml")])
    assert result.exit_code == 2


def test_cli_no_files():
    result = runner.invoke(app, ["lint"])
    assert result.exit_code == 1
    assert "Provide files or directories" in result.stdout


def test_cli_badly_shaped_config(tmp_path):
    config_path = tmp_path / "style.toml"
    config_path.write_text("[tool]\njsstyle = 5\n")
    file_path = tmp_path / "a.js"
    file_path.write_text("var a = 1;\n")

    result = runner.invoke(app, ["lint", str(file_path), "--config", str(config_path)])
    assert result.exit_code == 2
    assert "Configuration error" in result.output
