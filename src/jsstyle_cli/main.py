import logging
from pathlib import Path

import typer
from jsstyle_linter.engine import LinterEngine
from jsstyle_linter.exceptions import ConfigError
from jsstyle_linter.registry import registry

from .config import DEFAULT_CONFIG_FILE, load_config
from .converters import results_to_report

app = typer.Typer(help="jsstyle - check JavaScript sources against the house style")

SEVERITY_RANK = {"ERROR": 2, "WARNING": 1}


def collect_files(paths: list[Path]) -> list[Path]:
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.rglob("*.js")))
        else:
            files.append(path)
    return files


@app.command()
def lint(
    paths: list[Path] = typer.Argument(None, help="Files or directories to lint"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    fix: bool = typer.Option(False, help="Automatically fix issues"),
    output_format: str = typer.Option("text", "--format", help="Output format: text or json"),
    severity: str = typer.Option("WARNING", help="Minimum severity to show"),
    jobs: int = typer.Option(1, help="Number of files checked in parallel"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run linter on JavaScript files"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_file, required=config_file != DEFAULT_CONFIG_FILE)
        engine = LinterEngine(config)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=2)

    files = collect_files(paths or [])
    if not files:
        typer.echo("Error: Provide files or directories to lint")
        raise typer.Exit(code=1)

    results = engine.evaluate_files(files, fix=fix, max_workers=jobs)
    report = results_to_report(results)

    if output_format == "json":
        typer.echo(report.model_dump_json(indent=2))
    else:
        min_rank = SEVERITY_RANK.get(severity.upper(), 1)
        reported_count = 0
        for issue in report.issues:
            if SEVERITY_RANK.get(issue.severity.value, 0) >= min_rank:
                typer.echo(
                    f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column} "
                    f"[{issue.rule_id}] - {issue.message}"
                )
                reported_count += 1
        if fix:
            typer.echo(f"\nFixed {report.fixed_files} file(s)")
        typer.echo(f"\nTotal issues found: {len(report.issues)} ({reported_count} reported)")

    if report.error_count > 0:
        raise typer.Exit(code=1)


@app.command()
def rules():
    """List the available rules"""
    for rule in registry.get_all_rules():
        flags = []
        if rule.auto_fixable:
            flags.append("fixable")
        if not rule.enabled_by_default:
            flags.append("opt-in")
        suffix = f" ({', '.join(flags)})" if flags else ""
        typer.echo(f"{rule.rule_id:<20} {rule.severity.value:<8} {rule.description}{suffix}")


if __name__ == "__main__":
    app()
