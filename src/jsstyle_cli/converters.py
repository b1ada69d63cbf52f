from pathlib import Path

from jsstyle_linter.models import LintResults, Violation

from .models import LintIssue, LintReport, Severity


def violation_to_lint_issue(violation: Violation, file_path: Path | str) -> LintIssue:
    """Convert an internal dataclass violation to an external Pydantic issue"""
    suggestion = None
    if violation.fix is not None:
        if violation.fix.is_insertion:
            suggestion = f"Insert {violation.fix.replacement!r}"
        elif violation.fix.replacement:
            suggestion = f"Replace with {violation.fix.replacement!r}"
        else:
            suggestion = "Remove"
    return LintIssue(
        severity=violation.severity.value.upper(),  # dataclass uses 'error', Pydantic uses 'ERROR'
        file_path=str(file_path),
        line_number=violation.line,
        column=violation.column,
        rule_id=violation.rule_id,
        message=violation.message,
        suggestion=suggestion,
        auto_fixable=violation.auto_fixable,
    )


def results_to_report(results: LintResults) -> LintReport:
    issues = [violation_to_lint_issue(v, r.file_path) for r in results.results for v in r.violations]
    return LintReport(
        issues=issues,
        total_files=results.total_files,
        error_count=sum(1 for i in issues if i.severity == Severity.ERROR),
        warning_count=sum(1 for i in issues if i.severity == Severity.WARNING),
        fixed_files=results.fixed_files,
    )
