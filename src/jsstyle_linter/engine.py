import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import List, Sequence

from jsstyle_tree_sitter import JSParser, ParseResult, tokenize

from .autofix import AutoFixEngine
from .config import RuleConfig
from .models import RULE_FAILURE, UNPARSEABLE, FixResult, LintResult, LintResults, Severity, Violation
from .registry import RuleRegistry
from .rules.base import BaseRule, RuleContext

logger = logging.getLogger("jsstyle.linter.engine")

SYNTHETIC_RULES = {UNPARSEABLE, RULE_FAILURE}


class LinterEngine:
    """Core engine for JavaScript style checking.

    The configuration is validated against the registry on construction, so a
    bad config fails before any source is looked at.
    """

    def __init__(self, config: RuleConfig | None = None, registry: RuleRegistry | None = None):
        self.config = config or RuleConfig()
        self.registry = registry or RuleRegistry()
        self.rules: List[BaseRule] = self.registry.get_enabled_rules(self.config)
        self.parser = JSParser()
        self.autofix = AutoFixEngine()

    def evaluate(self, source: str, file_path: str = "<string>") -> List[Violation]:
        """Run every enabled rule; violations come back sorted by position, then rule id"""
        try:
            parse_result = self.parser.parse_string(source)
            tokens = tokenize(parse_result)
        except Exception as e:
            logger.error(f"Cannot parse {file_path}: {e}")
            return [self._file_violation(f"Unable to parse source: {e}")]

        context = RuleContext(
            parse_result=parse_result,
            tokens=tokens,
            options=self.config.options,
            file_path=file_path,
        )

        violations: List[Violation] = []
        if parse_result.has_errors:
            violations.append(self._syntax_violation(parse_result))
        for rule in self.rules:
            violations.extend(self._run_rule(rule, context))

        return sorted((self._apply_severity(v) for v in violations), key=Violation.sort_key)

    def _run_rule(self, rule: BaseRule, context: RuleContext) -> List[Violation]:
        try:
            return list(rule.check(context))
        except Exception as e:
            logger.warning(f"Rule '{rule.rule_id}' failed on {context.file_path}: {e}", exc_info=True)
            return [
                Violation(
                    rule_id=RULE_FAILURE,
                    severity=Severity.ERROR,
                    line=1,
                    column=1,
                    message=f"Rule '{rule.rule_id}' failed: {type(e).__name__}: {e}",
                    context=rule.rule_id,
                )
            ]

    def _apply_severity(self, violation: Violation) -> Violation:
        if violation.rule_id in SYNTHETIC_RULES:
            return violation
        override = self.config.settings_for(violation.rule_id).severity
        if override is None or override == violation.severity:
            return violation
        return replace(violation, severity=override)

    def _syntax_violation(self, parse_result: ParseResult) -> Violation:
        first = parse_result.errors[0]
        count = len(parse_result.errors)
        detail = f"missing '{first.text}'" if first.missing else f"unexpected '{first.text}'"
        return Violation(
            rule_id=UNPARSEABLE,
            severity=Severity.ERROR,
            line=first.line,
            column=first.column,
            offset=first.offset,
            message=f"Unable to parse source ({count} syntax error{'s' if count != 1 else ''}): {detail}",
        )

    def _file_violation(self, message: str) -> Violation:
        return Violation(rule_id=UNPARSEABLE, severity=Severity.ERROR, line=1, column=1, message=message)

    def fix(self, source: str, file_path: str = "<string>", max_passes: int = 10) -> FixResult:
        """Evaluate and apply fixes until nothing more can be fixed.

        A pass that would add syntax errors is discarded and fixing stops.
        `unresolved` holds the violations left in the final text.
        """
        current = source
        applied: List[Violation] = []
        remaining: List[Violation] | None = None
        baseline_errors = len(self.parser.parse_string(current).errors)

        for pass_no in range(1, max_passes + 1):
            violations = self.evaluate(current, file_path)
            result = self.autofix.apply(current, violations)
            if not result.modified:
                remaining = violations
                break

            new_errors = len(self.parser.parse_string(result.source).errors)
            if new_errors > baseline_errors:
                logger.error(f"Fix pass {pass_no} on {file_path} introduced syntax errors; discarding it")
                remaining = violations
                break

            logger.debug(f"Fix pass {pass_no} on {file_path}: applied {len(result.applied)} fix(es)")
            applied.extend(result.applied)
            current = result.source
        else:
            logger.warning(f"Reached max fix passes ({max_passes}) for {file_path}")

        if remaining is None:
            remaining = self.evaluate(current, file_path)
        return FixResult(source=current, applied=applied, unresolved=remaining, modified=current != source)

    def evaluate_file(self, file_path: Path) -> LintResult:
        file_path = Path(file_path)
        source = self._read(file_path)
        if isinstance(source, LintResult):
            return source
        return LintResult(file_path=file_path, violations=self.evaluate(source, str(file_path)))

    def fix_file(self, file_path: Path, write: bool = True) -> LintResult:
        file_path = Path(file_path)
        source = self._read(file_path)
        if isinstance(source, LintResult):
            return source
        result = self.fix(source, str(file_path))
        if result.modified and write:
            file_path.write_text(result.source, encoding="utf-8")
        return LintResult(
            file_path=file_path,
            violations=result.unresolved,
            fixed_source=result.source if result.modified else None,
        )

    def _read(self, file_path: Path) -> str | LintResult:
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"{file_path} is not valid UTF-8: {e}")
            message = f"File is not valid UTF-8: {e}"
        except OSError as e:
            logger.warning(f"Cannot read {file_path}: {e}")
            message = f"Cannot read file: {e}"
        return LintResult(file_path=file_path, violations=[self._file_violation(message)], errors=[message])

    def evaluate_files(self, files: Sequence[Path], fix: bool = False, max_workers: int = 1) -> LintResults:
        """Check (or fix) a batch of files. One file failing never stops the others."""
        worker = self.fix_file if fix else self.evaluate_file

        def run(file_path: Path) -> LintResult:
            try:
                return worker(file_path)
            except Exception as e:
                logger.error(f"Unexpected failure on {file_path}: {e}", exc_info=True)
                return LintResult(
                    file_path=Path(file_path),
                    violations=[self._file_violation(f"Internal error: {e}")],
                    errors=[str(e)],
                )

        if max_workers > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                results = list(pool.map(run, files))
        else:
            results = [run(f) for f in files]

        return LintResults(
            results=results,
            total_files=len(results),
            error_files=sum(1 for r in results if r.errors),
            fixed_files=sum(1 for r in results if r.fixed_source is not None),
        )


def evaluate(source: str, config: RuleConfig | None = None) -> List[Violation]:
    """Check one source text with a throwaway engine"""
    return LinterEngine(config).evaluate(source)


def fix(source: str, config: RuleConfig | None = None) -> FixResult:
    return LinterEngine(config).fix(source)
