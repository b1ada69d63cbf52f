import logging
from typing import List, Sequence, Tuple

from .models import Fix, FixResult, Violation

logger = logging.getLogger("jsstyle.linter.autofix")


class FixPlan:
    """Ordered, non-overlapping text replacements for one source text"""

    def __init__(self, fixes: Sequence[Tuple[Violation, Fix]] = ()):
        self._entries: List[Tuple[Violation, Fix]] = []
        for violation, fix in fixes:
            if not self.accepts(fix):
                raise ValueError(f"Fix for {violation.rule_id} at {violation.line}:{violation.column} overlaps the plan")
            self._entries.append((violation, fix))

    @classmethod
    def from_violations(cls, violations: Sequence[Violation]) -> Tuple["FixPlan", List[Violation]]:
        """Keep the first fix of every overlapping group; return the rest as conflicts.

        `violations` must already be in the checker's deterministic order, so
        the same input always keeps the same fixes.
        """
        plan = cls()
        conflicts = []
        for violation in violations:
            if violation.fix is None:
                continue
            if plan.accepts(violation.fix):
                plan._entries.append((violation, violation.fix))
            else:
                conflicts.append(violation)
        return plan, conflicts

    def accepts(self, fix: Fix) -> bool:
        return not any(fix.conflicts_with(existing) for _, existing in self._entries)

    @property
    def violations(self) -> List[Violation]:
        return [v for v, _ in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def apply(self, source: str) -> str:
        # Rightmost first, so earlier offsets stay valid
        result = source
        for _, fix in sorted(self._entries, key=lambda e: (e[1].start, e[1].end), reverse=True):
            result = result[: fix.start] + fix.replacement + result[fix.end :]
        return result


class AutoFixEngine:
    """Apply the suggested fixes carried by violations"""

    def apply(self, source: str, violations: Sequence[Violation]) -> FixResult:
        """Apply every non-conflicting fix in one pass.

        Violations without a fix, and fixes dropped because they overlap an
        earlier one, come back as unresolved.
        """
        plan, conflicts = FixPlan.from_violations(violations)
        for violation in conflicts:
            logger.debug(
                f"Dropped conflicting fix for {violation.rule_id} at {violation.line}:{violation.column}"
            )

        applied = plan.violations
        applied_ids = {id(v) for v in applied}
        unresolved = [v for v in violations if id(v) not in applied_ids]
        new_source = plan.apply(source)
        return FixResult(
            source=new_source,
            applied=applied,
            unresolved=unresolved,
            modified=new_source != source,
        )


def apply_fixes(source: str, violations: Sequence[Violation]) -> FixResult:
    return AutoFixEngine().apply(source, violations)
