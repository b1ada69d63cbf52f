from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

UNPARSEABLE = "unparseable"
RULE_FAILURE = "rule-failure"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Fix:
    """Replace source[start:end] (char offsets) with `replacement`"""

    start: int
    end: int
    replacement: str

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    def conflicts_with(self, other: "Fix") -> bool:
        if self.is_insertion and other.start <= self.start <= other.end:
            return True
        if other.is_insertion and self.start <= other.start <= self.end:
            return True
        return max(self.start, other.start) < min(self.end, other.end)


@dataclass(frozen=True)
class Violation:
    """Internal representation of a style violation"""

    rule_id: str
    severity: Severity
    line: int
    column: int
    message: str
    offset: int = 0
    length: int = 1
    fix: Optional[Fix] = None
    context: Optional[str] = None

    @property
    def auto_fixable(self) -> bool:
        return self.fix is not None

    def sort_key(self):
        return (self.line, self.column, self.rule_id, self.message)


@dataclass
class FixResult:
    source: str
    applied: List[Violation] = field(default_factory=list)
    unresolved: List[Violation] = field(default_factory=list)
    modified: bool = False


@dataclass
class LintResult:
    file_path: Path
    violations: List[Violation]
    fixed_source: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)


@dataclass
class LintResults:
    results: List[LintResult]
    total_files: int
    error_files: int
    fixed_files: int = 0

    @property
    def violations(self) -> List[Violation]:
        return [v for r in self.results for v in r.violations]
