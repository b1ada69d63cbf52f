from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    rule_id: str
    message: str
    suggestion: Optional[str] = None
    auto_fixable: bool = False


class LintReport(BaseModel):
    issues: List[LintIssue]
    total_files: int
    error_count: int
    warning_count: int
    fixed_files: int = 0
