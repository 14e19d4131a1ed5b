from dataclasses import dataclass, field
from enum import Enum
from typing import List


class IssueType(Enum):
    MISSING_FILE = "missing_file"
    READ_ERROR = "read_error"
    FRONTMATTER_ERROR = "frontmatter_error"
    MISSING_FIELD = "missing_field"
    ID_MISMATCH = "id_mismatch"
    INVALID_TYPE = "invalid_type"
    FORBIDDEN_PATTERN = "forbidden_pattern"
    SECURITY_WARNING = "security_warning"
    NAMING_CONVENTION = "naming_convention"


@dataclass
class ValidationIssue:
    task: str
    type: IssueType
    message: str

    def to_dict(self) -> dict:
        return {"task": self.task, "type": self.type.value, "message": self.message}


@dataclass
class ValidationResult:
    valid: int = 0
    invalid: int = 0
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    def add_error(self, task: str, issue_type: IssueType, message: str):
        self.errors.append(ValidationIssue(task, issue_type, message))

    def add_warning(self, task: str, issue_type: IssueType, message: str):
        self.warnings.append(ValidationIssue(task, issue_type, message))

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "invalid": self.invalid,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
