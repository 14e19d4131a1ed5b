import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class Severity(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ScanStatus(Enum):
    FAILED = "FAILED"
    WARNING = "WARNING"
    PASSED_WITH_NOTES = "PASSED_WITH_NOTES"
    PASSED = "PASSED"


@dataclass(frozen=True)
class SecurityRule:
    id: str
    name: str
    description: str
    patterns: Tuple[re.Pattern, ...]
    skip_patterns: Tuple[re.Pattern, ...] = ()

    def is_skipped(self, match: str) -> bool:
        return any(skip.search(match) for skip in self.skip_patterns)


@dataclass
class Finding:
    severity: Severity
    rule_id: str
    rule_name: str
    description: str
    file: str
    line: int
    match: str

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "ruleId": self.rule_id,
            "ruleName": self.rule_name,
            "description": self.description,
            "file": self.file,
            "line": self.line,
            "match": self.match,
        }


@dataclass
class ScanSummary:
    findings: List[Finding] = field(default_factory=list)

    def by_severity(self) -> Dict[Severity, List[Finding]]:
        grouped = {severity: [] for severity in Severity}
        for finding in self.findings:
            grouped[finding.severity].append(finding)
        return grouped

    def count(self, severity: Severity) -> int:
        return sum(1 for finding in self.findings if finding.severity == severity)

    @property
    def total(self) -> int:
        return len(self.findings)

    @property
    def passed(self) -> bool:
        return self.count(Severity.CRITICAL) == 0 and self.count(Severity.HIGH) == 0

    @property
    def status(self) -> ScanStatus:
        if not self.passed:
            return ScanStatus.FAILED
        if self.count(Severity.MEDIUM) > 0:
            return ScanStatus.WARNING
        if self.count(Severity.LOW) > 0:
            return ScanStatus.PASSED_WITH_NOTES
        return ScanStatus.PASSED

    def to_dict(self) -> dict:
        summary = {severity.value: self.count(severity) for severity in Severity}
        summary["total"] = self.total
        return {
            "passed": self.passed,
            "summary": summary,
            "findings": [finding.to_dict() for finding in self.findings],
        }
