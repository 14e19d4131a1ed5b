import logging
from typing import List
from migrakit.app.rules import SECURITY_RULES
from migrakit.app.security.security_entities import Finding, ScanSummary
from migrakit.core.ports.task_repository import TaskRepository

LOGGER = logging.getLogger(__name__)

MAX_MATCH_LENGTH = 100


class SecurityScanUseCase:
    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def scan_file(self, file_path: str, content: str) -> List[Finding]:
        findings = []
        for severity, rules in SECURITY_RULES.items():
            for rule in rules:
                for pattern in rule.patterns:
                    for match in pattern.finditer(content):
                        matched_text = match.group(0)
                        if rule.is_skipped(matched_text):
                            continue
                        findings.append(
                            Finding(
                                severity=severity,
                                rule_id=rule.id,
                                rule_name=rule.name,
                                description=rule.description,
                                file=file_path,
                                line=content.count("\n", 0, match.start()) + 1,
                                match=matched_text[:MAX_MATCH_LENGTH],
                            )
                        )
        return findings

    def scan_task(self, folder: str) -> List[Finding]:
        findings = []
        for name in self.task_repository.list_task_files(folder):
            file_path = self.task_repository.get_task_file_path(folder, name)
            try:
                content = self.task_repository.read_task_file(folder, name)
            except OSError as e:
                LOGGER.error("Error scanning %s: %s", file_path, e)
                continue
            findings.extend(self.scan_file(file_path, content))
        return findings

    def scan_all(self) -> ScanSummary:
        summary = ScanSummary()
        if not self.task_repository.tasks_dir_exists():
            LOGGER.error("No tasks directory found.")
            return summary
        for folder in self.task_repository.list_task_folders():
            if self.task_repository.has_task_md(folder):
                summary.findings.extend(self.scan_task(folder))
        LOGGER.info("Security scan finished with %d findings", summary.total)
        return summary

    def scan_folders(self, folders: List[str]) -> ScanSummary:
        LOGGER.info("Scanning folders: %s", ", ".join(folders))
        summary = ScanSummary()
        for folder in folders:
            summary.findings.extend(self.scan_task(folder))
        LOGGER.info("Security scan finished with %d findings", summary.total)
        return summary
