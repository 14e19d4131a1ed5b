import logging
from typing import List
import yaml
from migrakit.app.rules import (
    FOLDER_NAME_PATTERN,
    FORBIDDEN_PATTERNS,
    REQUIRED_FRONTMATTER_FIELDS,
    SECURITY_PATTERNS,
    TASK_FILE_NAME,
    VALID_TASK_TYPES,
)
from migrakit.app.task.frontmatter import parse_frontmatter
from migrakit.app.validation.validation_entities import IssueType, ValidationResult
from migrakit.core.ports.task_repository import TaskRepository

LOGGER = logging.getLogger(__name__)


class ValidateTasksUseCase:
    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def validate_task(self, folder: str, result: ValidationResult) -> bool:
        if not self.task_repository.has_task_md(folder):
            result.add_error(
                folder,
                IssueType.MISSING_FILE,
                f"Missing required file: {TASK_FILE_NAME}",
            )
            return False
        try:
            content = self.task_repository.read_task_md(folder)
        except OSError as e:
            LOGGER.error("Error reading %s of %s: %s", TASK_FILE_NAME, folder, e)
            result.add_error(
                folder,
                IssueType.READ_ERROR,
                f"Error reading {TASK_FILE_NAME}: {e}",
            )
            return False
        return self.validate_task_md(folder, content, result)

    def validate_task_md(
        self, folder: str, content: str, result: ValidationResult
    ) -> bool:
        try:
            data, _ = parse_frontmatter(content)
        except (yaml.YAMLError, ValueError) as e:
            result.add_error(
                folder,
                IssueType.FRONTMATTER_ERROR,
                f"Invalid YAML frontmatter: {e}",
            )
            return False

        is_valid = True
        for field_name in REQUIRED_FRONTMATTER_FIELDS:
            if not data.get(field_name):
                result.add_error(
                    folder,
                    IssueType.MISSING_FIELD,
                    f"Missing required frontmatter field: {field_name}",
                )
                is_valid = False

        task_id = data.get("id")
        if task_id and str(task_id) != folder:
            result.add_warning(
                folder,
                IssueType.ID_MISMATCH,
                f'Task id "{task_id}" does not match folder name "{folder}"',
            )

        task_type = data.get("type")
        if task_type and task_type not in VALID_TASK_TYPES:
            result.add_error(
                folder,
                IssueType.INVALID_TYPE,
                f"Invalid task type: {task_type}. "
                f"Valid types: {', '.join(VALID_TASK_TYPES)}",
            )
            is_valid = False

        for pattern in FORBIDDEN_PATTERNS:
            if pattern.search(content):
                result.add_error(
                    folder,
                    IssueType.FORBIDDEN_PATTERN,
                    f"Content contains forbidden pattern: {pattern.pattern}",
                )
                is_valid = False

        for pattern, description in SECURITY_PATTERNS:
            if pattern.search(content):
                result.add_warning(
                    folder,
                    IssueType.SECURITY_WARNING,
                    f"{description}: {pattern.pattern}",
                )

        return is_valid

    def validate_folder_name(self, folder: str, result: ValidationResult) -> None:
        if not FOLDER_NAME_PATTERN.match(folder):
            result.add_warning(
                folder,
                IssueType.NAMING_CONVENTION,
                'Folder name should be lowercase with hyphens (e.g., "my-task-name")',
            )

    def validate_all(self) -> ValidationResult:
        if not self.task_repository.tasks_dir_exists():
            LOGGER.info("No tasks directory found.")
            return ValidationResult()
        folders = [
            folder
            for folder in self.task_repository.list_task_folders()
            if self.task_repository.has_task_md(folder)
        ]
        return self._validate_folders(folders)

    def validate_changed_tasks(self, folders: List[str]) -> ValidationResult:
        LOGGER.info("Validating changed tasks: %s", ", ".join(folders))
        return self._validate_folders(folders)

    def _validate_folders(self, folders: List[str]) -> ValidationResult:
        result = ValidationResult()
        for folder in folders:
            self.validate_folder_name(folder, result)
            if self.validate_task(folder, result):
                result.valid += 1
            else:
                result.invalid += 1
        LOGGER.info(
            "Validated %d tasks: %d valid, %d invalid",
            result.valid + result.invalid,
            result.valid,
            result.invalid,
        )
        return result
