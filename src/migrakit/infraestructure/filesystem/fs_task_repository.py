import logging
import os
from typing import List
from migrakit.app.rules import (
    EXCLUDED_FILES,
    REFERENCE_EXTENSIONS,
    TASK_FILE_NAME,
    TASKS_DIR,
)
from migrakit.app.task.frontmatter import parse_frontmatter
from migrakit.app.task.task_entities import Task
from migrakit.core.ports.task_repository import TaskRepository

LOGGER = logging.getLogger(__name__)


class FileSystemTaskRepository(TaskRepository):
    def __init__(self, root_dir: str):
        self.root_dir = root_dir
        self.tasks_dir = os.path.join(root_dir, TASKS_DIR)

    def tasks_dir_exists(self) -> bool:
        return os.path.isdir(self.tasks_dir)

    def list_task_folders(self) -> List[str]:
        if not self.tasks_dir_exists():
            return []
        return sorted(
            entry.name
            for entry in os.scandir(self.tasks_dir)
            if entry.is_dir() and not entry.name.startswith(".")
        )

    def has_task_md(self, folder: str) -> bool:
        return os.path.isfile(os.path.join(self.tasks_dir, folder, TASK_FILE_NAME))

    def read_task_md(self, folder: str) -> str:
        return self.read_task_file(folder, TASK_FILE_NAME)

    def list_task_files(self, folder: str) -> List[str]:
        task_path = os.path.join(self.tasks_dir, folder)
        if not os.path.isdir(task_path):
            return []
        return sorted(entry.name for entry in os.scandir(task_path) if entry.is_file())

    def read_task_file(self, folder: str, name: str) -> str:
        with open(
            os.path.join(self.tasks_dir, folder, name),
            "r",
            encoding="utf-8",
            errors="replace",
        ) as f:
            return f.read()

    def get_task_file_path(self, folder: str, name: str) -> str:
        return os.path.relpath(
            os.path.join(self.tasks_dir, folder, name), self.root_dir
        )

    def get_task(self, folder: str) -> Task:
        if not self.has_task_md(folder):
            raise FileNotFoundError(f"{TASK_FILE_NAME} not found in {folder}")
        data, _ = parse_frontmatter(self.read_task_md(folder))
        references = [
            name
            for name in self.list_task_files(folder)
            if name not in EXCLUDED_FILES
            and os.path.splitext(name)[1] in REFERENCE_EXTENSIONS
        ]
        LOGGER.debug("Task %s references: %s", folder, references)
        return Task(
            id=_as_text(data.get("id")),
            name=_as_text(data.get("name")),
            type=_as_text(data.get("type")),
            folder=folder,
            path=f"{TASKS_DIR}/{folder}",
            references=references,
        )


def _as_text(value) -> str:
    return str(value) if value else ""
