import json
import logging
from typing import List
import yaml
from migrakit.app.task.task_entities import Task
from migrakit.core.ports.task_repository import TaskRepository

LOGGER = logging.getLogger(__name__)


class GenerateMetadataUseCase:
    def __init__(self, task_repository: TaskRepository, output_path: str):
        self.task_repository = task_repository
        self.output_path = output_path

    def execute(self) -> List[Task]:
        tasks: List[Task] = []
        if not self.task_repository.tasks_dir_exists():
            LOGGER.info("No tasks directory found. Creating empty metadata.json")
        for folder in self.task_repository.list_task_folders():
            if not self.task_repository.has_task_md(folder):
                continue
            try:
                task = self.task_repository.get_task(folder)
            except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as e:
                LOGGER.error("Error processing %s/task.md: %s", folder, e)
                continue
            if not task.id or not task.name:
                LOGGER.warning(
                    "%s/task.md is missing required frontmatter (id, name)", folder
                )
                continue
            tasks.append(task)

        tasks.sort(key=lambda task: task.id)
        metadata = {"tasks": [task.to_metadata() for task in tasks]}
        with open(self.output_path, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)

        LOGGER.info("Generated metadata.json with %d tasks", len(tasks))
        for task in tasks:
            LOGGER.info("  - %s: %s", task.id, task.name)
        return tasks
