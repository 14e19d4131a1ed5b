from abc import ABC, abstractmethod
from typing import List
from migrakit.app.task.task_entities import Task


class TaskRepository(ABC):
    @abstractmethod
    def tasks_dir_exists(self) -> bool:
        pass

    @abstractmethod
    def list_task_folders(self) -> List[str]:
        pass

    @abstractmethod
    def has_task_md(self, folder: str) -> bool:
        pass

    @abstractmethod
    def read_task_md(self, folder: str) -> str:
        pass

    @abstractmethod
    def list_task_files(self, folder: str) -> List[str]:
        pass

    @abstractmethod
    def read_task_file(self, folder: str, name: str) -> str:
        pass

    @abstractmethod
    def get_task_file_path(self, folder: str, name: str) -> str:
        pass

    @abstractmethod
    def get_task(self, folder: str) -> Task:
        pass
