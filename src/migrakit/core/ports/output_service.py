from abc import ABC, abstractmethod


class OutputResult(ABC):
    @abstractmethod
    def to_dict(self) -> dict:
        pass


class OutputService(ABC):
    @abstractmethod
    def execute(self, report_name: str, content: str) -> OutputResult:
        pass


class OutputServiceFactory(ABC):
    @abstractmethod
    def create_output_service(self, target: str) -> OutputService:
        pass
