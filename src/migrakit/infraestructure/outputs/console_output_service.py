import sys
from dataclasses import dataclass
from typing import Optional, TextIO
from migrakit.core.ports.output_service import OutputService, OutputResult


@dataclass
class ConsoleOutputResult(OutputResult):
    report_name: str

    def to_dict(self) -> dict:
        return {"report_name": self.report_name}


class ConsoleOutputService(OutputService):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def execute(self, report_name: str, content: str) -> OutputResult:
        stream = self.stream or sys.stdout
        stream.write(content)
        if not content.endswith("\n"):
            stream.write("\n")
        return ConsoleOutputResult(report_name=report_name)
