from typing import Optional
from migrakit.core.ports.data_service import DataService
from migrakit.core.ports.output_service import OutputService, OutputServiceFactory
from migrakit.infraestructure.outputs.console_output_service import (
    ConsoleOutputService,
)
from migrakit.infraestructure.outputs.storage_output_service import (
    StorageOutputService,
)

CONSOLE_TARGET = "console"
STORAGE_TARGET = "storage"


class OutputsServiceFactoryImpl(OutputServiceFactory):
    def __init__(
        self,
        data_service: Optional[DataService] = None,
        report_container: Optional[str] = None,
    ):
        self.data_service = data_service
        self.report_container = report_container

    def create_output_service(self, target: str) -> OutputService:
        if target == CONSOLE_TARGET:
            return ConsoleOutputService()
        elif target == STORAGE_TARGET:
            if self.data_service is None:
                raise ValueError("A data service is required for storage output")
            if not self.report_container:
                raise ValueError("MIGRAKIT_REPORT_CONTAINER is not set")
            return StorageOutputService(
                data_service=self.data_service,
                container=self.report_container,
            )
        raise ValueError(f"Invalid output target: {target}")
