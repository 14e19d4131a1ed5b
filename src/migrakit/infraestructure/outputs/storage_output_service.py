import logging
from dataclasses import dataclass
from migrakit.core.ports.data_service import DataService
from migrakit.core.ports.output_service import OutputService, OutputResult

LOGGER = logging.getLogger(__name__)

REPORTS_PREFIX = "reports"


@dataclass
class StorageOutputResult(OutputResult):
    container: str
    key: str
    identifier: str

    def to_dict(self) -> dict:
        return {
            "container": self.container,
            "key": self.key,
            "identifier": self.identifier,
        }


class StorageOutputService(OutputService):
    def __init__(self, data_service: DataService, container: str):
        self.data_service = data_service
        self.container = container

    def execute(self, report_name: str, content: str) -> OutputResult:
        key = f"{REPORTS_PREFIX}/{report_name}"
        identifier = self.data_service.upload_data(
            self.container, key, content.encode("utf-8")
        )
        LOGGER.info("Report uploaded to %s/%s", self.container, key)
        return StorageOutputResult(
            container=self.container, key=key, identifier=identifier
        )
