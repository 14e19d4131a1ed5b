import logging
from migrakit.core.ports.data_service import DataService

LOGGER = logging.getLogger(__name__)


class UploadDataUseCase:
    def __init__(self, data_service: DataService):
        self.data_service = data_service

    def execute(self, container: str, key: str, data: bytes) -> str:
        identifier = self.data_service.upload_data(container, key, data)
        LOGGER.info("Uploaded %s/%s (%s)", container, key, identifier)
        return identifier


class DownloadDataUseCase:
    def __init__(self, data_service: DataService):
        self.data_service = data_service

    def execute(self, container: str, key: str) -> bytes:
        data = self.data_service.download_data(container, key)
        LOGGER.info("Downloaded %s/%s: %d bytes", container, key, len(data))
        return data


class DeleteDataUseCase:
    def __init__(self, data_service: DataService):
        self.data_service = data_service

    def execute(self, container: str, key: str) -> None:
        self.data_service.delete_data(container, key)
        LOGGER.info("Deleted %s/%s", container, key)
