import logging
from typing import Optional
from azure.identity import DefaultAzureCredential
from azure.storage.blob import BlobServiceClient
from migrakit.core.ports.data_service import DataService

LOGGER = logging.getLogger(__name__)


class BlobDataService(DataService):
    """Blob storage wrapper authenticated with a managed identity or a connection string.

    The connection string takes precedence when both are given.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        connection_string: Optional[str] = None,
    ):
        if connection_string:
            self.blob_service_client = BlobServiceClient.from_connection_string(
                connection_string
            )
        elif endpoint:
            self.blob_service_client = BlobServiceClient(
                account_url=endpoint, credential=DefaultAzureCredential()
            )
        else:
            raise ValueError("An endpoint or a connection string is required")

    def _get_blob_client(self, container: str, key: str):
        container_client = self.blob_service_client.get_container_client(container)
        return container_client.get_blob_client(key)

    def upload_data(self, container: str, key: str, data: bytes) -> str:
        LOGGER.debug("Uploading %d bytes to %s/%s", len(data), container, key)
        blob_client = self._get_blob_client(container, key)
        result = blob_client.upload_blob(data, length=len(data), overwrite=True)
        return result["etag"].strip('"')

    def download_data(self, container: str, key: str) -> bytes:
        blob_client = self._get_blob_client(container, key)
        return blob_client.download_blob().readall()

    def delete_data(self, container: str, key: str) -> None:
        blob_client = self._get_blob_client(container, key)
        blob_client.delete_blob()
