import logging
from typing import Optional
import boto3
from migrakit.core.ports.data_service import DataService

LOGGER = logging.getLogger(__name__)


class S3DataService(DataService):

    def __init__(
        self,
        endpoint: Optional[str],
        access_key_id: str,
        secret_access_key: str,
        region_name: str = "us-east-1",
    ):
        self.s3_client = boto3.client(
            "s3",
            endpoint_url=endpoint,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            region_name=region_name,
        )

    def upload_data(self, container: str, key: str, data: bytes) -> str:
        LOGGER.debug("Uploading %d bytes to %s/%s", len(data), container, key)
        response = self.s3_client.put_object(Bucket=container, Key=key, Body=data)
        return response["ETag"].strip('"')

    def download_data(self, container: str, key: str) -> bytes:
        response = self.s3_client.get_object(Bucket=container, Key=key)
        return response["Body"].read()

    def delete_data(self, container: str, key: str) -> None:
        self.s3_client.delete_object(Bucket=container, Key=key)
