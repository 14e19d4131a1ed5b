import logging
from dataclasses import dataclass
from typing import Optional
from migrakit.core.ports.data_service import DataService
from migrakit.infraestructure.aws.s3_data_service import S3DataService
from migrakit.infraestructure.azure.blob_data_service import BlobDataService

LOGGER = logging.getLogger(__name__)

S3_PROVIDER = "s3"
AZURE_PROVIDER = "azure"


@dataclass
class StorageDependencies:
    data_service: DataService


def get_dependencies(
    provider: str,
    s3_endpoint: Optional[str] = None,
    s3_access_key_id: Optional[str] = None,
    s3_secret_access_key: Optional[str] = None,
    s3_region: Optional[str] = None,
    azure_endpoint: Optional[str] = None,
    azure_connection_string: Optional[str] = None,
) -> StorageDependencies:
    provider = provider.lower()
    LOGGER.debug("Storage provider: %s", provider)
    if provider == S3_PROVIDER:
        if not s3_access_key_id:
            raise ValueError("MIGRAKIT_S3_ACCESS_KEY_ID is not set")
        if not s3_secret_access_key:
            raise ValueError("MIGRAKIT_S3_SECRET_ACCESS_KEY is not set")
        return StorageDependencies(
            data_service=S3DataService(
                endpoint=s3_endpoint,
                access_key_id=s3_access_key_id,
                secret_access_key=s3_secret_access_key,
                region_name=s3_region or "us-east-1",
            )
        )
    elif provider == AZURE_PROVIDER:
        if not azure_endpoint and not azure_connection_string:
            raise ValueError(
                "MIGRAKIT_AZURE_ENDPOINT or MIGRAKIT_AZURE_CONNECTION_STRING is not set"
            )
        return StorageDependencies(
            data_service=BlobDataService(
                endpoint=azure_endpoint,
                connection_string=azure_connection_string,
            )
        )
    LOGGER.error("Invalid storage provider: %s", provider)
    raise ValueError(f"Invalid storage provider: {provider}")
