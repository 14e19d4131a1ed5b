from abc import ABC, abstractmethod


class DataService(ABC):
    @abstractmethod
    def upload_data(self, container: str, key: str, data: bytes) -> str:
        pass

    @abstractmethod
    def download_data(self, container: str, key: str) -> bytes:
        pass

    @abstractmethod
    def delete_data(self, container: str, key: str) -> None:
        pass
