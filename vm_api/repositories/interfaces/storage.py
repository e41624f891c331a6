from abc import ABC, abstractmethod
from vm_api.database import models

class IStorageRepository(ABC):
    @abstractmethod
    def create(self, storage_model: models.Storage) -> models.Storage:
        pass

    @abstractmethod
    def delete_all(self) -> int:
        pass
