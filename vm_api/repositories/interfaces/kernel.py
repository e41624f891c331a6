from abc import ABC, abstractmethod
from vm_api.database import models

class IKernelRepository(ABC):
    @abstractmethod
    def create(self, kernel_model: models.Kernel) -> models.Kernel:
        pass

    @abstractmethod
    def delete_all(self) -> int:
        pass
