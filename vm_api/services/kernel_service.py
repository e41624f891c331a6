import uuid

from vm_api.database import models
from vm_api.repositories.interfaces import IKernelRepository


class KernelService:
    def __init__(self, kernel_repo: IKernelRepository):
        self.kernel_repo = kernel_repo

    def add(self, name: str, storage_id: uuid.UUID) -> uuid.UUID:
        """커널을 등록하고 새 ID를 반환합니다. 저장소가 없으면 StorageError."""
        return self.kernel_repo.create(models.Kernel(name=name, storage_id=storage_id)).id

    def delete_all(self) -> int:
        return self.kernel_repo.delete_all()
