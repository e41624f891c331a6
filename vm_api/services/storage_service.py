import uuid
from typing import Any, Dict, Optional

from vm_api.database import models
from vm_api.repositories.interfaces import IStorageRepository

STORAGE_TYPES = ("local", "remote")


class StorageService:
    def __init__(self, storage_repo: IStorageRepository):
        self.storage_repo = storage_repo

    def add(self, name: str, storage_type: str, config: Optional[Dict[str, Any]] = None) -> uuid.UUID:
        """
        저장소를 등록하고 새 ID를 반환합니다.

        Args:
            name: 저장소 이름 (고유해야 함).
            storage_type: 'local' 또는 'remote'.
            config: host_id, path, pool_name 등 저장소 종류별 설정.

        Raises:
            ValueError: 지원하지 않는 storage_type일 때.
        """
        if storage_type not in STORAGE_TYPES:
            raise ValueError(f"Unsupported storage type '{storage_type}'.")
        storage = models.Storage(name=name, storage_type=storage_type, config=dict(config or {}))
        return self.storage_repo.create(storage).id

    def delete_all(self) -> int:
        return self.storage_repo.delete_all()
