import uuid
from abc import ABC, abstractmethod
from typing import List
from vm_api.database import models

class IDriveRepository(ABC):
    @abstractmethod
    def create(self, drive_model: models.Drive) -> models.Drive:
        """새로운 드라이브 정보를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def list_by_vm_id(self, vm_id: uuid.UUID) -> List[models.Drive]:
        """특정 VM에 연결된 모든 드라이브를 조회합니다."""
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """모든 드라이브를 삭제합니다."""
        pass
