import uuid
from abc import ABC, abstractmethod
from typing import List, Union
from vm_api.database import models
from vm_api.schemas import NewVm

class IVMRepository(ABC):
    @abstractmethod
    def get_all(self) -> List[models.VM]:
        """저장된 모든 VM을 저장 순서대로 조회합니다. VM이 없으면 빈 리스트를 반환합니다."""
        pass

    @abstractmethod
    def get_by_id(self, vm_id: Union[str, uuid.UUID]) -> models.VM:
        """
        ID로 특정 VM을 조회합니다.

        Raises:
            NotFoundError: 해당 ID의 VM이 없을 때.
        """
        pass

    @abstractmethod
    def insert(self, new_vm: NewVm) -> uuid.UUID:
        """
        VM 생성 요청을 정규화하여 데이터베이스에 저장하고, 새로 발급된 ID를 반환합니다.

        Raises:
            VmValidationError: 요청이 정규화 규칙을 만족하지 않을 때.
            StorageError: 제약 조건 위반(존재하지 않는 커널 등) 시.
        """
        pass

    @abstractmethod
    def update(self, vm: models.VM) -> models.VM:
        """기존 VM 레코드 전체를 주어진 값으로 교체하고, 갱신된 레코드를 반환합니다."""
        pass

    @abstractmethod
    def attach_drive(self, vm_id: uuid.UUID, drive_id: uuid.UUID) -> None:
        """VM에 드라이브를 연결합니다. 이미 연결되어 있거나 ID가 존재하지 않으면 StorageError."""
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """모든 VM을 삭제하고 삭제된 개수를 반환합니다. (관리/테스트 용도)"""
        pass
