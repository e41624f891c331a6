import uuid
from typing import Any, Dict, List

from vm_api.database import models
from vm_api.repositories.interfaces import IDriveRepository


def serialize_drive(drive: models.Drive) -> Dict[str, Any]:
    return {
        "id": str(drive.id),
        "name": drive.name,
        "size": drive.size,
        "storage_id": str(drive.storage_id),
        "readonly": drive.readonly,
    }


class DriveService:
    def __init__(self, drive_repo: IDriveRepository):
        self.drive_repo = drive_repo

    def add_drive(self, name: str, size: int, storage_id: uuid.UUID, readonly: bool = False) -> uuid.UUID:
        drive = models.Drive(name=name, size=size, storage_id=storage_id, readonly=readonly)
        return self.drive_repo.create(drive).id

    def get_drives_for_vm(self, vm: models.VM) -> List[Dict[str, Any]]:
        """
        VM에 연결된 드라이브 목록을 조회합니다.

        Args:
            vm: 이미 조회된 VM 모델 객체.

        Returns:
            드라이브 정보(id, name, size, storage_id, readonly)를 담은 딕셔너리의 리스트.
        """
        return [serialize_drive(drive) for drive in self.drive_repo.list_by_vm_id(vm.id)]

    def delete_all(self) -> int:
        return self.drive_repo.delete_all()
