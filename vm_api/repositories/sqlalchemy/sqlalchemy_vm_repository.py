import uuid
from typing import List, Union
from sqlalchemy.orm import Session
from vm_api.database import models
from vm_api.repositories.interfaces import IVMRepository
from vm_api.repositories.sqlalchemy.errors import storage_errors
from vm_api.services.exceptions import NotFoundError
from vm_api.schemas import NewVm
from vm_api.utils.vm_normalizer import normalize_new_vm

class SqlalchemyVMRepository(IVMRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all(self) -> List[models.VM]:
        with storage_errors(self.db, "list vms"):
            return self.db.query(models.VM).all()

    def get_by_id(self, vm_id: Union[str, uuid.UUID]) -> models.VM:
        try:
            key = vm_id if isinstance(vm_id, uuid.UUID) else uuid.UUID(str(vm_id))
        except ValueError:
            raise NotFoundError("vm", vm_id)

        with storage_errors(self.db, "fetch vm"):
            vm = self.db.get(models.VM, key)
        if vm is None:
            raise NotFoundError("vm", key)
        return vm

    def insert(self, new_vm: NewVm) -> uuid.UUID:
        vm = normalize_new_vm(new_vm)
        with storage_errors(self.db, "insert vm"):
            self.db.add(vm)
            self.db.commit()
        return vm.id

    def update(self, vm: models.VM) -> models.VM:
        self.get_by_id(vm.id)
        with storage_errors(self.db, "update vm"):
            updated = self.db.merge(vm)
            self.db.commit()
            self.db.refresh(updated)
        return updated

    def attach_drive(self, vm_id: uuid.UUID, drive_id: uuid.UUID) -> None:
        with storage_errors(self.db, "attach drive"):
            self.db.add(models.AttachedDrive(vm_id=vm_id, drive_id=drive_id))
            self.db.commit()

    def delete_all(self) -> int:
        with storage_errors(self.db, "delete vms"):
            deleted = self.db.query(models.VM).delete()
            self.db.commit()
        return deleted
