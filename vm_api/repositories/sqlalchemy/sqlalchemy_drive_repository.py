import uuid
from typing import List
from sqlalchemy.orm import Session
from vm_api.database import models
from vm_api.repositories.interfaces import IDriveRepository
from vm_api.repositories.sqlalchemy.errors import storage_errors

class SqlalchemyDriveRepository(IDriveRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, drive_model: models.Drive) -> models.Drive:
        with storage_errors(self.db, "insert drive"):
            self.db.add(drive_model)
            self.db.commit()
            self.db.refresh(drive_model)
        return drive_model

    def list_by_vm_id(self, vm_id: uuid.UUID) -> List[models.Drive]:
        with storage_errors(self.db, "list drives"):
            return (
                self.db.query(models.Drive)
                .join(models.AttachedDrive, models.AttachedDrive.drive_id == models.Drive.id)
                .filter(models.AttachedDrive.vm_id == vm_id)
                .all()
            )

    def delete_all(self) -> int:
        with storage_errors(self.db, "delete drives"):
            deleted = self.db.query(models.Drive).delete()
            self.db.commit()
        return deleted
