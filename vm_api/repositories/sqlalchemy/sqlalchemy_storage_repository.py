from sqlalchemy.orm import Session
from vm_api.database import models
from vm_api.repositories.interfaces import IStorageRepository
from vm_api.repositories.sqlalchemy.errors import storage_errors

class SqlalchemyStorageRepository(IStorageRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, storage_model: models.Storage) -> models.Storage:
        with storage_errors(self.db, "insert storage"):
            self.db.add(storage_model)
            self.db.commit()
            self.db.refresh(storage_model)
        return storage_model

    def delete_all(self) -> int:
        with storage_errors(self.db, "delete storages"):
            deleted = self.db.query(models.Storage).delete()
            self.db.commit()
        return deleted
