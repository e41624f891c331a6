from sqlalchemy.orm import Session
from vm_api.database import models
from vm_api.repositories.interfaces import IKernelRepository
from vm_api.repositories.sqlalchemy.errors import storage_errors

class SqlalchemyKernelRepository(IKernelRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, kernel_model: models.Kernel) -> models.Kernel:
        with storage_errors(self.db, "insert kernel"):
            self.db.add(kernel_model)
            self.db.commit()
            self.db.refresh(kernel_model)
        return kernel_model

    def delete_all(self) -> int:
        with storage_errors(self.db, "delete kernels"):
            deleted = self.db.query(models.Kernel).delete()
            self.db.commit()
        return deleted
