import logging

from .database import engine as default_engine, SessionLocal, Base
from .models import Storage, Kernel
from vm_api.repositories.sqlalchemy.sqlalchemy_kernel_repository import SqlalchemyKernelRepository
from vm_api.repositories.sqlalchemy.sqlalchemy_storage_repository import SqlalchemyStorageRepository
from vm_api.services.kernel_service import KernelService
from vm_api.services.storage_service import StorageService

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_NAME = "local"
DEFAULT_STORAGE_PATH = "/var/lib/vm-api/storage"
DEFAULT_KERNEL_NAME = "vmlinux"


def initialize_db(engine=None, session_factory=None):
    """
    DB와 테이블을 생성하고, 기본 데이터(로컬 저장소와 기본 커널)를 삽입합니다.
    이미 커널이 하나라도 있으면 기본 데이터 삽입은 건너뜁니다.
    """
    engine = engine or default_engine
    session_factory = session_factory or SessionLocal

    logger.info("Initializing database at %s", engine.url)

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=engine)

    db = session_factory()
    try:
        if db.query(Kernel).first():
            logger.info("Seed data already present, skipping.")
            return

        # 이전 초기화가 저장소만 만들고 실패했다면 그 저장소를 재사용합니다.
        storage = db.query(Storage).filter(Storage.name == DEFAULT_STORAGE_NAME).first()
        if storage:
            storage_id = storage.id
        else:
            storage_id = StorageService(SqlalchemyStorageRepository(db)).add(
                DEFAULT_STORAGE_NAME,
                "local",
                {"host_id": None, "path": DEFAULT_STORAGE_PATH, "pool_name": None},
            )

        kernel_id = KernelService(SqlalchemyKernelRepository(db)).add(DEFAULT_KERNEL_NAME, storage_id)
        logger.info("Seeded storage '%s' and kernel '%s' (%s).", DEFAULT_STORAGE_NAME, DEFAULT_KERNEL_NAME, kernel_id)
    finally:
        db.close()


if __name__ == '__main__':
    from vm_api.logger import configure_logging

    configure_logging()
    initialize_db()
