import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vm_api.services.exceptions import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(db: Session, action: str):
    """
    블록 안에서 발생한 SQLAlchemyError를 롤백한 뒤 StorageError로 감싸서 다시 발생시킵니다.

    사용 예시:
        with storage_errors(self.db, "insert vm"):
            self.db.add(vm)
            self.db.commit()
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        # IntegrityError 등은 원본 DBAPI 예외(orig)가 더 읽기 쉬운 메시지를 가집니다.
        cause = getattr(e, "orig", None) or e
        logger.warning("Storage failure during '%s': %s", action, cause)
        raise StorageError(f"could not {action}: {cause}") from e
