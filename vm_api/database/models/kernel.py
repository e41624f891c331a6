import uuid

from sqlalchemy import Column, String, ForeignKey, Uuid
from ..database import Base

class Kernel(Base):
    """
    VM 부팅에 사용하는 커널 이미지를 나타냅니다.
    커널 파일은 특정 저장소(Storage)에 위치합니다.
    """
    __tablename__ = "kernels"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    storage_id = Column(Uuid, ForeignKey("storages.id"), nullable=False)
