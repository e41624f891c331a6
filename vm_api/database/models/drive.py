import uuid

from sqlalchemy import Boolean, Column, Integer, String, ForeignKey, Uuid
from ..database import Base

class Drive(Base):
    """
    VM에 연결할 수 있는 블록 디바이스(디스크)를 나타냅니다.
    하나의 드라이브는 vm_drives_map 연관 테이블을 통해 여러 VM에 연결될 수 있습니다.
    """
    __tablename__ = "drives"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    size = Column(Integer, nullable=False)  # MiB
    storage_id = Column(Uuid, ForeignKey("storages.id"), nullable=False)
    readonly = Column(Boolean, nullable=False, default=False)
