import uuid

from sqlalchemy import Column, String, JSON, Uuid
from ..database import Base

class Storage(Base):
    """
    커널 이미지와 드라이브 파일이 저장되는 저장소를 정의합니다.
    (예: 호스트의 로컬 디렉터리, 원격 스토리지 풀).
    config에는 저장소 종류에 따른 세부 설정(host_id, path, pool_name)이 JSON으로 저장됩니다.
    """
    __tablename__ = "storages"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, unique=True, nullable=False)
    storage_type = Column(String, nullable=False)
    config = Column(JSON, nullable=False, default=dict)
