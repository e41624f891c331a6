import uuid

from sqlalchemy import Column, String, Uuid
from ..database import Base

class Host(Base):
    """
    VM이 실제로 배치되는 물리 호스트를 나타냅니다.
    호스트의 등록과 관리는 별도의 서비스가 담당하며, 여기서는 VM이 참조할 수 있도록 테이블만 정의합니다.
    """
    __tablename__ = "hosts"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, unique=True, nullable=False)
    address = Column(String, nullable=True)
