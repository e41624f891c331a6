from sqlalchemy import Column, ForeignKey, Uuid
from ..database import Base

class AttachedDrive(Base):
    """
    VM과 드라이브(Drive) 사이의 다대다(many-to-many) 관계를 연결하는 연관 테이블 모델입니다.
    (vm_id, drive_id) 쌍이 기본 키이므로 같은 드라이브를 같은 VM에 두 번 연결할 수 없습니다.
    VM이나 드라이브가 삭제되면 연결 정보도 함께 삭제됩니다.
    """
    __tablename__ = "vm_drives_map"
    vm_id = Column(Uuid, ForeignKey("vms.id", ondelete="CASCADE"), primary_key=True)
    drive_id = Column(Uuid, ForeignKey("drives.id", ondelete="CASCADE"), primary_key=True)
