import enum

from sqlalchemy import Column, Integer, String, ForeignKey, Uuid
from ..database import Base


class VmStatus(enum.IntEnum):
    """vms.status 컬럼에 저장되는 VM 상태 코드."""
    CREATED = 0
    RUNNING = 1
    STOPPED = 2


class VM(Base):
    """
    사용자가 생성하고 관리하는 가상 머신을 나타냅니다.
    vCPU, 메모리, 부팅 커널과 네트워크 설정을 가지며, 선택적으로 특정 호스트에 배치됩니다.

    network_mode가 'static_ip'이면 address는 비어 있지 않은 값이어야 하고,
    network_mode가 없으면 address는 빈 문자열로 저장됩니다.
    """
    __tablename__ = "vms"
    id = Column(Uuid, primary_key=True)
    name = Column(String, nullable=False)
    status = Column(Integer, nullable=False, default=VmStatus.CREATED.value)
    host_id = Column(Uuid, ForeignKey("hosts.id"), nullable=True)
    vcpu = Column(Integer, nullable=False)
    memory = Column(Integer, nullable=False)
    address = Column(String, nullable=True)
    network_mode = Column(String, nullable=True)
    kernel_params = Column(String, nullable=False)
    kernel = Column(Uuid, ForeignKey("kernels.id"), nullable=False)
