import enum
import uuid
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from vm_api.services.exceptions import VmValidationError

# vms.vcpu / vms.memory 는 32비트 정수 컬럼입니다.
INT32_MAX = 2**31 - 1


class NetworkMode(str, enum.Enum):
    """
    VM이 네트워크 주소를 얻는 방식.

    NONE은 요청에 network_mode가 없거나 null인 경우이며, DB에는 NULL로 저장됩니다.
    """
    DHCP = "dhcp"
    STATIC_IP = "static_ip"
    NONE = "none"

    def as_column(self) -> Optional[str]:
        return None if self is NetworkMode.NONE else self.value


class NewVm(BaseModel):
    """VM 생성 요청. DB에 그대로 저장되지 않고 normalize_new_vm을 거쳐 models.VM이 됩니다."""
    name: str = Field(..., min_length=1, strict=True)
    vcpu: int = Field(..., ge=1, le=INT32_MAX, strict=True)
    memory: int = Field(..., ge=1, le=INT32_MAX, strict=True)
    kernel: uuid.UUID
    network_mode: NetworkMode = NetworkMode.NONE
    address: Optional[str] = None
    kernel_params: Optional[str] = None

    @field_validator("network_mode", mode="before")
    @classmethod
    def _null_network_mode(cls, value):
        return NetworkMode.NONE if value is None else value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewVm":
        """
        JSON 요청 본문(dict)을 NewVm으로 변환합니다.

        Raises:
            VmValidationError: 필수 필드가 없거나 타입/범위가 올바르지 않을 때.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
                for err in e.errors()
            )
            raise VmValidationError(f"Invalid VM request: {details}") from e
