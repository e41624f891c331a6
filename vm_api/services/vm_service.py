import logging
import uuid
from typing import Any, Dict, List, Union

from vm_api.database import models
from vm_api.database.models import VmStatus
from vm_api.repositories.interfaces import IVMRepository
from vm_api.schemas import NewVm
from vm_api.services.exceptions import VmStateError

logger = logging.getLogger(__name__)

# 상태 전이 규칙: 동작 -> (허용되는 현재 상태들, 전이 후 상태)
_TRANSITIONS = {
    "start": ({VmStatus.CREATED, VmStatus.STOPPED}, VmStatus.RUNNING),
    "stop": ({VmStatus.RUNNING}, VmStatus.STOPPED),
}


def serialize_vm(vm: models.VM) -> Dict[str, Any]:
    return {
        "id": str(vm.id),
        "name": vm.name,
        "status": vm.status,
        "host_id": str(vm.host_id) if vm.host_id else None,
        "vcpu": vm.vcpu,
        "memory": vm.memory,
        "address": vm.address,
        "network_mode": vm.network_mode,
        "kernel_params": vm.kernel_params,
        "kernel": str(vm.kernel),
    }


class VmService:
    def __init__(self, vm_repo: IVMRepository):
        """
        VmService를 초기화합니다.

        Args:
            vm_repo: VM 데이터에 접근하기 위한 리포지토리 객체.
        """
        self.vm_repo = vm_repo

    def list_vms(self) -> List[Dict[str, Any]]:
        """저장된 모든 VM을 딕셔너리 리스트로 반환합니다."""
        return [serialize_vm(vm) for vm in self.vm_repo.get_all()]

    def get_vm_record(self, vm_id: Union[str, uuid.UUID]) -> models.VM:
        return self.vm_repo.get_by_id(vm_id)

    def get_vm(self, vm_id: Union[str, uuid.UUID]) -> Dict[str, Any]:
        return serialize_vm(self.get_vm_record(vm_id))

    def add_vm(self, data: Dict[str, Any]) -> str:
        """
        JSON 요청 본문으로 새로운 VM을 생성합니다.

        Args:
            data: name, vcpu, memory, kernel 및 선택 필드(network_mode, address, kernel_params)를
                  담은 딕셔너리.

        Returns:
            새로 발급된 VM ID 문자열.

        Raises:
            VmValidationError: 요청 본문이 유효하지 않을 때.
            StorageError: DB 저장에 실패했을 때 (존재하지 않는 커널 등).
        """
        new_vm = NewVm.from_dict(data)
        vm_id = self.vm_repo.insert(new_vm)
        logger.info("VM '%s' created with id %s.", new_vm.name, vm_id)
        return str(vm_id)

    def start(self, vm_id: Union[str, uuid.UUID]) -> str:
        """
        VM을 RUNNING 상태로 전환합니다. 실제 하이퍼바이저는 제어하지 않고 상태만 기록합니다.

        Raises:
            NotFoundError: VM이 존재하지 않을 때.
            VmStateError: 이미 실행 중일 때.
        """
        return self._transition(vm_id, "start")

    def stop(self, vm_id: Union[str, uuid.UUID]) -> str:
        """
        VM을 STOPPED 상태로 전환합니다.

        Raises:
            NotFoundError: VM이 존재하지 않을 때.
            VmStateError: 실행 중이 아닐 때.
        """
        return self._transition(vm_id, "stop")

    def _transition(self, vm_id, action: str) -> str:
        allowed, target = _TRANSITIONS[action]
        vm = self.vm_repo.get_by_id(vm_id)
        current = VmStatus(vm.status)
        if current not in allowed:
            raise VmStateError(f"cannot {action} vm '{vm.id}' in state {current.name}")

        vm.status = target.value
        updated = self.vm_repo.update(vm)
        logger.info("VM %s: %s -> %s", updated.id, current.name, target.name)
        return str(updated.id)

    def attach_drive(self, vm_id: Union[str, uuid.UUID], drive_id: Union[str, uuid.UUID]) -> None:
        """VM에 드라이브를 연결합니다. 중복 연결이나 존재하지 않는 ID는 StorageError가 됩니다."""
        self.vm_repo.attach_drive(uuid.UUID(str(vm_id)), uuid.UUID(str(drive_id)))
        logger.info("Drive %s attached to VM %s.", drive_id, vm_id)

    def delete_all(self) -> int:
        return self.vm_repo.delete_all()
