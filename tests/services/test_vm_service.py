# tests/services/test_vm_service.py
import uuid

import pytest
from unittest.mock import MagicMock, ANY

from vm_api.database import models
from vm_api.database.models import VmStatus
from vm_api.repositories.interfaces import IVMRepository
from vm_api.services.exceptions import NotFoundError, VmStateError, VmValidationError
from vm_api.services.vm_service import VmService
from vm_api.schemas import NetworkMode, NewVm

# ===================================================================
#  테스트를 위한 Fixture 설정
# ===================================================================

KERNEL_ID = uuid.uuid4()

def make_vm(status=VmStatus.CREATED, **overrides):
    fields = dict(
        id=uuid.uuid4(), name="vm1", status=status.value, host_id=None, vcpu=1, memory=128,
        address="", network_mode=None, kernel_params="console=ttyS0", kernel=KERNEL_ID,
    )
    fields.update(overrides)
    return models.VM(**fields)

@pytest.fixture
def mock_vm_repo() -> MagicMock:
    """IVMRepository에 대한 모의(Mock) 객체를 생성하여 반환합니다."""
    repo = MagicMock(spec=IVMRepository)
    # update는 전달받은 객체를 그대로 돌려주도록 설정
    repo.update.side_effect = lambda vm: vm
    return repo

@pytest.fixture
def vm_service(mock_vm_repo: MagicMock) -> VmService:
    """테스트에 사용될 VmService 인스턴스를 생성하고, 의존성을 주입합니다."""
    return VmService(vm_repo=mock_vm_repo)

# ===================================================================
#  add_vm 테스트 스위트
# ===================================================================
class TestAddVm:
    def test_add_vm_success(self, vm_service, mock_vm_repo):
        """유효한 요청 본문이면 NewVm으로 변환되어 리포지토리에 전달되어야 합니다."""
        # === Arrange ===
        new_id = uuid.uuid4()
        mock_vm_repo.insert.return_value = new_id
        data = {"name": "vm1", "vcpu": 1, "memory": 128, "kernel": str(KERNEL_ID), "network_mode": "dhcp"}

        # === Act ===
        result = vm_service.add_vm(data)

        # === Assert ===
        assert result == str(new_id)
        mock_vm_repo.insert.assert_called_once_with(ANY)
        new_vm = mock_vm_repo.insert.call_args.args[0]
        assert isinstance(new_vm, NewVm)
        assert new_vm.network_mode is NetworkMode.DHCP
        assert new_vm.kernel == KERNEL_ID

    def test_add_vm_invalid_body(self, vm_service, mock_vm_repo):
        with pytest.raises(VmValidationError):
            vm_service.add_vm({"name": "vm1"})
        # 검증 실패 시 리포지토리는 호출되지 않아야 함
        mock_vm_repo.insert.assert_not_called()

# ===================================================================
#  조회 테스트 스위트
# ===================================================================
class TestQueries:
    def test_list_vms_serializes_records(self, vm_service, mock_vm_repo):
        vm = make_vm(network_mode="static_ip", address="192.168.122.100")
        mock_vm_repo.get_all.return_value = [vm]

        vms = vm_service.list_vms()

        assert vms == [{
            "id": str(vm.id),
            "name": "vm1",
            "status": 0,
            "host_id": None,
            "vcpu": 1,
            "memory": 128,
            "address": "192.168.122.100",
            "network_mode": "static_ip",
            "kernel_params": "console=ttyS0",
            "kernel": str(KERNEL_ID),
        }]

    def test_get_vm_propagates_not_found(self, vm_service, mock_vm_repo):
        missing = uuid.uuid4()
        mock_vm_repo.get_by_id.side_effect = NotFoundError("vm", missing)

        with pytest.raises(NotFoundError):
            vm_service.get_vm(missing)

# ===================================================================
#  start / stop 테스트 스위트
# ===================================================================
class TestStartStop:
    @pytest.mark.parametrize("initial", [VmStatus.CREATED, VmStatus.STOPPED])
    def test_start_success(self, vm_service, mock_vm_repo, initial):
        """CREATED 또는 STOPPED 상태의 VM은 RUNNING으로 전환되어야 합니다."""
        vm = make_vm(status=initial)
        mock_vm_repo.get_by_id.return_value = vm

        result = vm_service.start(vm.id)

        assert result == str(vm.id)
        assert vm.status == VmStatus.RUNNING.value
        mock_vm_repo.update.assert_called_once_with(vm)

    def test_start_running_vm_fails(self, vm_service, mock_vm_repo):
        mock_vm_repo.get_by_id.return_value = make_vm(status=VmStatus.RUNNING)

        with pytest.raises(VmStateError):
            vm_service.start(uuid.uuid4())
        mock_vm_repo.update.assert_not_called()

    def test_stop_success(self, vm_service, mock_vm_repo):
        vm = make_vm(status=VmStatus.RUNNING)
        mock_vm_repo.get_by_id.return_value = vm

        assert vm_service.stop(vm.id) == str(vm.id)
        assert vm.status == VmStatus.STOPPED.value

    @pytest.mark.parametrize("initial", [VmStatus.CREATED, VmStatus.STOPPED])
    def test_stop_not_running_fails(self, vm_service, mock_vm_repo, initial):
        mock_vm_repo.get_by_id.return_value = make_vm(status=initial)

        with pytest.raises(VmStateError):
            vm_service.stop(uuid.uuid4())

# ===================================================================
#  attach_drive 테스트 스위트
# ===================================================================
class TestAttachDrive:
    def test_attach_drive_converts_ids(self, vm_service, mock_vm_repo):
        vm_id, drive_id = uuid.uuid4(), uuid.uuid4()

        vm_service.attach_drive(str(vm_id), str(drive_id))

        mock_vm_repo.attach_drive.assert_called_once_with(vm_id, drive_id)

# ===================================================================
#  delete_all 테스트 스위트
# ===================================================================
class TestDeleteAll:
    def test_delete_all_delegates_to_repository(self, vm_service, mock_vm_repo):
        mock_vm_repo.delete_all.return_value = 3

        assert vm_service.delete_all() == 3
        mock_vm_repo.delete_all.assert_called_once_with()
