import uuid

from vm_api.database import models
from vm_api.schemas import NetworkMode, NewVm
from vm_api.services.exceptions import VmValidationError

DEFAULT_KERNEL_PARAMS = "console=ttyS0 reboot=k panic=1 pci=off"


def normalize_new_vm(new_vm: NewVm) -> models.VM:
    """
    VM 생성 요청(NewVm)을 DB에 저장할 수 있는 models.VM 객체로 변환합니다.

    새 UUID를 발급하고 상태를 CREATED(0)로 초기화하며, 네트워크 설정과 커널 파라미터의
    기본값을 채웁니다. DB에 접근하지 않습니다.

    - DHCP: 요청에 주소가 있더라도 무시하고 빈 문자열로 저장합니다.
    - STATIC_IP: 요청의 주소를 그대로 사용합니다. 주소가 없으면 VmValidationError.
    - NONE: network_mode는 NULL, 주소는 빈 문자열.
    - kernel_params가 없으면(None) DEFAULT_KERNEL_PARAMS, 빈 문자열은 그대로 유지합니다.

    Raises:
        VmValidationError: STATIC_IP 모드인데 주소가 없거나 비어 있을 때.
    """
    if new_vm.network_mode is NetworkMode.STATIC_IP:
        if not new_vm.address:
            raise VmValidationError("'address' is required when network_mode is 'static_ip'.")
        address = new_vm.address
    else:
        address = ""

    kernel_params = new_vm.kernel_params
    if kernel_params is None:
        kernel_params = DEFAULT_KERNEL_PARAMS

    return models.VM(
        id=uuid.uuid4(),
        name=new_vm.name,
        status=models.VmStatus.CREATED.value,
        host_id=None,
        vcpu=new_vm.vcpu,
        memory=new_vm.memory,
        address=address,
        network_mode=new_vm.network_mode.as_column(),
        kernel_params=kernel_params,
        kernel=new_vm.kernel,
    )
