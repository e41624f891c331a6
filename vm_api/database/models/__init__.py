from .host import Host
from .storage import Storage
from .kernel import Kernel
from .drive import Drive
from .vm import VM, VmStatus
from .association import AttachedDrive

__all__ = ["Host", "Storage", "Kernel", "Drive", "VM", "VmStatus", "AttachedDrive"]
