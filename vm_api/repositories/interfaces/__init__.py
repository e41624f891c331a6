from .vm import IVMRepository
from .drive import IDriveRepository
from .kernel import IKernelRepository
from .storage import IStorageRepository

__all__ = ["IVMRepository", "IDriveRepository", "IKernelRepository", "IStorageRepository"]
