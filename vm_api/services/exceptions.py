# vm_api/services/exceptions.py

# --- Lookup Exceptions ---
class NotFoundError(Exception):
    """ID로 조회한 엔티티가 존재하지 않을 때"""
    def __init__(self, entity_type: str, entity_id):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} '{entity_id}' not found")

# --- Validation Exceptions ---
class VmValidationError(Exception):
    """VM 생성 요청이 유효하지 않을 때 (필드 누락, 타입 오류, static_ip인데 주소 없음 등)"""
    pass

class VmStateError(Exception):
    """현재 상태에서 허용되지 않는 시작/중지 요청일 때"""
    pass

# --- Storage Exceptions ---
class StorageError(Exception):
    """데이터베이스 작업 실패 시 (제약 조건 위반, 연결 실패 등)"""
    pass
