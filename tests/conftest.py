# tests/conftest.py
import io
import json

import pytest
from sqlalchemy.pool import StaticPool

from vm_api.database import models
from vm_api.database.database import Base, build_engine, build_session_factory
from vm_api.repositories.sqlalchemy.sqlalchemy_drive_repository import SqlalchemyDriveRepository
from vm_api.repositories.sqlalchemy.sqlalchemy_kernel_repository import SqlalchemyKernelRepository
from vm_api.repositories.sqlalchemy.sqlalchemy_storage_repository import SqlalchemyStorageRepository
from vm_api.services.drive_service import DriveService
from vm_api.services.kernel_service import KernelService
from vm_api.services.storage_service import StorageService

# ===================================================================
#  인메모리 SQLite 데이터베이스 Fixture
# ===================================================================

@pytest.fixture
def engine():
    """테스트마다 격리된 인메모리 SQLite 엔진을 생성합니다. (모든 세션이 하나의 연결을 공유)"""
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()

@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)

@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()

@pytest.fixture
def storage_id(session_factory):
    """로컬 저장소를 하나 생성하고 ID를 반환합니다."""
    session = session_factory()
    try:
        return StorageService(SqlalchemyStorageRepository(session)).add(
            "dummy", "local", {"host_id": None, "path": "/var/storage", "pool_name": None}
        )
    finally:
        session.close()

@pytest.fixture
def kernel_id(session_factory, storage_id):
    """VM 생성에 필요한 커널을 하나 생성하고 ID를 반환합니다."""
    session = session_factory()
    try:
        return KernelService(SqlalchemyKernelRepository(session)).add("linux57", storage_id)
    finally:
        session.close()

@pytest.fixture
def drive_id(session_factory, storage_id):
    """VM에 연결할 드라이브를 하나 생성하고 ID를 반환합니다."""
    session = session_factory()
    try:
        return DriveService(SqlalchemyDriveRepository(session)).add_drive("rootfs", 512, storage_id)
    finally:
        session.close()

# ===================================================================
#  WSGI 호출 헬퍼
# ===================================================================

class WsgiClient:
    """WSGI 애플리케이션을 직접 호출하여 (상태 코드, JSON 본문)을 돌려주는 간단한 테스트 클라이언트."""
    def __init__(self, app):
        self.app = app

    def request(self, method, path, body=None):
        raw = json.dumps(body).encode("utf-8") if body is not None else b""
        return self.request_raw(method, path, raw)

    def request_raw(self, method, path, raw):
        environ = {
            "REQUEST_METHOD": method,
            "PATH_INFO": path,
            "CONTENT_LENGTH": str(len(raw)),
            "CONTENT_TYPE": "application/json",
            "wsgi.input": io.BytesIO(raw),
        }
        captured = {}

        def start_response(status, headers):
            captured["status"] = status
            captured["headers"] = dict(headers)

        chunks = self.app(environ, start_response)
        payload = json.loads(b"".join(chunks).decode("utf-8"))
        return int(captured["status"].split()[0]), payload

    def get(self, path):
        return self.request("GET", path)

    def post(self, path, body=None):
        return self.request("POST", path, body)

@pytest.fixture
def client(session_factory):
    from vm_api.app import create_app
    return WsgiClient(create_app(session_factory))
