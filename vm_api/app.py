# vm_api/app.py
from wsgiref.simple_server import make_server
import json
import logging
import re
import uuid

from vm_api.database.database import SessionLocal
from vm_api.repositories.sqlalchemy.sqlalchemy_vm_repository import SqlalchemyVMRepository
from vm_api.repositories.sqlalchemy.sqlalchemy_drive_repository import SqlalchemyDriveRepository
from vm_api.services.vm_service import VmService
from vm_api.services.drive_service import DriveService
from vm_api.services.exceptions import NotFoundError, StorageError, VmStateError, VmValidationError

logger = logging.getLogger(__name__)

UUID_PATTERN = r'([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})'

# --------------------------------------------------------------------------
## 요청 처리 유틸리티 함수
# --------------------------------------------------------------------------

def get_request_data(environ):
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        return json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except (ValueError, json.JSONDecodeError):
        raise ValueError("Invalid or missing JSON body.")

def json_response(status, payload):
    return status, json.dumps(payload)

def handle_exception(e):
    error_map = {
        NotFoundError: "400 Bad Request",
        VmValidationError: "400 Bad Request",
        VmStateError: "400 Bad Request",
        StorageError: "400 Bad Request",
        ValueError: "400 Bad Request",
    }
    status = error_map.get(type(e))
    if status is None:
        logger.exception("Unhandled error while processing request")
        status = "500 Internal Server Error"
    return json_response(status, {"error": str(e)})

# --------------------------------------------------------------------------
## 핸들러 함수
# --------------------------------------------------------------------------

def list_vms_handler(environ, *args):
    vms = environ['services']['vm'].list_vms()
    return json_response('200 OK', {'vms': vms})

def get_vm_handler(environ, vm_id):
    vm = environ['services']['vm'].get_vm(uuid.UUID(vm_id))
    return json_response('200 OK', {'vm': vm})

def create_vm_handler(environ, *args):
    data = get_request_data(environ)
    vm_id = environ['services']['vm'].add_vm(data)
    return json_response('200 OK', {'vm_id': vm_id})

def start_vm_handler(environ, vm_id):
    """
    VM을 시작합니다. 성공 시 200과 {"vm_id": ...}를 반환합니다.

    실패(VM 없음, 이미 실행 중, DB 오류)는 다른 핸들러와 동일하게 400 Bad Request와
    {"error": "could not start vm: <원인>"}으로 응답합니다. (이전 버전은 실패에도 200을 반환했습니다.)
    """
    try:
        started_id = environ['services']['vm'].start(uuid.UUID(vm_id))
    except (NotFoundError, VmStateError, StorageError) as e:
        return json_response('400 Bad Request', {'error': f"could not start vm: {e}"})
    return json_response('200 OK', {'vm_id': started_id})

def stop_vm_handler(environ, vm_id):
    """
    VM을 중지합니다. 실패 시 400 Bad Request와 {"error": "could not stop vm: <원인>"}으로 응답합니다.
    (이전 버전은 200과 원인 없는 "could not stop vm" 메시지를 반환했습니다.)
    """
    try:
        stopped_id = environ['services']['vm'].stop(uuid.UUID(vm_id))
    except (NotFoundError, VmStateError, StorageError) as e:
        return json_response('400 Bad Request', {'error': f"could not stop vm: {e}"})
    return json_response('200 OK', {'vm_id': stopped_id})

def attach_drive_handler(environ, vm_id, drive_id):
    environ['services']['vm'].attach_drive(uuid.UUID(vm_id), uuid.UUID(drive_id))
    return json_response('200 OK', {'status': 'ok'})

def list_vm_drives_handler(environ, vm_id):
    # VM을 먼저 조회하여 존재하지 않으면 NotFoundError(400)로 응답합니다.
    vm = environ['services']['vm'].get_vm_record(uuid.UUID(vm_id))
    drives = environ['services']['drive'].get_drives_for_vm(vm)
    return json_response('200 OK', {'drives': drives})

ROUTES = [
    ('GET', r'^/vms/?$', list_vms_handler),
    ('POST', r'^/vms/?$', create_vm_handler),
    ('GET', rf'^/vms/{UUID_PATTERN}$', get_vm_handler),
    ('POST', rf'^/vms/{UUID_PATTERN}/start$', start_vm_handler),
    ('POST', rf'^/vms/{UUID_PATTERN}/stop$', stop_vm_handler),
    ('POST', rf'^/vms/{UUID_PATTERN}/drives/{UUID_PATTERN}/attach$', attach_drive_handler),
    ('GET', rf'^/vms/{UUID_PATTERN}/drives$', list_vm_drives_handler),
]

# --------------------------------------------------------------------------
## WSGI 애플리케이션 (의존성 주입 및 라우팅)
# --------------------------------------------------------------------------

def create_app(session_factory=SessionLocal):
    """
    주어진 세션 팩토리로 WSGI 애플리케이션을 생성합니다.

    요청마다 새 DB 세션을 열고, 응답 여부와 관계없이 요청이 끝나면 세션을 닫습니다.
    """
    def application(environ, start_response):
        path = environ.get("PATH_INFO", "")
        method = environ.get("REQUEST_METHOD", "")

        db_session = session_factory()
        try:
            # 1. 의존성 생성 (Repositories -> Services)
            vm_service = VmService(SqlalchemyVMRepository(db_session))
            drive_service = DriveService(SqlalchemyDriveRepository(db_session))

            # 2. 생성된 서비스 객체들을 environ을 통해 핸들러에 전달
            environ['services'] = {
                'vm': vm_service,
                'drive': drive_service,
            }

            # 3. 라우팅 및 핸들러 실행
            handler, path_args = None, []
            for route_method, pattern, route_handler in ROUTES:
                if method == route_method and (match := re.match(pattern, path)):
                    handler, path_args = route_handler, match.groups()
                    break

            if handler:
                status, response_body = handler(environ, *path_args)
            else:
                status, response_body = json_response('404 Not Found', {'error': 'Not Found'})

        except Exception as e:
            status, response_body = handle_exception(e)
        finally:
            db_session.close()

        logger.info("%s %s -> %s", method, path, status)
        start_response(status, [("Content-Type", "application/json")])
        return [response_body.encode("utf-8")]

    return application


application = create_app()

# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

if __name__ == "__main__":
    from vm_api.config import HOST, PORT
    from vm_api.database.db_init import initialize_db
    from vm_api.logger import configure_logging

    configure_logging()
    initialize_db()
    try:
        with make_server(HOST, PORT, application) as httpd:
            logger.info("Serving VM API on port %d...", PORT)
            httpd.serve_forever()
    except Exception:
        logger.exception("Error starting server")
