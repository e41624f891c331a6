import logging

from vm_api.config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL, log_file=LOG_FILE) -> None:
    """
    애플리케이션 전체의 로깅을 설정합니다.

    log_file이 지정되면 파일로, 아니면 콘솔(stderr)로 출력합니다.
    이미 핸들러가 설정되어 있으면 basicConfig는 아무것도 하지 않습니다.
    """
    if log_file:
        logging.basicConfig(filename=str(log_file), level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
