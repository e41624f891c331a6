from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from vm_api.config import DATABASE_URL, DATABASE_ECHO


def build_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """
    주어진 URL로 SQLAlchemy 엔진을 생성합니다.

    SQLite인 경우 스레드 간 연결 공유를 허용하고, 외래 키 제약 조건을 활성화합니다.
    (SQLite는 기본적으로 외래 키 검사를 하지 않습니다.)
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, echo=DATABASE_ECHO, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    # autocommit=False, autoflush=False: 명시적으로 commit을 호출해야 DB에 반영됩니다.
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine = build_engine()
SessionLocal = build_session_factory(engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()
