# vm_api/config.py
import os

# -----------------------------
# Database
# -----------------------------
# SQLAlchemy 연결 문자열. 기본값은 프로젝트 루트의 SQLite 파일입니다.
DATABASE_URL = os.getenv("VM_API_DATABASE_URL", "sqlite:///vm_api.db")
DATABASE_ECHO = os.getenv("VM_API_DATABASE_ECHO", "false").lower() == "true"

# -----------------------------
# HTTP server
# -----------------------------
HOST = os.getenv("VM_API_HOST", "")
PORT = int(os.getenv("VM_API_PORT", "8000"))

# -----------------------------
# Logging
# -----------------------------
LOG_LEVEL = os.getenv("VM_API_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("VM_API_LOG_FILE", None)
