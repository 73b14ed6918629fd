import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

_TABLES = [
    "careers",
    "blogs",
    "contact_us",
    "franchise_inquiries",
    "payments",
    "user_logins",
    "users",
    "admins",
    "subscription",
    "operation_log",
]


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "gym_test.db"
    # Point the backend at this temp DB and away from any local config.yaml
    os.environ["GYM_DB_PATH"] = str(path)
    os.environ["GYM_CONFIG_PATH"] = str(path.parent / "no-config.yaml")
    os.environ.pop("GYM_ADMIN_TOKEN", None)
    schema = (_PROJECT_ROOT / "gym_backend" / "schema.sql").read_text(encoding="utf-8")
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(schema)
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture()
def client(tmp_db_path):
    # Import app after DB ready so startup hooks can use it
    from gym_backend.api import app
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("GYM_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in _TABLES:
            conn.execute(f"DELETE FROM {t}")
        conn.commit()
    finally:
        conn.close()
    from gym_backend.cache import cache_service
    cache_service.clear_all_cache()
    yield
