from __future__ import annotations

# gym_backend/db.py
import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Iterator
import os
import yaml

# DB path resolution order:
# 1) env GYM_DB_PATH (highest priority)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path (production default)
# 4) fallback: gym.db at the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "gym.db")
_SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "schema.sql")

_CONFIG_KEYS = ("db_path", "test_db_path", "db_max_connections", "db_acquire_timeout", "admin_token", "cors_origins")


# (path, mtime_ns) -> parsed keys; the file is re-parsed only when it changes
_config_cache: dict[tuple[str, int], dict] = {}
_config_lock = threading.Lock()


def _read_config_yaml() -> dict:
    cfg_path = os.environ.get("GYM_CONFIG_PATH") or os.path.join(_PROJECT_ROOT, "config.yaml")
    try:
        stamp = (cfg_path, os.stat(cfg_path).st_mtime_ns)
    except OSError:
        return {}
    with _config_lock:
        cached = _config_cache.get(stamp)
    if cached is not None:
        return dict(cached)
    parsed = _parse_config(cfg_path)
    with _config_lock:
        _config_cache.clear()
        _config_cache[stamp] = parsed
    return dict(parsed)


def _parse_config(cfg_path: str) -> dict:
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    out = {}
    for k in _CONFIG_KEYS:
        v = cfg.get(k)
        if isinstance(v, str):
            v = v.strip()
            if not v:
                continue
        if v is not None:
            out[k] = v
    return out


def get_setting(key: str, default: Any = None, cfg: dict | None = None) -> Any:
    """Env var GYM_<KEY> wins over config.yaml (or an already-read `cfg`), which wins over `default`."""
    env_val = os.environ.get(f"GYM_{key.upper()}")
    if env_val:
        return env_val
    if cfg is None:
        cfg = _read_config_yaml()
    return cfg.get(key, default)


def get_db_path(_: str | None = None, cfg: dict | None = None) -> str:
    env_path = os.environ.get("GYM_DB_PATH")
    if cfg is None:
        cfg = _read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _ROOT_DB

    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


class _ConnectionSlots:
    """Process-wide ceiling on concurrently open connections."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sem: threading.BoundedSemaphore | None = None
        self.size = 0

    def _semaphore(self) -> threading.BoundedSemaphore:
        with self._lock:
            if self._sem is None:
                self.size = max(1, int(get_setting("db_max_connections", 10)))
                self._sem = threading.BoundedSemaphore(self.size)
            return self._sem

    @contextmanager
    def acquire(self, timeout: float) -> Iterator[None]:
        sem = self._semaphore()
        if not sem.acquire(timeout=timeout):
            raise sqlite3.OperationalError(f"connection pool exhausted after {timeout:g}s")
        try:
            yield
        finally:
            sem.release()


pool = _ConnectionSlots()


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Open a SQLite connection inside a pool slot. An explicit db_path wins,
    otherwise get_db_path() decides. Foreign keys on, rows as sqlite3.Row,
    autocommit mode. config.yaml is read once per call.
    """
    cfg = _read_config_yaml()
    path = db_path or get_db_path(cfg=cfg)
    timeout = float(get_setting("db_acquire_timeout", 30, cfg=cfg))
    with pool.acquire(timeout):
        conn = sqlite3.connect(
            path,
            detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
            check_same_thread=False,
            isolation_level=None,
            timeout=timeout,
        )
        try:
            conn.execute("PRAGMA foreign_keys = ON;")
            conn.row_factory = sqlite3.Row
            yield conn
        finally:
            conn.close()


def ensure_schema(db_path: str | None = None) -> None:
    with open(_SCHEMA_PATH, "r", encoding="utf-8") as f:
        ddl = f.read()
    with get_conn(db_path) as conn:
        conn.executescript(ddl)
