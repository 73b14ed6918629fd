"""Repository layer: DB access helpers (SQLite).

Each entity module declares one TableSpec; EntityRepository runs the SQL and
returns DbResult instead of raising, so services branch on ``status``.
"""
from __future__ import annotations
