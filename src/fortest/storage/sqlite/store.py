"""SQLite storage backend for fortest results."""

import sqlite3
from datetime import datetime
from pathlib import Path

from fortest.storage.base import ResultSink
from fortest.storage.sqlite.schema import SCHEMA
from fortest.testing.models import TestRecord, TestStatus


DEFAULT_DB_NAME = ".fortest/fortest.db"
SCHEMA_VERSION = 1

RESULT_INSERT_SQL = """
    INSERT INTO test_results (
        suite_name, test_name, param_index, status, duration_ms, recorded_at
    ) VALUES (?, ?, ?, ?, ?, ?)
"""

RESULT_SELECT_SQL = """
    SELECT suite_name, test_name, param_index, status, duration_ms, recorded_at
    FROM test_results
"""


def find_project_root() -> Path:
    """Find project root by searching for pyproject.toml."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return cwd


class SQLiteStore(ResultSink):
    """SQLite-based history of test results."""

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            path = find_project_root() / DEFAULT_DB_NAME
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        with self._connect() as conn:
            current_version = conn.execute("PRAGMA user_version").fetchone()[0]
            if current_version < SCHEMA_VERSION:
                conn.executescript(SCHEMA)
                conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode = WAL")
        conn.execute("PRAGMA synchronous = NORMAL")
        conn.execute("PRAGMA busy_timeout = 5000")
        return conn

    def record(self, result: TestRecord) -> None:
        """Insert a single result row."""
        with self._connect() as conn:
            conn.execute(
                RESULT_INSERT_SQL,
                (
                    result.suite_name,
                    result.test_name,
                    result.param_index,
                    result.status.value,
                    result.duration_ms,
                    result.recorded_at.isoformat(),
                ),
            )

    def list_results(self, limit: int = 20, *, test_name: str | None = None) -> list[TestRecord]:
        """List recent results, most recent first."""
        sql = RESULT_SELECT_SQL
        params: tuple[object, ...] = ()
        if test_name is not None:
            sql += " WHERE test_name = ?"
            params = (test_name,)
        sql += " ORDER BY id DESC LIMIT ?"
        params = (*params, limit)

        with self._connect() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> TestRecord:
        return TestRecord(
            suite_name=row["suite_name"],
            test_name=row["test_name"],
            param_index=row["param_index"],
            status=TestStatus(row["status"]),
            duration_ms=row["duration_ms"],
            recorded_at=datetime.fromisoformat(row["recorded_at"]),
        )
