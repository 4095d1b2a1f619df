from fortest.storage.sqlite.store import DEFAULT_DB_NAME, SQLiteStore


__all__ = ["DEFAULT_DB_NAME", "SQLiteStore"]
