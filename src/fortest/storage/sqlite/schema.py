"""SQLite schema definitions for fortest storage."""

SCHEMA = """
CREATE TABLE IF NOT EXISTS test_results (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    suite_name          TEXT,
    test_name           TEXT NOT NULL,
    param_index         INTEGER,
    status              TEXT NOT NULL,
    duration_ms         REAL NOT NULL,
    recorded_at         TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_results_test ON test_results(test_name);
CREATE INDEX IF NOT EXISTS idx_results_suite ON test_results(suite_name);
CREATE INDEX IF NOT EXISTS idx_results_status ON test_results(status);
"""
