from __future__ import annotations

from pathlib import Path

import duckdb

from pharmavault.core.config import get_settings


class TelemetryStore:
    """처리 이벤트 로그를 저장하는 DuckDB 텔레메트리 저장소"""

    _instance: "TelemetryStore | None" = None

    def __new__(cls) -> "TelemetryStore":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_db()
        return cls._instance

    def _init_db(self) -> None:
        settings = get_settings()
        Path(settings.duckdb_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = duckdb.connect(settings.duckdb_path)
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS logs (
                timestamp TIMESTAMP,
                level VARCHAR,
                event VARCHAR,
                component VARCHAR,
                stage VARCHAR,
                error_code VARCHAR,
                message VARCHAR,
                duration_ms INTEGER,
                record_count INTEGER
            )
            """
        )

    def insert_log(self, record: dict) -> None:
        """로그 레코드를 저장

        Args:
            record: 로그 레코드 딕셔너리
        """
        self._conn.execute(
            """
            INSERT INTO logs (timestamp, level, event, component, stage, error_code, message, duration_ms, record_count)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                record.get("timestamp"),
                record.get("level"),
                record.get("event"),
                record.get("component"),
                record.get("stage"),
                record.get("error_code"),
                record.get("message"),
                record.get("duration_ms"),
                record.get("record_count"),
            ],
        )

    def query_logs(self, where: str, params: list) -> list[tuple]:
        """조건절(WHERE)을 사용해 로그를 조회

        Args:
            where: SQL WHERE 절
            params: 파라미터 목록

        Returns:
            행 목록
        """
        query = "SELECT * FROM logs"
        if where:
            query += f" WHERE {where}"
        query += " ORDER BY timestamp"
        return self._conn.execute(query, params).fetchall()

    def count_events(self) -> list[tuple]:
        """이벤트별 건수를 집계

        Returns:
            (이벤트, 건수) 행 목록
        """
        return self._conn.execute(
            "SELECT event, COUNT(*) FROM logs GROUP BY event ORDER BY event"
        ).fetchall()
