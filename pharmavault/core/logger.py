from __future__ import annotations

import logging
from datetime import datetime, timezone

from pharmavault.core.config import get_settings
from pharmavault.core.telemetry import TelemetryStore


def log_event(
    event: str,
    level: str,
    component: str,
    stage: str,
    message: str,
    error_code: str | None = None,
    duration_ms: int | None = None,
    record_count: int | None = None,
) -> None:
    """이벤트를 표준 로깅과 DuckDB에 기록

    Args:
        event: 이벤트 이름
        level: 로깅 레벨 문자열
        component: 처리 컴포넌트(vitals, triage, comparison 등)
        stage: 처리 단계
        message: 로그 메시지
        error_code: 에러 코드(선택)
        duration_ms: 처리 시간(밀리초, 선택)
        record_count: 레코드 수(선택)
    """
    logger = logging.getLogger("pharmavault")
    extra = {
        "event": event,
        "component": component,
        "stage": stage,
    }
    logger.log(getattr(logging, level.upper(), logging.INFO), message, extra=extra)

    if not get_settings().telemetry_enabled:
        return
    TelemetryStore().insert_log(
        {
            # TIMESTAMP 컬럼은 UTC naive 값으로 저장
            "timestamp": datetime.now(timezone.utc).replace(tzinfo=None),
            "level": level.upper(),
            "event": event,
            "component": component,
            "stage": stage,
            "error_code": error_code,
            "message": message,
            "duration_ms": duration_ms,
            "record_count": record_count,
        }
    )


def elapsed_ms(start: datetime) -> int:
    """시작 시각 이후 경과 시간(밀리초)

    Args:
        start: UTC 시작 시각

    Returns:
        경과 밀리초
    """
    return int((datetime.now(timezone.utc) - start).total_seconds() * 1000)
