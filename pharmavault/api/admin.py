from __future__ import annotations

from fastapi import APIRouter, Depends

from pharmavault.core.auth import require_admin
from pharmavault.core.telemetry import TelemetryStore

router = APIRouter()

LOG_COLUMNS = (
    "timestamp",
    "level",
    "event",
    "component",
    "stage",
    "error_code",
    "message",
    "duration_ms",
    "record_count",
)


@router.get("/logs")
def admin_logs(
    level: str | None = None,
    component: str | None = None,
    admin: None = Depends(require_admin),
) -> list[dict]:
    """텔레메트리 로그 조회

    Args:
        level: 로그 레벨 필터(선택)
        component: 컴포넌트 필터(선택)
        admin: 관리자 인증 의존성

    Returns:
        로그 목록
    """
    clauses: list[str] = []
    params: list = []
    if level:
        clauses.append("level = ?")
        params.append(level.upper())
    if component:
        clauses.append("component = ?")
        params.append(component)
    rows = TelemetryStore().query_logs(" AND ".join(clauses), params)
    return [dict(zip(LOG_COLUMNS, row)) for row in rows]


@router.get("/events")
def admin_events(admin: None = Depends(require_admin)) -> list[dict]:
    """이벤트별 건수 집계"""
    return [{"event": event, "count": count} for event, count in TelemetryStore().count_events()]
