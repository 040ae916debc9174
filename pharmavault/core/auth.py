from __future__ import annotations

import base64
import binascii

from fastapi import HTTPException, Request, status

from pharmavault.core.config import get_settings


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def require_admin(request: Request) -> None:
    """관리자 인증 검증

    Args:
        request: FastAPI 요청 객체

    Raises:
        HTTPException: 인증 실패 시
    """
    settings = get_settings()
    credentials = request.headers.get("Authorization", "")
    if not credentials.startswith("Basic "):
        raise _unauthorized("인증 필요")

    encoded = credentials.replace("Basic ", "", 1).strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise _unauthorized("인증 정보 오류") from exc

    if ":" not in decoded:
        raise _unauthorized("인증 정보 오류")

    admin_id, admin_password = decoded.split(":", 1)
    if admin_id != settings.admin_id or admin_password != settings.admin_password:
        raise _unauthorized("인증 실패")
