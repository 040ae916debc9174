from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pharmavault.api.routes import router as api_router
from pharmavault.core.config import get_settings
from pharmavault.core.errors import CatalogError, MedicineNotFoundError, PharmaVaultError
from pharmavault.core.logger import log_event
from pharmavault.core.logging import configure_logging


def _error_status(exc: PharmaVaultError) -> int:
    if isinstance(exc, MedicineNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, CatalogError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_422_UNPROCESSABLE_ENTITY


async def handle_pharmavault_error(request: Request, exc: PharmaVaultError) -> JSONResponse:
    """서비스 예외를 에러 코드가 포함된 JSON 응답으로 변환"""
    if isinstance(exc, CatalogError):
        log_event("catalog_failed", "ERROR", "catalog", "load", exc.message, error_code=exc.code)
    return JSONResponse(
        status_code=_error_status(exc),
        content={"error_code": exc.code, "message": exc.message},
    )


def create_app() -> FastAPI:
    """애플리케이션을 생성하고 FastAPI를 설정"""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="PharmaVault Assist", version=settings.version)
    app.add_exception_handler(PharmaVaultError, handle_pharmavault_error)
    app.include_router(api_router)
    return app


app = create_app()
