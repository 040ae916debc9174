from fastapi import APIRouter

from pharmavault.api.admin import router as admin_router
from pharmavault.api.authenticity import router as authenticity_router
from pharmavault.api.chat import router as chat_router
from pharmavault.api.health import router as health_router
from pharmavault.api.medicines import router as medicines_router
from pharmavault.api.prescriptions import router as prescriptions_router
from pharmavault.api.vitals import router as vitals_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(vitals_router, prefix="/v1", tags=["vitals"])
router.include_router(chat_router, prefix="/v1", tags=["assistant"])
router.include_router(medicines_router, prefix="/v1", tags=["medicines"])
router.include_router(authenticity_router, prefix="/v1", tags=["authenticity"])
router.include_router(prescriptions_router, prefix="/v1", tags=["prescriptions"])
router.include_router(admin_router, prefix="/admin", tags=["admin"])
