from fastapi import APIRouter

from pharmavault.core.logger import log_event
from pharmavault.models.api import AuthenticityRequest, AuthenticityResponse
from pharmavault.services.authenticity import (
    check_recall_status,
    generate_authenticity_report,
    verify_medicine,
)

router = APIRouter()


@router.post("/authenticity/verify", response_model=AuthenticityResponse)
def verify(request: AuthenticityRequest) -> AuthenticityResponse:
    """배치 정품 검증과 리콜 조회

    Args:
        request: 정품 검증 요청

    Returns:
        검증 결과, 리콜 정보, 보고서
    """
    check = verify_medicine(
        request.medicine_id,
        request.batch_number,
        request.manufacturing_date,
        request.expiry_date,
    )
    recall = check_recall_status(request.medicine_id)
    log_event(
        "authenticity_checked",
        "WARNING" if check.status != "authentic" else "INFO",
        "authenticity",
        "verify",
        f"정품 검증: status={check.status} recalled={recall.is_recalled}",
    )
    return AuthenticityResponse(
        check=check,
        recall=recall,
        report=generate_authenticity_report(check),
    )
