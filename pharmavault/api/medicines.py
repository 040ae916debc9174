from datetime import datetime, timezone

from fastapi import APIRouter

from pharmavault.catalog.store import (
    check_drug_interactions,
    get_medicine_by_id,
    get_medicines_by_category,
    load_catalog,
    search_medicines,
)
from pharmavault.comparison.alternatives import find_alternatives
from pharmavault.comparison.report import generate_comparison_report
from pharmavault.comparison.scorer import compare_medicines
from pharmavault.core.errors import InsufficientInputError, MedicineNotFoundError
from pharmavault.core.logger import elapsed_ms, log_event
from pharmavault.models.api import CompareRequest, CompareResponse, InteractionRequest
from pharmavault.models.medicine import DrugInteraction, Medicine

router = APIRouter()


@router.get("/medicines", response_model=list[Medicine])
def list_medicines(q: str | None = None, category: str | None = None) -> list[Medicine]:
    """의약품 목록 조회

    Args:
        q: 검색어(선택)
        category: 분류 필터(선택)

    Returns:
        의약품 목록
    """
    medicines = search_medicines(q) if q else list(load_catalog())
    if category:
        allowed = {med.id for med in get_medicines_by_category(category)}
        medicines = [med for med in medicines if med.id in allowed]
    return medicines


@router.get("/medicines/{medicine_id}", response_model=Medicine)
def get_medicine(medicine_id: str) -> Medicine:
    medicine = get_medicine_by_id(medicine_id)
    if medicine is None:
        raise MedicineNotFoundError(medicine_id)
    return medicine


@router.get("/medicines/{medicine_id}/alternatives", response_model=list[Medicine])
def medicine_alternatives(medicine_id: str, limit: int = 5) -> list[Medicine]:
    """대체 의약품 후보 조회"""
    if get_medicine_by_id(medicine_id) is None:
        raise MedicineNotFoundError(medicine_id)
    return find_alternatives(medicine_id, max_results=limit)


@router.post("/medicines/compare", response_model=CompareResponse)
def compare(request: CompareRequest) -> CompareResponse:
    """의약품 비교 및 보고서 생성

    Args:
        request: 비교 요청

    Returns:
        비교 결과와 마크다운 보고서

    Raises:
        InsufficientInputError: 유효 의약품이 2개 미만인 경우
    """
    start = datetime.now(timezone.utc)
    try:
        result = compare_medicines(request.medicine_ids, request.criteria)
    except InsufficientInputError as exc:
        log_event(
            "comparison_rejected",
            "WARNING",
            "comparison",
            "resolve",
            f"{exc.message} (resolved={exc.resolved})",
            error_code=exc.code,
        )
        raise
    log_event(
        "comparison_completed",
        "INFO",
        "comparison",
        "score",
        "의약품 비교 완료",
        duration_ms=elapsed_ms(start),
        record_count=len(result.results),
    )
    return CompareResponse(result=result, report=generate_comparison_report(result))


@router.post("/medicines/interactions", response_model=list[DrugInteraction])
def interactions(request: InteractionRequest) -> list[DrugInteraction]:
    found = check_drug_interactions(request.medicine_ids)
    log_event(
        "interactions_checked",
        "INFO",
        "catalog",
        "interactions",
        "상호작용 점검 완료",
        record_count=len(found),
    )
    return found
