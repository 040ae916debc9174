from datetime import datetime, timezone

from fastapi import APIRouter

from pharmavault.core.logger import elapsed_ms, log_event
from pharmavault.models.api import PrescriptionAnalysisResponse, TextRequest
from pharmavault.models.prescription import Prescription
from pharmavault.services.prescription import (
    analyze_prescription,
    extract_prescription_from_text,
    generate_prescription_report,
)

router = APIRouter()


@router.post("/prescriptions/analyze", response_model=PrescriptionAnalysisResponse)
def analyze(prescription: Prescription) -> PrescriptionAnalysisResponse:
    """처방전 분석

    Args:
        prescription: 처방전

    Returns:
        분석 결과와 마크다운 보고서
    """
    start = datetime.now(timezone.utc)
    analysis = analyze_prescription(prescription)
    log_event(
        "prescription_analyzed",
        "INFO",
        "prescription",
        "analyze",
        f"처방전 분석 완료: interactions={analysis.interactions.severity}",
        duration_ms=elapsed_ms(start),
        record_count=len(prescription.medicines),
    )
    return PrescriptionAnalysisResponse(
        analysis=analysis,
        report=generate_prescription_report(prescription, analysis),
    )


@router.post("/prescriptions/extract", response_model=Prescription)
def extract(request: TextRequest) -> Prescription:
    """처방전 텍스트에서 처방 항목 추출"""
    prescription = extract_prescription_from_text(request.text)
    log_event(
        "prescription_extracted",
        "INFO",
        "prescription",
        "extract",
        "처방전 텍스트 추출 완료",
        record_count=len(prescription.medicines),
    )
    return prescription
