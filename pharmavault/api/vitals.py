from datetime import datetime, timezone

from fastapi import APIRouter

from pharmavault.core.logger import elapsed_ms, log_event
from pharmavault.models.api import MarkdownResponse, TextRequest, VitalsAnalysisResponse
from pharmavault.triage.responder import generate_medical_response
from pharmavault.vitals.analyzer import analyze_vital_signs
from pharmavault.vitals.parser import parse_vital_signs
from pharmavault.vitals.report import generate_vital_signs_response

router = APIRouter()


@router.post("/vitals/analyze", response_model=VitalsAnalysisResponse)
def analyze_vitals(request: TextRequest) -> VitalsAnalysisResponse:
    """텍스트에서 생체신호를 추출해 구조화된 분석 결과 반환

    Args:
        request: 자유 텍스트 입력

    Returns:
        추출값과 분석 결과(미검출 시 analysis 없음)
    """
    start = datetime.now(timezone.utc)
    vitals = parse_vital_signs(request.text)
    if not vitals.has_any():
        log_event("vitals_not_detected", "INFO", "vitals", "parse", "생체신호 미검출")
        return VitalsAnalysisResponse(detected=False, vitals=vitals)

    analysis = analyze_vital_signs(vitals)
    log_event(
        "vitals_analyzed",
        "INFO",
        "vitals",
        "analyze",
        f"생체신호 분석 완료: overall={analysis.overall.value}",
        duration_ms=elapsed_ms(start),
        record_count=sum(value is not None for value in vitals.model_dump().values()),
    )
    return VitalsAnalysisResponse(detected=True, vitals=vitals, analysis=analysis)


@router.post("/vitals/report", response_model=MarkdownResponse)
def vitals_report(request: TextRequest) -> MarkdownResponse:
    """생체신호 안내문(마크다운) 반환"""
    start = datetime.now(timezone.utc)
    response = generate_vital_signs_response(request.text)
    log_event(
        "vitals_reported",
        "INFO",
        "vitals",
        "report",
        "생체신호 안내문 생성",
        duration_ms=elapsed_ms(start),
    )
    return MarkdownResponse(response=response)


@router.post("/triage", response_model=MarkdownResponse)
def triage(request: TextRequest) -> MarkdownResponse:
    """키워드 기반 증상 안내

    Args:
        request: 자유 텍스트 입력

    Returns:
        마크다운 응답
    """
    start = datetime.now(timezone.utc)
    response = generate_medical_response(request.text)
    log_event(
        "triage_completed",
        "INFO",
        "triage",
        "respond",
        "증상 안내 생성",
        duration_ms=elapsed_ms(start),
    )
    return MarkdownResponse(response=response)
