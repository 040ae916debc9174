from __future__ import annotations

from typing import Iterable

from pharmavault.triage.knowledge import (
    MAX_CAUSES,
    MAX_MEDICINES,
    MAX_PRECAUTIONS,
    SymptomKnowledge,
    match_symptoms,
)
from pharmavault.triage.topics import CLOSING, general_health_response
from pharmavault.vitals.parser import detect_vital_signs
from pharmavault.vitals.report import generate_vital_signs_response

MULTI_SYMPTOM_DOCTOR_ADVICE = (
    "Please see a healthcare provider if you experience any of these symptoms "
    "severely or if they persist."
)


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


def _dedupe(groups: Iterable[list[str]], limit: int) -> list[str]:
    """순서를 유지하며 중복 제거 후 상한 적용"""
    merged = list(dict.fromkeys(item for group in groups for item in group))
    return merged[:limit]


def _format_advisory(
    title: str,
    causes: list[str],
    medicines: list[str],
    precautions: list[str],
    doctor_line: str,
) -> str:
    return f"""**{title[:1].upper() + title[1:]}** can have several common causes:

**Possible causes:**
{_bullets(causes)}

**Common medicines that may help:**
{_bullets(medicines)}

**Simple precautions and home remedies:**
{_bullets(precautions)}

**When to consult a doctor:**
{doctor_line}

{CLOSING}"""


def format_symptom_response(symptom: SymptomKnowledge) -> str:
    """단일 증상 안내문 생성

    Args:
        symptom: 증상 지식 레코드

    Returns:
        마크다운 문자열
    """
    return _format_advisory(
        symptom.display_name,
        symptom.causes,
        symptom.medicines,
        symptom.precautions,
        f"Please see a healthcare provider if you experience {symptom.doctor_advice}.",
    )


def format_multi_symptom_response(symptoms: list[SymptomKnowledge]) -> str:
    """복수 증상 통합 안내문 생성

    원인/약/주의사항은 중복 제거 후 상한(8/6/8)까지만 합치고, 의사 상담 문구는
    공통 문구로 대체한다.

    Args:
        symptoms: 매칭된 증상 레코드 목록

    Returns:
        마크다운 문자열
    """
    return _format_advisory(
        " and ".join(s.display_name for s in symptoms),
        _dedupe((s.causes for s in symptoms), MAX_CAUSES),
        _dedupe((s.medicines for s in symptoms), MAX_MEDICINES),
        _dedupe((s.precautions for s in symptoms), MAX_PRECAUTIONS),
        MULTI_SYMPTOM_DOCTOR_ADVICE,
    )


def generate_medical_response(text: str) -> str:
    """키워드 기반 증상 분류 진입점

    생체신호가 있으면 생체신호 분석으로, 증상이 있으면 증상 안내로, 둘 다
    없으면 고정 주제 응답으로 처리한다.

    Args:
        text: 사용자 입력

    Returns:
        마크다운 응답 문자열
    """
    normalized = text.lower().strip()
    if detect_vital_signs(normalized):
        return generate_vital_signs_response(text)

    symptoms = match_symptoms(normalized)
    if len(symptoms) > 1:
        return format_multi_symptom_response(symptoms)
    if len(symptoms) == 1:
        return format_symptom_response(symptoms[0])
    return general_health_response(normalized)
