from __future__ import annotations

from datetime import date, datetime, timezone

import httpx

from pharmavault.core.config import get_settings
from pharmavault.core.logger import elapsed_ms, log_event
from pharmavault.models.medicine import Medicine
from pharmavault.utils.parsing import format_rupees

UNAVAILABLE_MESSAGE = (
    "I apologize, but I am currently unable to connect to my AI services. "
    "Please verify the API configuration."
)
INVALID_KEY_MESSAGE = (
    "The AI service is unavailable due to an invalid API key. Please contact support."
)
QUOTA_MESSAGE = (
    "The AI service is currently at capacity. Please try again in a few minutes."
)
FALLBACK_MESSAGE = (
    "I'm sorry, I'm having trouble processing that right now. "
    "Could you please try rephrasing your question?"
)
NO_CONTEXT = "No specific medicine details available in database for this query."

GUIDELINES = """Guidelines:
1. Use the provided context to answer medicine-related questions.
2. For general health queries (like "I have a cold"), provide helpful, non-diagnostic advice.
3. ALWAYS include a medical disclaimer.
4. If user symptoms sound serious, recommend seeing a doctor immediately.
5. Keep responses concise, structured (using bullet points), and easy to read."""


class AIResponseError(Exception):
    """AI 응답 처리 실패"""


def format_medicine_context(medicines: list[Medicine]) -> str:
    """프롬프트에 넣을 의약품 컨텍스트 블록 생성"""
    if not medicines:
        return NO_CONTEXT
    blocks = []
    for med in medicines:
        blocks.append(
            "\n".join(
                [
                    f"- Medicine: {med.name} ({med.generic_name})",
                    f"  Category: {med.category}",
                    f"  Description: {med.description}",
                    f"  Used For: {', '.join(med.used_for)}",
                    f"  Dosage: {med.dosage}",
                    f"  Side Effects: {', '.join(med.side_effects)}",
                    f"  Contraindications: {', '.join(med.contraindications)}",
                    f"  Price: {format_rupees(med.price)}",
                    f"  Status: {'In Stock' if med.in_stock else 'Out of Stock'}",
                ]
            )
        )
    return "\n\n".join(blocks)


def build_prompt(query: str, context_medicines: list[Medicine], today: date | None = None) -> str:
    """AI 요청 프롬프트 구성

    Args:
        query: 사용자 질문
        context_medicines: 컨텍스트 의약품 목록
        today: 기준 날짜(미지정 시 오늘)

    Returns:
        프롬프트 문자열
    """
    today = today or date.today()
    return (
        "You are PharmaVault Health Assistant, a professional and empathetic healthcare AI.\n"
        f"Current Date: {today:%B} {today.day}, {today.year}\n\n"
        f"{GUIDELINES}\n\n"
        "Context from Verified Medicine Database:\n"
        f"{format_medicine_context(context_medicines)}\n\n"
        f"User Query: {query}"
    )


def _extract_text(payload: object) -> str:
    """generateContent 응답에서 첫 후보의 텍스트를 추출

    Raises:
        AIResponseError: 응답 구조가 예상과 다르거나 텍스트가 비어 있는 경우
    """
    if not isinstance(payload, dict):
        raise AIResponseError("응답 형식 오류")
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        raise AIResponseError("응답 후보 없음")
    candidate = candidates[0]
    content = candidate.get("content") if isinstance(candidate, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise AIResponseError("응답 형식 오류")
    text = "".join(
        part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
    )
    if not text.strip():
        raise AIResponseError("Empty response from AI")
    return text


def _error_message(response: httpx.Response) -> str:
    """HTTP 오류 응답을 사용자 안내 문구로 변환"""
    body = response.text
    if "API_KEY_INVALID" in body or "API key not valid" in body:
        return INVALID_KEY_MESSAGE
    if response.status_code == 429 or "quota" in body.lower():
        return QUOTA_MESSAGE
    return FALLBACK_MESSAGE


def generate_response(
    query: str,
    context_medicines: list[Medicine],
    transport: httpx.BaseTransport | None = None,
    today: date | None = None,
) -> str:
    """Gemini generateContent 호출로 답변 생성

    예외를 밖으로 던지지 않고 실패 유형별 안내 문구를 반환한다.

    Args:
        query: 사용자 질문
        context_medicines: 컨텍스트 의약품 목록
        transport: httpx 전송 계층(테스트용)
        today: 프롬프트 기준 날짜

    Returns:
        AI 답변 또는 안내 문구
    """
    settings = get_settings()
    if not settings.gemini_api_key:
        log_event(
            "ai_unconfigured",
            "WARNING",
            "assistant",
            "ai",
            "GEMINI_API_KEY 미설정",
            error_code="AI_CONF_001",
        )
        return UNAVAILABLE_MESSAGE

    url = f"{settings.gemini_base_url}/models/{settings.gemini_model}:generateContent"
    body = {"contents": [{"parts": [{"text": build_prompt(query, context_medicines, today)}]}]}
    start = datetime.now(timezone.utc)
    try:
        with httpx.Client(timeout=settings.ai_timeout_seconds, transport=transport) as client:
            response = client.post(url, params={"key": settings.gemini_api_key}, json=body)
            response.raise_for_status()
            text = _extract_text(response.json())
    except httpx.HTTPStatusError as exc:
        log_event(
            "ai_failed",
            "ERROR",
            "assistant",
            "ai",
            f"Gemini HTTP 오류: {exc.response.status_code}",
            error_code="AI_HTTP_001",
            duration_ms=elapsed_ms(start),
        )
        return _error_message(exc.response)
    except httpx.HTTPError as exc:
        log_event(
            "ai_failed",
            "ERROR",
            "assistant",
            "ai",
            f"Gemini 전송 오류: {exc}",
            error_code="AI_CONN_001",
            duration_ms=elapsed_ms(start),
        )
        return FALLBACK_MESSAGE
    except (AIResponseError, ValueError) as exc:
        log_event(
            "ai_failed",
            "ERROR",
            "assistant",
            "ai",
            f"Gemini 응답 오류: {exc}",
            error_code="AI_RESP_001",
            duration_ms=elapsed_ms(start),
        )
        return FALLBACK_MESSAGE

    log_event(
        "ai_completed",
        "INFO",
        "assistant",
        "ai",
        "Gemini 응답 수신",
        duration_ms=elapsed_ms(start),
    )
    return text
