from __future__ import annotations

import string

import httpx

from pharmavault.catalog.store import get_medicine_by_id, get_medicine_by_name, search_medicines
from pharmavault.clients.gemini import generate_response
from pharmavault.models.chat import ChatReply
from pharmavault.models.medicine import Medicine


def generate_health_response(query: str, transport: httpx.BaseTransport | None = None) -> str:
    """카탈로그 검색 결과를 컨텍스트로 AI 답변 생성

    Args:
        query: 사용자 질문
        transport: httpx 전송 계층(테스트용)

    Returns:
        AI 답변 또는 안내 문구
    """
    return generate_response(query, search_medicines(query), transport=transport)


def detect_medicine(text: str) -> Medicine | None:
    """입력 단어 중 카탈로그 의약품명과 일치하는 첫 항목"""
    for line in text.splitlines():
        for word in line.split():
            medicine = get_medicine_by_name(word.strip(string.punctuation))
            if medicine is not None:
                return medicine
    return None


def answer_chat(
    message: str,
    selected_medicine_id: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> ChatReply:
    """채팅 메시지 처리

    선택된 의약품이 있으면 해당 의약품만 컨텍스트로, 없으면 메시지에서
    감지한 의약품을, 그것도 없으면 카탈로그 검색 결과를 컨텍스트로 사용한다.

    Args:
        message: 사용자 메시지
        selected_medicine_id: 선택된 의약품 ID(선택)
        transport: httpx 전송 계층(테스트용)

    Returns:
        채팅 응답
    """
    medicine = None
    if selected_medicine_id:
        medicine = get_medicine_by_id(selected_medicine_id)
    if medicine is None:
        medicine = detect_medicine(message)
    if medicine is None:
        return ChatReply(response=generate_health_response(message, transport=transport))
    return ChatReply(
        response=generate_response(message, [medicine], transport=transport),
        related_medicine_id=medicine.id,
    )
