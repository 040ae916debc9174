from datetime import datetime, timezone

from fastapi import APIRouter

from pharmavault.core.logger import elapsed_ms, log_event
from pharmavault.models.api import ChatRequest
from pharmavault.models.chat import ChatReply
from pharmavault.services.assistant import answer_chat

router = APIRouter()


@router.post("/chat", response_model=ChatReply)
def chat(request: ChatRequest) -> ChatReply:
    """AI 어시스턴트 채팅

    Args:
        request: 채팅 요청

    Returns:
        채팅 응답
    """
    start = datetime.now(timezone.utc)
    reply = answer_chat(request.message, request.selected_medicine_id)
    log_event(
        "chat_answered",
        "INFO",
        "assistant",
        "chat",
        f"채팅 응답 생성: medicine={reply.related_medicine_id or '-'}",
        duration_ms=elapsed_ms(start),
    )
    return reply
