from pydantic import BaseModel, Field


class ChatReply(BaseModel):
    """채팅 응답"""

    response: str
    related_medicine_id: str | None = Field(default=None, description="답변에 사용된 의약품 ID")
