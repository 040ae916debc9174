from typing import Literal

from pydantic import BaseModel, Field

AuthenticityStatus = Literal["authentic", "suspicious", "counterfeit", "expired"]


class AuthenticityCheck(BaseModel):
    """배치 정품 검증 결과"""

    medicine_id: str
    batch_number: str
    manufacturing_date: str
    expiry_date: str
    status: AuthenticityStatus
    verification_source: Literal["cdsco", "fda", "manufacturer"]
    confidence: float = Field(..., ge=0, le=1)
    warnings: list[str] = Field(default_factory=list)


class RecallStatus(BaseModel):
    """리콜 조회 결과"""

    is_recalled: bool
    recall_date: str | None = None
    reason: str | None = None
    severity: Literal["Class I", "Class II", "Class III"] | None = None
