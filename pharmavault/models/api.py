from pydantic import BaseModel, Field

from pharmavault.models.authenticity import AuthenticityCheck, RecallStatus
from pharmavault.models.comparison import ComparisonCriteria, ComparisonResult
from pharmavault.models.prescription import PrescriptionAnalysis
from pharmavault.models.vitals import VitalSigns, VitalSignsAnalysis


class TextRequest(BaseModel):
    """자유 텍스트 입력"""

    text: str = Field(..., description="사용자 입력 텍스트")


class MarkdownResponse(BaseModel):
    response: str = Field(..., description="마크다운 응답")


class VitalsAnalysisResponse(BaseModel):
    """생체신호 분석 응답"""

    detected: bool = Field(..., description="측정값 추출 여부")
    vitals: VitalSigns
    analysis: VitalSignsAnalysis | None = None


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, description="사용자 메시지")
    selected_medicine_id: str | None = Field(default=None, description="선택된 의약품 ID")


class CompareRequest(BaseModel):
    """의약품 비교 요청"""

    medicine_ids: list[str] = Field(..., min_length=1, max_length=4, description="비교 대상 ID")
    criteria: ComparisonCriteria = Field(default_factory=ComparisonCriteria)


class CompareResponse(BaseModel):
    result: ComparisonResult
    report: str


class InteractionRequest(BaseModel):
    medicine_ids: list[str] = Field(..., description="점검 대상 ID")


class AuthenticityRequest(BaseModel):
    """정품 검증 요청"""

    medicine_id: str
    batch_number: str
    manufacturing_date: str = Field(..., description="제조일(YYYY-MM-DD)")
    expiry_date: str = Field(..., description="유효기한(YYYY-MM-DD)")


class AuthenticityResponse(BaseModel):
    check: AuthenticityCheck
    recall: RecallStatus
    report: str


class PrescriptionAnalysisResponse(BaseModel):
    analysis: PrescriptionAnalysis
    report: str
