from enum import Enum

from pydantic import BaseModel, Field, model_validator


class VitalStatus(str, Enum):
    """개별 생체신호 판정 등급"""

    NORMAL = "normal"
    LOW = "low"
    HIGH = "high"
    CONCERNING = "concerning"
    NOT_PROVIDED = "not_provided"


class OverallStatus(str, Enum):
    """전체 판정 등급"""

    NORMAL = "normal"
    ABNORMAL = "abnormal"
    CONCERNING = "concerning"


class VitalCategory(str, Enum):
    """생체신호 항목 (선언 순서가 표시/집계 순서)"""

    HEART_RATE = "heart_rate"
    BLOOD_PRESSURE = "blood_pressure"
    TEMPERATURE = "temperature"
    OXYGEN_SATURATION = "oxygen_saturation"
    RESPIRATORY_RATE = "respiratory_rate"
    BLOOD_SUGAR = "blood_sugar"


class VitalSigns(BaseModel):
    """자유 텍스트에서 추출한 생체신호 측정값"""

    heart_rate: int | None = Field(default=None, description="맥박수(bpm)")
    systolic_bp: int | None = Field(default=None, description="수축기 혈압(mmHg)")
    diastolic_bp: int | None = Field(default=None, description="이완기 혈압(mmHg)")
    temperature: float | None = Field(default=None, description="체온(화씨)")
    oxygen_saturation: int | None = Field(default=None, description="산소포화도(%)")
    respiratory_rate: int | None = Field(default=None, description="호흡수(회/분)")
    blood_sugar: int | None = Field(default=None, description="혈당(mg/dL)")

    @model_validator(mode="after")
    def _check_blood_pressure_pair(self) -> "VitalSigns":
        if (self.systolic_bp is None) != (self.diastolic_bp is None):
            raise ValueError("systolic_bp and diastolic_bp must be given together")
        return self

    def has_any(self) -> bool:
        """측정값이 하나라도 있는지 여부"""
        return any(value is not None for value in self.model_dump().values())


class VitalSignAssessment(BaseModel):
    """단일 생체신호 판정 결과"""

    status: VitalStatus = Field(..., description="판정 등급")
    value: float | None = Field(default=None, description="측정값(혈압은 수축기)")
    normal_range: str = Field(..., description="정상 범위 표시 문자열")
    interpretation: str = Field(..., description="해석 문구")


class VitalSignsAnalysis(BaseModel):
    """생체신호 종합 분석 결과"""

    overall: OverallStatus
    heart_rate: VitalSignAssessment
    blood_pressure: VitalSignAssessment
    temperature: VitalSignAssessment
    oxygen_saturation: VitalSignAssessment
    respiratory_rate: VitalSignAssessment
    blood_sugar: VitalSignAssessment
    recommendations: list[str] = Field(default_factory=list)
    urgent_care: bool = False

    def assessments(self) -> list[tuple[VitalCategory, VitalSignAssessment]]:
        """항목 순서대로 (항목, 판정) 목록을 반환"""
        return [(category, getattr(self, category.value)) for category in VitalCategory]
