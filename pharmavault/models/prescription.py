from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from pharmavault.models.medicine import DrugInteraction


class PrescribedMedicine(BaseModel):
    """처방 항목"""

    medicine_id: str
    medicine_name: str
    dosage: str
    frequency: str = "As directed"
    duration: str = "7 days"
    quantity: int = Field(default=10, ge=0)
    instructions: str = ""


class Prescription(BaseModel):
    """처방전"""

    id: str = ""
    patient_id: str = ""
    doctor_id: str = ""
    medicines: list[PrescribedMedicine] = Field(default_factory=list)
    issue_date: date | None = None
    valid_until: date | None = None
    status: Literal["active", "filled", "expired", "cancelled"] = "active"
    instructions: str = ""
    diagnosis: str | None = None


class InteractionCheck(BaseModel):
    """처방 약물 상호작용 점검 결과"""

    medicines: list[str]
    interactions: list[DrugInteraction] = Field(default_factory=list)
    severity: Literal["none", "mild", "moderate", "severe"] = "none"
    recommendations: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)


class Availability(BaseModel):
    available: int = 0
    unavailable: int = 0


class PrescriptionAnalysis(BaseModel):
    """처방전 분석 결과"""

    interactions: InteractionCheck
    dosage_warnings: list[str] = Field(default_factory=list)
    contraindications: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    total_cost: float = 0.0
    availability: Availability = Field(default_factory=Availability)
