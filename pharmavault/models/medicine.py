from typing import Literal

from pydantic import BaseModel, Field


class ActiveIngredient(BaseModel):
    """유효 성분"""

    name: str
    strength: str
    unit: str


class DrugInteraction(BaseModel):
    """약물 상호작용 정보"""

    drug_name: str = Field(..., description="상호작용 대상 약물명")
    severity: Literal["mild", "moderate", "severe"]
    description: str
    recommendation: str


class InventoryInfo(BaseModel):
    """약국별 재고 정보"""

    pharmacy_id: str
    pharmacy_name: str
    location: str
    quantity: int = Field(..., ge=0)
    price: float
    last_updated: str = Field(..., description="재고 갱신일(YYYY-MM-DD)")
    distance: float | None = Field(default=None, description="거리(km)")


class Medicine(BaseModel):
    """카탈로그 의약품 레코드"""

    id: str
    name: str
    generic_name: str
    manufacturer: str = ""
    category: str
    description: str = ""
    dosage: str = ""
    strength: str = ""
    dosage_form: str = ""
    therapeutic_class: str
    prescription_required: bool
    side_effects: list[str] = Field(default_factory=list)
    used_for: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)
    contraindications: list[str] = Field(default_factory=list)
    active_ingredients: list[ActiveIngredient] = Field(default_factory=list)
    interactions: list[DrugInteraction] = Field(default_factory=list)
    expiry_date: str | None = None
    manufacturing_date: str | None = None
    batch_number: str | None = None
    price: float = Field(..., ge=0, description="가격(INR)")
    in_stock: bool
    regulatory_status: Literal["approved", "pending", "recalled", "discontinued"] = (
        "approved"
    )
    cdsco_drug_code: str | None = None
    fda_approval_number: str | None = None
    pregnancy_category: str | None = None
    pharmacy_inventory: list[InventoryInfo] = Field(default_factory=list)
