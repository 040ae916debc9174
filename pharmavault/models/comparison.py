from enum import Enum

from pydantic import BaseModel, Field

from pharmavault.models.medicine import Medicine


class ComparisonCriterion(str, Enum):
    """비교 기준"""

    PRICE = "price"
    EFFECTIVENESS = "effectiveness"
    SIDE_EFFECTS = "side_effects"
    AVAILABILITY = "availability"
    ALTERNATIVES = "alternatives"


SCORING_CRITERIA = (
    ComparisonCriterion.PRICE,
    ComparisonCriterion.EFFECTIVENESS,
    ComparisonCriterion.SIDE_EFFECTS,
    ComparisonCriterion.AVAILABILITY,
)


class ComparisonCriteria(BaseModel):
    """비교 기준 활성화 플래그"""

    price: bool = True
    effectiveness: bool = True
    side_effects: bool = True
    availability: bool = True
    alternatives: bool = Field(default=False, description="대체약 표시 여부(점수 미반영)")

    def is_enabled(self, criterion: ComparisonCriterion) -> bool:
        return bool(getattr(self, criterion.value))

    def enabled_scoring(self) -> list[ComparisonCriterion]:
        """점수에 반영되는 활성 기준 목록"""
        return [c for c in SCORING_CRITERIA if self.is_enabled(c)]


class RecommendationTier(str, Enum):
    """종합 점수 기반 추천 등급"""

    HIGHLY_RECOMMENDED = "highly_recommended"
    GOOD_WITH_TRADEOFFS = "good_with_tradeoffs"
    CONSIDER_ALTERNATIVES = "consider_alternatives"

    @property
    def text(self) -> str:
        return RECOMMENDATION_TEXT[self]


RECOMMENDATION_TEXT = {
    RecommendationTier.HIGHLY_RECOMMENDED: "Highly recommended based on selected criteria",
    RecommendationTier.GOOD_WITH_TRADEOFFS: "Good option with some trade-offs",
    RecommendationTier.CONSIDER_ALTERNATIVES: "Consider alternatives or consult healthcare provider",
}


class ComparisonScores(BaseModel):
    """기준별 점수(0~100)"""

    price: float = Field(default=0.0, ge=0, le=100)
    effectiveness: float = Field(default=0.0, ge=0, le=100)
    side_effects: float = Field(default=0.0, ge=0, le=100)
    availability: float = Field(default=0.0, ge=0, le=100)
    overall: float = Field(default=0.0, ge=0, le=100)


class ComparisonMetric(BaseModel):
    """의약품별 비교 결과"""

    medicine_id: str
    scores: ComparisonScores
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    recommendation: RecommendationTier


class ComparisonResult(BaseModel):
    """비교 요청 전체 결과"""

    medicines: list[Medicine]
    criteria: ComparisonCriteria
    results: list[ComparisonMetric]
