from __future__ import annotations

from pharmavault.catalog.store import get_medicine_by_id, load_catalog
from pharmavault.core.errors import InsufficientInputError
from pharmavault.models.comparison import (
    ComparisonCriteria,
    ComparisonMetric,
    ComparisonResult,
    ComparisonScores,
    RecommendationTier,
)
from pharmavault.models.medicine import Medicine

IMPORTANT_CLASSES = ("antibiotic", "ace inhibitor", "statin", "antidiabetic", "analgesic")
SAFE_PREGNANCY_CATEGORIES = ("A", "B")


def _inverse_normalize(value: float, low: float, high: float) -> float:
    """낮을수록 높은 점수(0~100), 전원 동일 시 100"""
    if high > low:
        return (high - value) / (high - low) * 100
    return 100.0


def effectiveness_score(medicine: Medicine) -> float:
    """적응증 수와 치료 계열 기반 효능 점수

    Args:
        medicine: 의약품 레코드

    Returns:
        0~100 점수
    """
    score = min(len(medicine.used_for) * 10, 60)
    therapeutic_class = medicine.therapeutic_class.lower()
    if any(cls in therapeutic_class for cls in IMPORTANT_CLASSES):
        score += 20
    if len(medicine.active_ingredients) > 1:
        score += 10
    return float(min(score, 100))


def availability_score(medicine: Medicine) -> float:
    total = sum(inv.quantity for inv in medicine.pharmacy_inventory)
    return min(100.0, total / 10 + len(medicine.pharmacy_inventory) * 20)


def recommendation_tier(overall: float) -> RecommendationTier:
    if overall >= 80:
        return RecommendationTier.HIGHLY_RECOMMENDED
    if overall >= 60:
        return RecommendationTier.GOOD_WITH_TRADEOFFS
    return RecommendationTier.CONSIDER_ALTERNATIVES


def score_medicine(
    medicine: Medicine, cohort: list[Medicine], criteria: ComparisonCriteria
) -> ComparisonMetric:
    """비교 집합 내 단일 의약품 점수 계산

    가격/부작용 점수는 비교 집합의 최소/최대값으로 정규화하므로 같은
    의약품이라도 집합이 바뀌면 점수가 달라진다.

    Args:
        medicine: 대상 의약품
        cohort: 비교 집합 전체
        criteria: 활성 비교 기준

    Returns:
        의약품별 비교 결과
    """
    scores = ComparisonScores()
    pros: list[str] = []
    cons: list[str] = []

    if criteria.price:
        prices = [med.price for med in cohort]
        low, high = min(prices), max(prices)
        scores.price = _inverse_normalize(medicine.price, low, high)
        if low != high:
            if medicine.price == low:
                pros.append("Most affordable option")
            elif medicine.price == high:
                cons.append("Most expensive option")

    if criteria.effectiveness:
        scores.effectiveness = effectiveness_score(medicine)
        if scores.effectiveness >= 80:
            pros.append("Highly effective for multiple conditions")
        elif scores.effectiveness < 60:
            cons.append("Limited effectiveness scope")

    if criteria.side_effects:
        counts = [len(med.side_effects) for med in cohort]
        low, high = min(counts), max(counts)
        count = len(medicine.side_effects)
        scores.side_effects = _inverse_normalize(count, low, high)
        if low != high:
            if count == low:
                pros.append("Fewer reported side effects")
            elif count == high:
                cons.append("More potential side effects")

    if criteria.availability:
        scores.availability = availability_score(medicine)
        if medicine.in_stock and len(medicine.pharmacy_inventory) > 1:
            pros.append("Widely available")
        elif not medicine.in_stock:
            cons.append("Currently out of stock")

    enabled = criteria.enabled_scoring()
    if enabled:
        scores.overall = sum(getattr(scores, c.value) for c in enabled) / len(enabled)

    if not medicine.prescription_required:
        pros.append("Available over-the-counter")
    else:
        cons.append("Requires prescription")

    if medicine.pregnancy_category in SAFE_PREGNANCY_CATEGORIES:
        pros.append("Generally safe during pregnancy")
    elif medicine.pregnancy_category == "X":
        cons.append("Not safe during pregnancy")

    return ComparisonMetric(
        medicine_id=medicine.id,
        scores=scores,
        pros=pros,
        cons=cons,
        recommendation=recommendation_tier(scores.overall),
    )


def compare_medicines(
    medicine_ids: list[str],
    criteria: ComparisonCriteria | None = None,
    catalog=None,
) -> ComparisonResult:
    """카탈로그 의약품 비교

    미등록 ID는 순서를 유지한 채 제외하고, 남은 의약품이 2개 미만이면
    점수 계산 전에 예외를 발생시킨다.

    Args:
        medicine_ids: 비교할 의약품 ID 목록
        criteria: 비교 기준(미지정 시 기본값)
        catalog: 조회 대상(미지정 시 기본 카탈로그)

    Returns:
        입력 순서를 유지한 비교 결과

    Raises:
        InsufficientInputError: 유효 의약품이 2개 미만인 경우
    """
    criteria = criteria or ComparisonCriteria()
    records = load_catalog() if catalog is None else catalog
    medicines = [
        med
        for med in (get_medicine_by_id(mid, records) for mid in medicine_ids)
        if med is not None
    ]
    if len(medicines) < 2:
        raise InsufficientInputError(len(medicines))

    results = [score_medicine(med, medicines, criteria) for med in medicines]
    return ComparisonResult(medicines=medicines, criteria=criteria, results=results)
