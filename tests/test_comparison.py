import pytest

from pharmavault.comparison.alternatives import find_alternatives
from pharmavault.comparison.report import generate_comparison_report
from pharmavault.comparison.scorer import compare_medicines, effectiveness_score
from pharmavault.core.errors import InsufficientInputError
from pharmavault.models.comparison import (
    ComparisonCriteria,
    ComparisonMetric,
    ComparisonResult,
    ComparisonScores,
    RecommendationTier,
)
from pharmavault.models.medicine import ActiveIngredient, InventoryInfo, Medicine

PRICE_ONLY = ComparisonCriteria(
    price=True, effectiveness=False, side_effects=False, availability=False
)


def _medicine(medicine_id: str, price: float, **overrides) -> Medicine:
    fields = {
        "id": medicine_id,
        "name": medicine_id.title(),
        "generic_name": f"{medicine_id} generic",
        "category": "Analgesic",
        "therapeutic_class": "Other",
        "prescription_required": True,
        "price": price,
        "in_stock": True,
    }
    fields.update(overrides)
    return Medicine(**fields)


def test_price_only_scoring():
    catalog = [_medicine("a", 100), _medicine("b", 200)]
    result = compare_medicines(["a", "b"], PRICE_ONLY, catalog=catalog)
    first, second = result.results
    assert first.scores.price == 100
    assert second.scores.price == 0
    assert first.scores.overall == 100
    assert second.scores.overall == 0
    assert "Most affordable option" in first.pros
    assert "Most expensive option" in second.cons
    assert first.recommendation == RecommendationTier.HIGHLY_RECOMMENDED
    assert second.recommendation == RecommendationTier.CONSIDER_ALTERNATIVES


def test_equal_prices_score_full_without_tags():
    catalog = [_medicine("a", 100), _medicine("b", 100)]
    result = compare_medicines(["a", "b"], PRICE_ONLY, catalog=catalog)
    for metric in result.results:
        assert metric.scores.price == 100
        assert "Most affordable option" not in metric.pros
        assert "Most expensive option" not in metric.cons


def test_unknown_ids_are_dropped_before_scoring():
    catalog = [_medicine("a", 100)]
    with pytest.raises(InsufficientInputError) as excinfo:
        compare_medicines(["a", "missing"], catalog=catalog)
    assert excinfo.value.resolved == 1
    assert excinfo.value.code == "CMP_INPUT_001"
    assert excinfo.value.message == "At least 2 medicines are required for comparison"


def test_results_keep_input_order():
    catalog = [_medicine("a", 100), _medicine("b", 50), _medicine("c", 75)]
    result = compare_medicines(["c", "missing", "a", "b"], catalog=catalog)
    assert [m.medicine_id for m in result.results] == ["c", "a", "b"]
    assert [m.id for m in result.medicines] == ["c", "a", "b"]


def test_no_enabled_criteria_gives_zero_overall():
    catalog = [_medicine("a", 100), _medicine("b", 200)]
    criteria = ComparisonCriteria(
        price=False, effectiveness=False, side_effects=False, availability=False
    )
    result = compare_medicines(["a", "b"], criteria, catalog=catalog)
    assert all(m.scores.overall == 0 for m in result.results)


def test_alternatives_flag_does_not_change_overall():
    catalog = [_medicine("a", 100), _medicine("b", 200)]
    criteria = PRICE_ONLY.model_copy(update={"alternatives": True})
    result = compare_medicines(["a", "b"], criteria, catalog=catalog)
    assert result.results[0].scores.overall == 100


def test_unconditional_tags():
    catalog = [
        _medicine("a", 10, prescription_required=False, pregnancy_category="B"),
        _medicine("b", 10, pregnancy_category="X"),
    ]
    result = compare_medicines(["a", "b"], PRICE_ONLY, catalog=catalog)
    first, second = result.results
    assert "Available over-the-counter" in first.pros
    assert "Generally safe during pregnancy" in first.pros
    assert "Requires prescription" in second.cons
    assert "Not safe during pregnancy" in second.cons


def test_effectiveness_score_bonuses():
    medicine = _medicine(
        "a",
        10,
        used_for=[f"use {i}" for i in range(8)],
        therapeutic_class="Beta-lactam antibiotic",
        active_ingredients=[
            ActiveIngredient(name="x", strength="1", unit="mg"),
            ActiveIngredient(name="y", strength="1", unit="mg"),
        ],
    )
    assert effectiveness_score(medicine) == 90


def test_availability_tags():
    inventory = [
        InventoryInfo(
            pharmacy_id=f"ph-{i}",
            pharmacy_name="P",
            location="L",
            quantity=500,
            price=10,
            last_updated="2024-01-01",
        )
        for i in range(2)
    ]
    catalog = [
        _medicine("a", 10, pharmacy_inventory=inventory),
        _medicine("b", 10, in_stock=False),
    ]
    criteria = ComparisonCriteria(
        price=False, effectiveness=False, side_effects=False, availability=True
    )
    first, second = compare_medicines(["a", "b"], criteria, catalog=catalog).results
    assert first.scores.availability == 100
    assert "Widely available" in first.pros
    assert second.scores.availability == 0
    assert "Currently out of stock" in second.cons


def test_catalog_comparison_scores():
    result = compare_medicines(["med-001", "med-003"])
    paracetamol, lisinopril = result.results
    assert paracetamol.scores.effectiveness == 80
    assert lisinopril.scores.effectiveness == 70
    assert paracetamol.scores.side_effects == 100
    assert lisinopril.scores.side_effects == 0
    assert paracetamol.scores.availability == 75
    assert paracetamol.scores.overall == pytest.approx(88.75)
    assert lisinopril.scores.overall == pytest.approx(25)


def test_report_sorts_summary_without_reordering_results():
    result = compare_medicines(["med-003", "med-001"])
    report = generate_comparison_report(result)
    summary = report.split("**Detailed Analysis:**")[0]
    assert summary.index("| Paracetamol |") < summary.index("| Lisinopril |")
    assert [m.medicine_id for m in result.results] == ["med-003", "med-001"]
    details = report.split("**Detailed Analysis:**")[1]
    assert details.index("**Lisinopril**") < details.index("**Paracetamol**")
    assert "**Recommendation:** Highly recommended based on selected criteria" in report


def test_find_alternatives_orders_by_class_then_price():
    catalog = [
        _medicine("base", 50, therapeutic_class="Statin", category="Lipid", used_for=["x"]),
        _medicine("cheap_other", 5, category="Lipid"),
        _medicine("pricey_same", 90, therapeutic_class="Statin", category="Other"),
        _medicine("shared_use", 20, category="Other", used_for=["x"]),
        _medicine("unrelated", 1, category="Other"),
    ]
    alternatives = find_alternatives("base", catalog=catalog)
    assert [m.id for m in alternatives] == ["pricey_same", "cheap_other", "shared_use"]
    assert len(find_alternatives("base", max_results=1, catalog=catalog)) == 1


def test_find_alternatives_unknown_id():
    assert find_alternatives("missing", catalog=[]) == []


def test_report_rounds_half_scores_up_and_prints_plain_prices():
    result = ComparisonResult(
        medicines=[_medicine("a", 1_000_000), _medicine("b", 45.5)],
        criteria=ComparisonCriteria(),
        results=[
            ComparisonMetric(
                medicine_id="a",
                scores=ComparisonScores(overall=62.5),
                recommendation=RecommendationTier.GOOD_WITH_TRADEOFFS,
            ),
            ComparisonMetric(
                medicine_id="b",
                scores=ComparisonScores(overall=40.5),
                recommendation=RecommendationTier.CONSIDER_ALTERNATIVES,
            ),
        ],
    )
    report = generate_comparison_report(result)
    assert "| A | 63% | ₹1000000 | ✅ |" in report
    assert "| B | 41% | ₹45.5 | ✅ |" in report
    assert "Overall Score: 63%" in report
    assert "e+" not in report
