from datetime import date

import pytest

from pharmavault.services.authenticity import (
    check_recall_status,
    generate_authenticity_report,
    verify_by_cdsco,
    verify_by_fda,
    verify_medicine,
)

TODAY = date(2025, 6, 1)


class _FixedRng:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


GENUINE = _FixedRng(0.9)


def test_authentic_batch():
    check = verify_medicine("med-001", "PAR2024001", "2024-01-15", "2025-12-31", TODAY, GENUINE)
    assert check.status == "authentic"
    assert check.confidence == pytest.approx(0.95)
    assert check.warnings == []
    assert check.verification_source == "cdsco"


def test_expired_batch():
    check = verify_medicine("med-001", "PAR2024001", "2024-01-15", "2025-01-31", TODAY, GENUINE)
    assert check.status == "expired"
    assert check.confidence == pytest.approx(0.65)
    assert check.warnings == ["Medicine has expired"]


def test_invalid_batch_format():
    check = verify_medicine("med-001", "par-001", "2024-01-15", "2025-12-31", TODAY, GENUINE)
    assert check.status == "suspicious"
    assert check.confidence == pytest.approx(0.55)
    assert "Invalid batch number format" in check.warnings


def test_unparseable_manufacturing_date_is_invalid():
    check = verify_medicine("med-001", "PAR2024001", "not-a-date", "2025-12-31", TODAY, GENUINE)
    assert check.status == "suspicious"
    assert check.warnings == ["Invalid manufacturing date"]


def test_confidence_floor():
    check = verify_medicine("med-001", "bad", "2021-01-01", "2020-01-01", TODAY, GENUINE)
    assert check.status == "suspicious"
    assert check.confidence == pytest.approx(0.1)
    assert len(check.warnings) == 3


def test_random_counterfeit_detection():
    check = verify_medicine("med-001", "PAR2024001", "2024-01-15", "2025-12-31", TODAY, _FixedRng(0.01))
    assert check.status == "counterfeit"
    assert check.confidence == pytest.approx(0.1)
    assert check.warnings[-1] == "Suspected counterfeit medicine detected"


def test_unknown_medicine():
    check = verify_medicine("med-999", "PAR2024001", "2024-01-15", "2025-12-31", TODAY, GENUINE)
    assert check.status == "suspicious"
    assert check.confidence == pytest.approx(0.2)
    assert check.warnings == ["Medicine not found in regulatory database"]


def test_regulatory_lookups():
    assert verify_by_cdsco("CDSCO-PAR-001")
    assert not verify_by_cdsco("CDSCO-XXX-999")
    assert verify_by_fda("FDA-NDA-567890")
    assert not verify_by_fda("FDA-NDA-000000")


def test_recall_status():
    recall = check_recall_status("med-004")
    assert recall.is_recalled
    assert recall.severity == "Class II"
    assert recall.recall_date == "2024-01-10"
    assert not check_recall_status("med-001").is_recalled


def test_authenticity_report():
    check = verify_medicine("med-001", "par-001", "2024-01-15", "2025-12-31", TODAY, GENUINE)
    report = generate_authenticity_report(check)
    assert report.startswith("**Medicine Authenticity Report** ⚠️")
    assert "**Status:** SUSPICIOUS" in report
    assert "**Confidence Level:** 55%" in report
    assert "• Invalid batch number format" in report
    assert "**Recommendation:** Exercise caution." in report
