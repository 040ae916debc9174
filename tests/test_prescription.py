from datetime import date

import pytest

from pharmavault.models.medicine import DrugInteraction, Medicine
from pharmavault.models.prescription import PrescribedMedicine, Prescription
from pharmavault.services.prescription import (
    analyze_prescription,
    check_interactions,
    extract_prescription_from_text,
    generate_prescription_report,
)


def _prescription(*medicines: PrescribedMedicine) -> Prescription:
    return Prescription(
        id="rx-1",
        patient_id="patient-1",
        doctor_id="doctor-1",
        medicines=list(medicines),
        issue_date=date(2025, 3, 1),
        valid_until=date(2025, 3, 31),
    )


def test_analyze_prescription_warnings_and_cost():
    prescription = _prescription(
        PrescribedMedicine(
            medicine_id="med-002",
            medicine_name="Amoxicillin",
            dosage="1500mg",
            frequency="4 times daily",
            duration="1 month",
            quantity=20,
        ),
        PrescribedMedicine(medicine_id="med-005", medicine_name="Atorvastatin", dosage="20mg"),
    )
    analysis = analyze_prescription(prescription)

    assert analysis.dosage_warnings == [
        "High dosage prescribed for Amoxicillin: 1500mg",
        "Frequent dosing for Amoxicillin - monitor for side effects",
        "Long-term antibiotic use (Amoxicillin) - monitor for resistance",
    ]
    assert analysis.total_cost == pytest.approx(699.97)
    assert analysis.availability.available == 2
    assert analysis.availability.unavailable == 0
    assert analysis.interactions.severity == "none"
    assert "Amoxicillin: Penicillin allergy" in analysis.contraindications
    assert analysis.recommendations == [
        "⚠️ Pregnancy warning: Atorvastatin - not recommended during pregnancy",
        "💰 Consider generic alternatives to reduce costs",
        "⏰ Take antibiotics at evenly spaced intervals and complete full course",
        "🌙 Take statins in the evening for better effectiveness",
    ]


def test_unknown_and_out_of_stock_medicines():
    prescription = _prescription(
        PrescribedMedicine(medicine_id="med-004", medicine_name="Metformin", dosage="500mg"),
        PrescribedMedicine(medicine_id="unknown", medicine_name="Mystery", dosage="5mg"),
        PrescribedMedicine(medicine_id="med-001", medicine_name="Paracetamol", dosage="500mg"),
    )
    analysis = analyze_prescription(prescription)
    assert analysis.availability.available == 1
    assert analysis.availability.unavailable == 1
    assert analysis.total_cost == pytest.approx(225.49)
    assert "ℹ️ Available OTC: Paracetamol" in analysis.recommendations
    assert analysis.interactions.medicines == ["med-004", "unknown", "med-001"]


def test_interaction_severity_and_alternatives():
    interaction = DrugInteraction(
        drug_name="Bee", severity="severe", description="Risky", recommendation="Avoid"
    )
    mild = DrugInteraction(
        drug_name="Ay", severity="mild", description="Minor", recommendation="Avoid"
    )
    common = {
        "category": "General",
        "therapeutic_class": "Other",
        "prescription_required": True,
        "price": 10,
        "in_stock": True,
    }
    catalog = [
        Medicine(id="a", name="Ay", generic_name="ay", interactions=[interaction], **common),
        Medicine(id="b", name="Bee", generic_name="bee", interactions=[mild], **common),
    ]
    check = check_interactions(["a", "b"], catalog)
    assert check.severity == "severe"
    assert check.recommendations == ["Avoid"]
    assert check.alternatives == ["Consider alternative to Ay + Bee"]


def test_prescription_report():
    prescription = _prescription(
        PrescribedMedicine(medicine_id="med-004", medicine_name="Metformin", dosage="500mg"),
    )
    report = generate_prescription_report(prescription, analyze_prescription(prescription))
    assert report.startswith("**Prescription Analysis Report**")
    assert "**Issue Date:** 2025-03-01" in report
    assert "1. **Metformin**" in report
    assert "Total Estimated Cost: ₹199.99" in report
    assert "Available: 0/1 medicines" in report
    assert "⚠️ 1 medicine(s) currently out of stock" in report


def test_extract_prescription_from_text():
    text = """Dr. Smith Clinic
Diagnosis: Hypertension
1. Lisinopril 10mg once daily
2. Vitamin D 1000mg twice a day
Note: take after food"""
    prescription = extract_prescription_from_text(text, today=date(2025, 3, 1))

    assert [m.medicine_name for m in prescription.medicines] == ["Lisinopril", "Vitamin D"]
    assert prescription.medicines[0].medicine_id == "med-003"
    assert prescription.medicines[0].dosage == "10mg"
    assert prescription.medicines[0].frequency == "once daily"
    assert prescription.medicines[1].medicine_id == "rx-2"
    assert prescription.medicines[1].frequency == "twice a day"
    assert prescription.diagnosis == "Hypertension"
    assert prescription.instructions == "take after food"
    assert prescription.valid_until == date(2025, 3, 31)


def test_extract_defaults_when_nothing_found():
    prescription = extract_prescription_from_text("illegible", today=date(2025, 3, 1))
    assert prescription.medicines == []
    assert prescription.diagnosis is None
    assert prescription.instructions == "Follow prescription as directed"
