from __future__ import annotations

import re
from datetime import date, timedelta

from pharmavault.catalog.store import (
    check_drug_interactions,
    get_medicine_by_id,
    get_medicine_by_name,
    load_catalog,
)
from pharmavault.models.medicine import Medicine
from pharmavault.models.prescription import (
    Availability,
    InteractionCheck,
    PrescribedMedicine,
    Prescription,
    PrescriptionAnalysis,
)
from pharmavault.utils.parsing import leading_number

PRESCRIPTION_VALIDITY_DAYS = 30
PACK_SIZE = 10

MEDICINE_LINE = re.compile(r"^(\d+\.?\s*)?([A-Za-z\s]+)\s*[-:]?\s*(\d+\s*mg|mg\s*\d+)", re.I)
FREQUENCY = re.compile(r"(once|twice|thrice|\d+\s*times?).*?(daily|day|morning|evening|night)", re.I)
DIAGNOSIS_LABEL = re.compile(r"diagnosis:?", re.I)
INSTRUCTION_LABEL = re.compile(r"instructions?:?|notes?:?", re.I)

SEVERITY_MARKERS = {"mild": "⚠️", "moderate": "⚠️", "severe": "🚨"}


def _overall_severity(severities: list[str]) -> str:
    if not severities:
        return "none"
    for level in ("severe", "moderate"):
        if level in severities:
            return level
    return "mild"


def check_interactions(medicine_ids: list[str], catalog=None) -> InteractionCheck:
    """처방 약물 간 상호작용 점검

    Args:
        medicine_ids: 처방 의약품 ID 목록
        catalog: 조회 대상(미지정 시 기본 카탈로그)

    Returns:
        상호작용 점검 결과
    """
    interactions = check_drug_interactions(medicine_ids, catalog)
    recommendations = list(dict.fromkeys(i.recommendation for i in interactions))
    alternatives = list(
        dict.fromkeys(
            f"Consider alternative to {i.drug_name}"
            for i in interactions
            if i.severity == "severe"
        )
    )
    return InteractionCheck(
        medicines=list(medicine_ids),
        interactions=interactions,
        severity=_overall_severity([i.severity for i in interactions]),
        recommendations=recommendations,
        alternatives=alternatives,
    )


def check_dosage_warnings(prescription: Prescription, medicines: dict[str, Medicine]) -> list[str]:
    warnings: list[str] = []
    for prescribed in prescription.medicines:
        medicine = medicines.get(prescribed.medicine_id)
        if medicine is None:
            continue
        dose = leading_number(prescribed.dosage)
        strength = leading_number(medicine.strength)
        if dose and strength and dose > strength * 2:
            warnings.append(f"High dosage prescribed for {medicine.name}: {prescribed.dosage}")
        if "4 times" in prescribed.frequency or "every 4 hours" in prescribed.frequency:
            warnings.append(f"Frequent dosing for {medicine.name} - monitor for side effects")
        if "month" in prescribed.duration and "Antibiotic" in medicine.category:
            warnings.append(
                f"Long-term antibiotic use ({medicine.name}) - monitor for resistance"
            )
    return warnings


def _recommendations(resolved: list[Medicine], interactions: InteractionCheck) -> list[str]:
    recommendations: list[str] = []
    if interactions.severity == "severe":
        recommendations.append(
            "⚠️ Severe drug interactions detected - consult prescribing physician immediately"
        )
    elif interactions.severity == "moderate":
        recommendations.append(
            "⚠️ Moderate drug interactions present - monitor closely for side effects"
        )

    risky = [med.name for med in resolved if med.pregnancy_category in ("D", "X")]
    if risky:
        recommendations.append(
            f"⚠️ Pregnancy warning: {', '.join(risky)} - not recommended during pregnancy"
        )

    otc = [med.name for med in resolved if not med.prescription_required]
    if otc:
        recommendations.append(f"ℹ️ Available OTC: {', '.join(otc)}")

    if any(med.name != med.generic_name for med in resolved):
        recommendations.append("💰 Consider generic alternatives to reduce costs")

    if any("Antibiotic" in med.category for med in resolved):
        recommendations.append(
            "⏰ Take antibiotics at evenly spaced intervals and complete full course"
        )
    if any("Statin" in med.category for med in resolved):
        recommendations.append("🌙 Take statins in the evening for better effectiveness")
    return recommendations


def analyze_prescription(prescription: Prescription, catalog=None) -> PrescriptionAnalysis:
    """처방전 분석(상호작용/용량/금기/권고/비용/재고)

    카탈로그에 없는 처방 항목은 상호작용 외 모든 항목에서 제외한다.

    Args:
        prescription: 처방전
        catalog: 조회 대상(미지정 시 기본 카탈로그)

    Returns:
        처방전 분석 결과
    """
    records = load_catalog() if catalog is None else catalog
    medicine_ids = [pm.medicine_id for pm in prescription.medicines]
    resolved = [
        med
        for med in (get_medicine_by_id(mid, records) for mid in medicine_ids)
        if med is not None
    ]
    by_id = {med.id: med for med in resolved}

    interactions = check_interactions(medicine_ids, records)
    total_cost = sum(
        by_id[pm.medicine_id].price * pm.quantity / PACK_SIZE
        for pm in prescription.medicines
        if pm.medicine_id in by_id
    )
    available = sum(1 for med in resolved if med.in_stock)

    return PrescriptionAnalysis(
        interactions=interactions,
        dosage_warnings=check_dosage_warnings(prescription, by_id),
        contraindications=[
            f"{med.name}: {item}" for med in resolved for item in med.contraindications
        ],
        recommendations=_recommendations(resolved, interactions),
        total_cost=round(total_cost, 2),
        availability=Availability(available=available, unavailable=len(resolved) - available),
    )


def _format_date(value: date | None) -> str:
    return value.isoformat() if value else "-"


def generate_prescription_report(prescription: Prescription, analysis: PrescriptionAnalysis) -> str:
    """처방전 분석 결과를 마크다운 보고서로 렌더링

    Args:
        prescription: 처방전
        analysis: 분석 결과

    Returns:
        마크다운 문자열
    """
    lines = [
        "**Prescription Analysis Report**",
        "",
        f"**Patient:** {prescription.patient_id}",
        f"**Prescribed by:** {prescription.doctor_id}",
        f"**Issue Date:** {_format_date(prescription.issue_date)}",
        f"**Valid Until:** {_format_date(prescription.valid_until)}",
        "",
    ]
    if prescription.diagnosis:
        lines.extend([f"**Diagnosis:** {prescription.diagnosis}", ""])

    lines.append("**Prescribed Medicines:**")
    for index, med in enumerate(prescription.medicines, start=1):
        lines.append(f"{index}. **{med.medicine_name}**")
        lines.append(f"   - Dosage: {med.dosage}")
        lines.append(f"   - Frequency: {med.frequency}")
        lines.append(f"   - Duration: {med.duration}")
        lines.append(f"   - Quantity: {med.quantity}")
        if med.instructions:
            lines.append(f"   - Instructions: {med.instructions}")
        lines.append("")

    lines.extend(
        [
            "**Cost Analysis:**",
            f"Total Estimated Cost: ₹{analysis.total_cost:.2f}",
            "",
            "**Availability:**",
            f"Available: {analysis.availability.available}/{len(prescription.medicines)} medicines",
        ]
    )
    if analysis.availability.unavailable > 0:
        lines.append(
            f"⚠️ {analysis.availability.unavailable} medicine(s) currently out of stock"
        )
    lines.append("")

    if analysis.interactions.interactions:
        lines.append(f"**Drug Interactions ({analysis.interactions.severity.upper()}):**")
        for interaction in analysis.interactions.interactions:
            lines.append(
                f"{SEVERITY_MARKERS[interaction.severity]} {interaction.drug_name}: "
                f"{interaction.description}"
            )
            lines.append(f"   Recommendation: {interaction.recommendation}")
            lines.append("")

    if analysis.dosage_warnings:
        lines.append("**Dosage Warnings:**")
        lines.extend(f"⚠️ {warning}" for warning in analysis.dosage_warnings)
        lines.append("")

    if analysis.contraindications:
        lines.append("**Contraindications:**")
        lines.extend(f"⚠️ {item}" for item in analysis.contraindications)
        lines.append("")

    if analysis.recommendations:
        lines.append("**Recommendations:**")
        lines.extend(analysis.recommendations)
        lines.append("")

    lines.append(
        "**Important:** This analysis is for informational purposes only. Always follow "
        "your healthcare provider's instructions and consult them for any concerns."
    )
    return "\n".join(lines)


def extract_prescription_from_text(text: str, today: date | None = None) -> Prescription:
    """자유 텍스트(OCR 결과 등)에서 처방전 추출

    카탈로그에 있는 약 이름은 해당 ID로, 없으면 순번 기반 임시 ID로 매핑한다.

    Args:
        text: 처방전 텍스트
        today: 발행일(미지정 시 오늘)

    Returns:
        추출된 처방전
    """
    today = today or date.today()
    medicines: list[PrescribedMedicine] = []
    diagnosis = ""
    instructions = ""

    for line in (raw.strip() for raw in text.splitlines()):
        if not line:
            continue
        match = MEDICINE_LINE.match(line)
        if match:
            name = match.group(2).strip()
            frequency = FREQUENCY.search(line)
            known = get_medicine_by_name(name)
            medicines.append(
                PrescribedMedicine(
                    medicine_id=known.id if known else f"rx-{len(medicines) + 1}",
                    medicine_name=name,
                    dosage=match.group(3),
                    frequency=frequency.group(0) if frequency else "As directed",
                    instructions="Take as prescribed",
                )
            )
        lowered = line.lower()
        if "diagnosis" in lowered or "condition" in lowered:
            diagnosis = DIAGNOSIS_LABEL.sub("", line, count=1).strip()
        if "instruction" in lowered or "note" in lowered:
            instructions = INSTRUCTION_LABEL.sub("", line, count=1).strip()

    return Prescription(
        medicines=medicines,
        diagnosis=diagnosis or None,
        instructions=instructions or "Follow prescription as directed",
        issue_date=today,
        valid_until=today + timedelta(days=PRESCRIPTION_VALIDITY_DAYS),
        status="active",
    )
