from __future__ import annotations

import random
import re
from datetime import date

from pharmavault.catalog.store import get_medicine_by_id
from pharmavault.models.authenticity import AuthenticityCheck, RecallStatus
from pharmavault.utils.parsing import parse_date, round_half_up

BATCH_PATTERN = re.compile(r"^[A-Z]{3}\d{7}$")
COUNTERFEIT_RATE = 0.05
BASE_CONFIDENCE = 0.95
MIN_CONFIDENCE = 0.1

VALID_CDSCO_CODES = frozenset(
    {"CDSCO-PAR-001", "CDSCO-AMX-002", "CDSCO-LIS-003", "CDSCO-MET-004", "CDSCO-ATO-005"}
)
VALID_FDA_NUMBERS = frozenset(
    {"FDA-ANDA-123456", "FDA-NDA-789012", "FDA-NDA-345678", "FDA-NDA-901234", "FDA-NDA-567890"}
)

RECALLS = {
    "med-004": RecallStatus(
        is_recalled=True,
        recall_date="2024-01-10",
        reason="Potential contamination in specific batch",
        severity="Class II",
    ),
}

STATUS_MARKERS = {
    "authentic": "✅",
    "suspicious": "⚠️",
    "counterfeit": "🚨",
    "expired": "⏰",
}

STATUS_RECOMMENDATIONS = {
    "authentic": "This medicine appears to be authentic and safe to use (if not expired).",
    "suspicious": "Exercise caution. Verify with your pharmacist or contact the manufacturer.",
    "counterfeit": "DO NOT USE. This appears to be a counterfeit medicine. Report to authorities.",
    "expired": "DO NOT USE. This medicine has expired and may be ineffective or harmful.",
}


def verify_medicine(
    medicine_id: str,
    batch_number: str,
    manufacturing_date: str,
    expiry_date: str,
    today: date | None = None,
    rng: random.Random | None = None,
) -> AuthenticityCheck:
    """배치 정보로 정품 여부 점검(모의 규제 규칙)

    해석할 수 없는 날짜는 예외가 아니라 유효하지 않은 값으로 취급한다.

    Args:
        medicine_id: 의약품 ID
        batch_number: 배치 번호(예: PAR2024001)
        manufacturing_date: 제조일(YYYY-MM-DD)
        expiry_date: 유효기한(YYYY-MM-DD)
        today: 기준 날짜(미지정 시 오늘)
        rng: 위조 판정용 난수 생성기

    Returns:
        정품 검증 결과
    """
    medicine = get_medicine_by_id(medicine_id)
    if medicine is None:
        return AuthenticityCheck(
            medicine_id=medicine_id,
            batch_number=batch_number,
            manufacturing_date=manufacturing_date,
            expiry_date=expiry_date,
            status="suspicious",
            verification_source="cdsco",
            confidence=0.2,
            warnings=["Medicine not found in regulatory database"],
        )

    today = today or date.today()
    expiry = parse_date(expiry_date)
    manufactured = parse_date(manufacturing_date)

    status = "authentic"
    confidence = BASE_CONFIDENCE
    warnings: list[str] = []

    if expiry is not None and expiry < today:
        status = "expired"
        warnings.append("Medicine has expired")
        confidence -= 0.3

    if not BATCH_PATTERN.match(batch_number):
        status = "suspicious"
        warnings.append("Invalid batch number format")
        confidence -= 0.4

    valid_manufacture = (
        manufactured is not None
        and expiry is not None
        and manufactured < today
        and manufactured < expiry
    )
    if not valid_manufacture:
        status = "suspicious"
        warnings.append("Invalid manufacturing date")
        confidence -= 0.3

    if (rng or random).random() < COUNTERFEIT_RATE:
        status = "counterfeit"
        confidence = MIN_CONFIDENCE
        warnings.append("Suspected counterfeit medicine detected")

    return AuthenticityCheck(
        medicine_id=medicine_id,
        batch_number=batch_number,
        manufacturing_date=manufacturing_date,
        expiry_date=expiry_date,
        status=status,
        verification_source="cdsco" if medicine.cdsco_drug_code else "fda",
        confidence=round(max(MIN_CONFIDENCE, confidence), 2),
        warnings=warnings,
    )


def verify_by_cdsco(drug_code: str) -> bool:
    return drug_code in VALID_CDSCO_CODES


def verify_by_fda(approval_number: str) -> bool:
    return approval_number in VALID_FDA_NUMBERS


def check_recall_status(medicine_id: str) -> RecallStatus:
    """리콜 이력 조회"""
    return RECALLS.get(medicine_id, RecallStatus(is_recalled=False))


def generate_authenticity_report(check: AuthenticityCheck) -> str:
    """정품 검증 결과를 마크다운 보고서로 렌더링

    Args:
        check: 정품 검증 결과

    Returns:
        마크다운 문자열
    """
    lines = [
        f"**Medicine Authenticity Report** {STATUS_MARKERS[check.status]}",
        "",
        f"**Status:** {check.status.upper()}",
        f"**Confidence Level:** {round_half_up(check.confidence * 100)}%",
        f"**Verification Source:** {check.verification_source.upper()}",
        f"**Batch Number:** {check.batch_number}",
        f"**Manufacturing Date:** {check.manufacturing_date}",
        f"**Expiry Date:** {check.expiry_date}",
        "",
    ]
    if check.warnings:
        lines.append("**Warnings:**")
        lines.extend(f"• {warning}" for warning in check.warnings)
        lines.append("")
    lines.append(f"**Recommendation:** {STATUS_RECOMMENDATIONS[check.status]}")
    lines.append("")
    lines.append(
        "**Important:** Always purchase medicines from licensed pharmacies and "
        "verify authenticity when in doubt."
    )
    return "\n".join(lines)
