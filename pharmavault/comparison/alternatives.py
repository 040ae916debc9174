from __future__ import annotations

from pharmavault.catalog.store import get_medicine_by_id, load_catalog
from pharmavault.models.medicine import Medicine


def find_alternatives(medicine_id: str, max_results: int = 5, catalog=None) -> list[Medicine]:
    """대체 의약품 후보 조회

    치료 계열, 분류, 적응증 중 하나라도 겹치면 후보로 보고, 치료 계열이
    같은 후보를 먼저, 그다음 가격 오름차순으로 정렬한다.

    Args:
        medicine_id: 기준 의약품 ID
        max_results: 최대 반환 개수
        catalog: 조회 대상(미지정 시 기본 카탈로그)

    Returns:
        대체 의약품 목록(미등록 ID면 빈 목록)
    """
    records = load_catalog() if catalog is None else catalog
    medicine = get_medicine_by_id(medicine_id, records)
    if medicine is None:
        return []

    indications = set(medicine.used_for)
    candidates = [
        med
        for med in records
        if med.id != medicine_id
        and (
            med.therapeutic_class == medicine.therapeutic_class
            or med.category == medicine.category
            or indications.intersection(med.used_for)
        )
    ]
    candidates.sort(
        key=lambda med: (med.therapeutic_class != medicine.therapeutic_class, med.price)
    )
    return candidates[:max_results]
