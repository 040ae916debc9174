from __future__ import annotations

from functools import lru_cache

import yaml
from pydantic import ValidationError

from pharmavault.core.config import get_settings
from pharmavault.core.errors import CatalogError
from pharmavault.models.medicine import DrugInteraction, Medicine


@lru_cache
def load_catalog() -> tuple[Medicine, ...]:
    """카탈로그 파일(YAML)에서 의약품 목록 로드

    Returns:
        의약품 레코드 튜플

    Raises:
        CatalogError: 파일이 없거나 형식이 잘못된 경우
    """
    path = get_settings().catalog_path
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise CatalogError(path, str(exc)) from exc
    except yaml.YAMLError as exc:
        raise CatalogError(path, f"YAML 파싱 실패: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("medicines"), list):
        raise CatalogError(path, "'medicines' 목록이 필요합니다")
    try:
        return tuple(Medicine(**item) for item in data["medicines"])
    except (TypeError, ValidationError) as exc:
        raise CatalogError(path, f"의약품 레코드 검증 실패: {exc}") from exc


def reload_catalog() -> tuple[Medicine, ...]:
    """카탈로그 캐시를 초기화하고 다시 로드

    Returns:
        의약품 레코드 튜플
    """
    load_catalog.cache_clear()
    return load_catalog()


def _records(catalog: list[Medicine] | tuple[Medicine, ...] | None):
    return load_catalog() if catalog is None else catalog


def get_medicine_by_id(medicine_id: str, catalog=None) -> Medicine | None:
    return next((med for med in _records(catalog) if med.id == medicine_id), None)


def get_medicine_by_name(name: str, catalog=None) -> Medicine | None:
    """상품명 또는 성분명(대소문자 무시)으로 의약품 조회"""
    needle = name.lower()
    return next(
        (
            med
            for med in _records(catalog)
            if med.name.lower() == needle or med.generic_name.lower() == needle
        ),
        None,
    )


def search_medicines(query: str, catalog=None) -> list[Medicine]:
    """이름/성분/분류/제조사 부분 일치 검색

    Args:
        query: 검색어
        catalog: 검색 대상(미지정 시 기본 카탈로그)

    Returns:
        카탈로그 순서를 유지한 검색 결과
    """
    term = query.lower()
    results = []
    for med in _records(catalog):
        fields = (
            med.name,
            med.generic_name,
            med.category,
            med.manufacturer,
            med.therapeutic_class,
        )
        if any(term in value.lower() for value in fields) or any(
            term in ingredient.name.lower() for ingredient in med.active_ingredients
        ):
            results.append(med)
    return results


def get_medicines_by_category(category: str, catalog=None) -> list[Medicine]:
    term = category.lower()
    return [med for med in _records(catalog) if term in med.category.lower()]


def get_alternative_medicines(medicine_id: str, catalog=None) -> list[Medicine]:
    """동일 치료 계열 또는 동일 분류의 다른 의약품 목록"""
    records = _records(catalog)
    medicine = get_medicine_by_id(medicine_id, records)
    if medicine is None:
        return []
    return [
        med
        for med in records
        if med.id != medicine_id
        and (
            med.therapeutic_class == medicine.therapeutic_class
            or med.category == medicine.category
        )
    ]


def check_drug_interactions(medicine_ids: list[str], catalog=None) -> list[DrugInteraction]:
    """선택된 의약품 간 상호작용 조회

    한 의약품의 상호작용 목록에 다른 선택 의약품의 상품명/성분명이 있으면
    "A + B" 형식의 약물명으로 결과에 추가한다.

    Args:
        medicine_ids: 의약품 ID 목록(미등록 ID는 무시)
        catalog: 조회 대상(미지정 시 기본 카탈로그)

    Returns:
        상호작용 목록
    """
    records = _records(catalog)
    medicines = [
        med
        for med in (get_medicine_by_id(mid, records) for mid in medicine_ids)
        if med is not None
    ]
    found: list[DrugInteraction] = []
    for medicine in medicines:
        for interaction in medicine.interactions:
            target = interaction.drug_name.lower()
            partner = next(
                (
                    med
                    for med in medicines
                    if med.name.lower() == target or med.generic_name.lower() == target
                ),
                None,
            )
            if partner is not None:
                found.append(
                    interaction.model_copy(
                        update={"drug_name": f"{medicine.name} + {partner.name}"}
                    )
                )
    return found
