from __future__ import annotations

import re

from pharmavault.models.vitals import VitalSigns
from pharmavault.utils.parsing import (
    celsius_to_fahrenheit,
    parse_float_token,
    parse_int_token,
)

_SEP = r"[\s:]*"
_DEGREE = r"\s*(?:°|º|deg(?:rees)?)?\s*"

HEART_RATE = re.compile(rf"\b(?:heart rate|pulse|hr)\b{_SEP}(\d+)(?:\s*bpm)?", re.I)
# 수축기/이완기는 한 패턴으로만 추출 (부분 입력은 미검출)
BLOOD_PRESSURE = re.compile(
    rf"\b(?:blood pressure|bp)\b{_SEP}(\d+)\s*/\s*(\d+)(?:\s*mmhg)?", re.I
)
TEMPERATURE_F = re.compile(
    rf"\b(?:temperature|temp)\b{_SEP}(\d+(?:\.\d+)?){_DEGREE}f(?:ahrenheit)?\b", re.I
)
TEMPERATURE_C = re.compile(
    rf"\b(?:temperature|temp)\b{_SEP}(\d+(?:\.\d+)?){_DEGREE}c(?:elsius)?\b", re.I
)
OXYGEN_SATURATION = re.compile(
    rf"\b(?:oxygen saturation|o2 sat|spo2)\b{_SEP}(\d+)(?:\s*%)?", re.I
)
RESPIRATORY_RATE = re.compile(
    rf"\b(?:respiratory rate|breathing rate|resp rate)\b{_SEP}(\d+)", re.I
)
BLOOD_SUGAR = re.compile(
    rf"\b(?:blood sugar|glucose|bg)\b{_SEP}(\d+)(?:\s*mg/dl)?", re.I
)

# 단위 없이도 수치가 있으면 생체신호 입력으로 간주
DETECTION_PATTERNS = [
    HEART_RATE,
    BLOOD_PRESSURE,
    re.compile(rf"\b(?:temperature|temp)\b{_SEP}\d+(?:\.\d+)?", re.I),
    OXYGEN_SATURATION,
    RESPIRATORY_RATE,
    BLOOD_SUGAR,
]


def _search_int(pattern: re.Pattern[str], text: str) -> int | None:
    match = pattern.search(text)
    if match is None:
        return None
    return parse_int_token(match.group(1))


def _parse_temperature(text: str) -> float | None:
    """체온을 화씨로 추출

    Args:
        text: 입력 텍스트

    Returns:
        화씨 체온 또는 None
    """
    match = TEMPERATURE_F.search(text)
    if match:
        return parse_float_token(match.group(1))
    match = TEMPERATURE_C.search(text)
    if match:
        celsius = parse_float_token(match.group(1))
        return None if celsius is None else celsius_to_fahrenheit(celsius)
    return None


def _parse_blood_pressure(text: str) -> tuple[int | None, int | None]:
    match = BLOOD_PRESSURE.search(text)
    if match is None:
        return None, None
    systolic = parse_int_token(match.group(1))
    diastolic = parse_int_token(match.group(2))
    if systolic is None or diastolic is None:
        return None, None
    return systolic, diastolic


def parse_vital_signs(text: str) -> VitalSigns:
    """자유 텍스트에서 생체신호를 추출

    항목마다 전용 패턴을 모두 적용한다. 매칭되지 않은 항목은 None으로 남는다.

    Args:
        text: 사용자 입력 텍스트

    Returns:
        추출된 생체신호
    """
    systolic, diastolic = _parse_blood_pressure(text)
    return VitalSigns(
        heart_rate=_search_int(HEART_RATE, text),
        systolic_bp=systolic,
        diastolic_bp=diastolic,
        temperature=_parse_temperature(text),
        oxygen_saturation=_search_int(OXYGEN_SATURATION, text),
        respiratory_rate=_search_int(RESPIRATORY_RATE, text),
        blood_sugar=_search_int(BLOOD_SUGAR, text),
    )


def detect_vital_signs(text: str) -> bool:
    """입력에 생체신호 형태의 수치가 있는지 확인"""
    return any(pattern.search(text) for pattern in DETECTION_PATTERNS)
