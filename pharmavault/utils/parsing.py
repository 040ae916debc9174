from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Iterable

DATE_FORMATS = ["%Y-%m-%d", "%Y%m%d", "%d/%m/%Y"]

_LEADING_NUMBER = re.compile(r"(\d+(?:\.\d+)?)")
# 생체신호 측정값으로 의미 있는 최대 자릿수
MAX_TOKEN_DIGITS = 6


def parse_int_token(value: str | None) -> int | None:
    """숫자 토큰을 정수로 파싱

    Args:
        value: 정규식으로 잡은 숫자 토큰

    Returns:
        정수 값 또는 None
    """
    if value is None:
        return None
    text = value.strip()
    if not text.isdigit() or len(text) > MAX_TOKEN_DIGITS:
        return None
    return int(text)


def parse_float_token(value: str | None) -> float | None:
    """숫자 토큰을 실수로 파싱

    Args:
        value: 정규식으로 잡은 숫자 토큰

    Returns:
        실수 값 또는 None
    """
    if value is None:
        return None
    text = value.strip()
    if len(text.split(".", 1)[0]) > MAX_TOKEN_DIGITS:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def leading_number(value: str | None) -> float | None:
    """문자열에서 첫 번째 숫자를 추출

    Args:
        value: 원본 문자열 (예: "500mg")

    Returns:
        실수 값 또는 None
    """
    if not value:
        return None
    match = _LEADING_NUMBER.search(value)
    if match is None:
        return None
    return float(match.group(1))


def celsius_to_fahrenheit(celsius: float) -> float:
    """섭씨를 화씨로 변환"""
    return celsius * 9 / 5 + 32


def parse_date(value: str | date | None, formats: Iterable[str] = DATE_FORMATS) -> date | None:
    """날짜 문자열을 date로 파싱

    Args:
        value: 원본 날짜 값
        formats: 허용 포맷 목록

    Returns:
        date 또는 None (해석 불가 시)
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_measurement(value: float | int | None) -> str:
    """측정값 표시 문자열

    Args:
        value: 측정값

    Returns:
        정수면 정수 표기, 아니면 유효 자릿수 표기
    """
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def round_half_up(value: float) -> int:
    """0.5를 올림하는 반올림 (62.5 -> 63)"""
    return math.floor(value + 0.5)


def format_rupees(price: float) -> str:
    """가격 표시 문자열 (정수 가격은 소수점 생략, 지수 표기 없음)"""
    if float(price).is_integer():
        return f"₹{int(price)}"
    return f"₹{price}"
