from __future__ import annotations

from pharmavault.models.vitals import VitalCategory, VitalSignAssessment, VitalStatus
from pharmavault.vitals.tables import INTERPRETATIONS, NORMAL_RANGES

C = VitalCategory
S = VitalStatus


def _assess(
    category: VitalCategory,
    status: VitalStatus,
    band: str,
    value: float | None = None,
) -> VitalSignAssessment:
    """테이블에서 범위/해석 문구를 골라 판정 결과 생성

    Args:
        category: 생체신호 항목
        status: 판정 등급
        band: 해석 문구 구간 키
        value: 측정값

    Returns:
        판정 결과
    """
    return VitalSignAssessment(
        status=status,
        value=value,
        normal_range=NORMAL_RANGES[category],
        interpretation=INTERPRETATIONS[(category, band)],
    )


def _not_provided(category: VitalCategory) -> VitalSignAssessment:
    return _assess(category, S.NOT_PROVIDED, "not_provided")


def classify_heart_rate(hr: int | None) -> VitalSignAssessment:
    """맥박수 판정 (정상 60-100 bpm)"""
    if hr is None:
        return _not_provided(C.HEART_RATE)
    if hr < 50:
        return _assess(C.HEART_RATE, S.CONCERNING, "concerning_low", hr)
    if hr > 120:
        return _assess(C.HEART_RATE, S.CONCERNING, "concerning_high", hr)
    if hr < 60:
        return _assess(C.HEART_RATE, S.LOW, "low", hr)
    if hr > 100:
        return _assess(C.HEART_RATE, S.HIGH, "high", hr)
    return _assess(C.HEART_RATE, S.NORMAL, "normal", hr)


def classify_blood_pressure(
    systolic: int | None, diastolic: int | None
) -> VitalSignAssessment:
    """혈압 판정 (정상 90-120/60-80 mmHg)

    수축기/이완기 중 하나라도 없으면 미입력으로 처리한다.
    130-139/80-89 와 140/90 이상은 같은 high 등급이며 해석 문구만 다르다.
    """
    if systolic is None or diastolic is None:
        return _not_provided(C.BLOOD_PRESSURE)
    if systolic >= 180 or diastolic >= 110:
        return _assess(C.BLOOD_PRESSURE, S.CONCERNING, "concerning", systolic)
    if systolic < 90 or diastolic < 60:
        return _assess(C.BLOOD_PRESSURE, S.LOW, "low", systolic)
    if systolic >= 140 or diastolic >= 90:
        return _assess(C.BLOOD_PRESSURE, S.HIGH, "high_stage2", systolic)
    if systolic >= 130 or diastolic >= 80:
        return _assess(C.BLOOD_PRESSURE, S.HIGH, "high", systolic)
    return _assess(C.BLOOD_PRESSURE, S.NORMAL, "normal", systolic)


def classify_temperature(temp: float | None) -> VitalSignAssessment:
    """체온 판정 (화씨, 정상 97.8-99.1°F)"""
    if temp is None:
        return _not_provided(C.TEMPERATURE)
    if temp >= 103:
        return _assess(C.TEMPERATURE, S.CONCERNING, "concerning_high", temp)
    if temp < 95:
        return _assess(C.TEMPERATURE, S.CONCERNING, "concerning_low", temp)
    if temp >= 100.4:
        return _assess(C.TEMPERATURE, S.HIGH, "fever", temp)
    if temp > 99.1:
        return _assess(C.TEMPERATURE, S.HIGH, "high", temp)
    if temp < 97.8:
        return _assess(C.TEMPERATURE, S.LOW, "low", temp)
    return _assess(C.TEMPERATURE, S.NORMAL, "normal", temp)


def classify_oxygen_saturation(o2: int | None) -> VitalSignAssessment:
    """산소포화도 판정 (정상 95-100%)"""
    if o2 is None:
        return _not_provided(C.OXYGEN_SATURATION)
    if o2 < 90:
        return _assess(C.OXYGEN_SATURATION, S.CONCERNING, "concerning", o2)
    if o2 < 95:
        return _assess(C.OXYGEN_SATURATION, S.LOW, "low", o2)
    return _assess(C.OXYGEN_SATURATION, S.NORMAL, "normal", o2)


def classify_respiratory_rate(rr: int | None) -> VitalSignAssessment:
    """호흡수 판정 (정상 12-20 회/분)"""
    if rr is None:
        return _not_provided(C.RESPIRATORY_RATE)
    if rr < 8 or rr > 30:
        return _assess(C.RESPIRATORY_RATE, S.CONCERNING, "concerning", rr)
    if rr < 12:
        return _assess(C.RESPIRATORY_RATE, S.LOW, "low", rr)
    if rr > 20:
        return _assess(C.RESPIRATORY_RATE, S.HIGH, "high", rr)
    return _assess(C.RESPIRATORY_RATE, S.NORMAL, "normal", rr)


def classify_blood_sugar(bs: int | None) -> VitalSignAssessment:
    """혈당 판정 (70-140 mg/dL, 측정 시점에 따라 다름)

    141-180 은 식후 값일 수 있으므로 정상으로 둔다.
    """
    if bs is None:
        return _not_provided(C.BLOOD_SUGAR)
    if bs < 54:
        return _assess(C.BLOOD_SUGAR, S.CONCERNING, "concerning_low", bs)
    if bs > 250:
        return _assess(C.BLOOD_SUGAR, S.CONCERNING, "concerning_high", bs)
    if bs < 70:
        return _assess(C.BLOOD_SUGAR, S.LOW, "low", bs)
    if bs > 180:
        return _assess(C.BLOOD_SUGAR, S.HIGH, "high", bs)
    return _assess(C.BLOOD_SUGAR, S.NORMAL, "normal", bs)
