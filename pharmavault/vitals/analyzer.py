from __future__ import annotations

from pharmavault.models.vitals import (
    OverallStatus,
    VitalSignsAnalysis,
    VitalSigns,
    VitalStatus,
)
from pharmavault.vitals.classifier import (
    classify_blood_pressure,
    classify_blood_sugar,
    classify_heart_rate,
    classify_oxygen_saturation,
    classify_respiratory_rate,
    classify_temperature,
)
from pharmavault.vitals.tables import ADVICE, MONITORING_ADVICE, URGENT_ADVICE

ABNORMAL_STATUSES = {VitalStatus.HIGH, VitalStatus.LOW}


def _overall_status(statuses: list[VitalStatus]) -> OverallStatus:
    """항목별 판정으로 전체 등급 결정

    Args:
        statuses: 항목별 판정 등급 목록

    Returns:
        전체 등급 (high/low 가 2개 이상이어야 abnormal)
    """
    if VitalStatus.CONCERNING in statuses:
        return OverallStatus.CONCERNING
    if sum(1 for status in statuses if status in ABNORMAL_STATUSES) >= 2:
        return OverallStatus.ABNORMAL
    return OverallStatus.NORMAL


def _recommendations(analysis: VitalSignsAnalysis) -> list[str]:
    recommendations: list[str] = []
    for category, assessment in analysis.assessments():
        advice = ADVICE.get((category, assessment.status))
        if advice:
            recommendations.append(advice)
    if analysis.overall != OverallStatus.NORMAL:
        recommendations.extend(MONITORING_ADVICE)
    if analysis.urgent_care:
        recommendations.insert(0, URGENT_ADVICE)
    return recommendations


def analyze_vital_signs(vitals: VitalSigns) -> VitalSignsAnalysis:
    """생체신호를 항목별로 판정하고 전체 등급과 권고를 생성

    Args:
        vitals: 추출된 생체신호

    Returns:
        종합 분석 결과
    """
    analysis = VitalSignsAnalysis(
        overall=OverallStatus.NORMAL,
        heart_rate=classify_heart_rate(vitals.heart_rate),
        blood_pressure=classify_blood_pressure(vitals.systolic_bp, vitals.diastolic_bp),
        temperature=classify_temperature(vitals.temperature),
        oxygen_saturation=classify_oxygen_saturation(vitals.oxygen_saturation),
        respiratory_rate=classify_respiratory_rate(vitals.respiratory_rate),
        blood_sugar=classify_blood_sugar(vitals.blood_sugar),
    )
    overall = _overall_status([a.status for _, a in analysis.assessments()])
    analysis.overall = overall
    analysis.urgent_care = overall == OverallStatus.CONCERNING
    analysis.recommendations = _recommendations(analysis)
    return analysis
