from __future__ import annotations

from pharmavault.models.vitals import (
    OverallStatus,
    VitalCategory,
    VitalSignsAnalysis,
    VitalSigns,
    VitalStatus,
)
from pharmavault.utils.parsing import format_measurement
from pharmavault.vitals.analyzer import analyze_vital_signs
from pharmavault.vitals.parser import parse_vital_signs
from pharmavault.vitals.tables import DISPLAY_NAMES, STATUS_MARKERS, UNITS

DISCLAIMER = (
    "Remember, this is general information only. If you feel unwell or your "
    "symptoms continue, please consult a healthcare professional."
)

NO_VITALS_MESSAGE = f"""I didn't detect any vital signs in your message. Please provide your vital signs in this format:

**Example:**
Heart rate: 75 bpm
Blood pressure: 120/80 mmHg
Temperature: 98.6°F
Oxygen saturation: 98%

**Supported vital signs:**
• Heart rate (bpm)
• Blood pressure (systolic/diastolic mmHg)
• Temperature (°F or °C)
• Oxygen saturation (%)
• Respiratory rate (breaths/min)
• Blood sugar (mg/dL)

{DISCLAIMER}"""

URGENT_WARNING = (
    "🚨 **IMPORTANT:** Some of your vital signs are concerning and may require "
    "immediate medical attention. Please contact a healthcare provider or "
    "emergency services if you feel unwell."
)

OVERALL_MARKERS = {
    OverallStatus.NORMAL: "✅",
    OverallStatus.ABNORMAL: "⚠️",
    OverallStatus.CONCERNING: "🚨",
}


def _display_value(category: VitalCategory, vitals: VitalSigns, value: float | None) -> str:
    if category == VitalCategory.BLOOD_PRESSURE:
        return f"{vitals.systolic_bp}/{vitals.diastolic_bp}"
    return format_measurement(value)


def render_vital_signs_report(vitals: VitalSigns, analysis: VitalSignsAnalysis) -> str:
    """분석 결과를 마크다운 응답으로 렌더링

    Args:
        vitals: 추출된 생체신호
        analysis: 종합 분석 결과

    Returns:
        마크다운 문자열
    """
    lines = ["**Your Vital Signs Analysis:**", ""]
    for category, assessment in analysis.assessments():
        if assessment.status == VitalStatus.NOT_PROVIDED:
            continue
        value = _display_value(category, vitals, assessment.value)
        marker = STATUS_MARKERS[assessment.status]
        lines.append(f"**{DISPLAY_NAMES[category]}:** {value} {UNITS[category]} {marker}")
        lines.append(f"• Normal range: {assessment.normal_range}")
        lines.append(f"• {assessment.interpretation}")
        lines.append("")

    lines.append(
        f"**Overall Assessment:** {analysis.overall.value.upper()} "
        f"{OVERALL_MARKERS[analysis.overall]}"
    )
    lines.append("")

    if analysis.recommendations:
        lines.append("**Recommendations:**")
        lines.extend(f"• {rec}" for rec in analysis.recommendations)
        lines.append("")

    if analysis.urgent_care:
        lines.append(URGENT_WARNING)
        lines.append("")

    lines.append(DISCLAIMER)
    return "\n".join(lines)


def generate_vital_signs_response(text: str) -> str:
    """입력 텍스트를 파싱/분석해 안내 메시지를 생성

    생체신호가 하나도 없으면 입력 형식 안내 메시지를 반환한다.

    Args:
        text: 사용자 입력 텍스트

    Returns:
        마크다운 응답 문자열
    """
    vitals = parse_vital_signs(text)
    if not vitals.has_any():
        return NO_VITALS_MESSAGE
    return render_vital_signs_report(vitals, analyze_vital_signs(vitals))
