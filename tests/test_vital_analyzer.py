from pharmavault.models.vitals import OverallStatus, VitalSigns, VitalStatus
from pharmavault.vitals.analyzer import analyze_vital_signs
from pharmavault.vitals.parser import parse_vital_signs
from pharmavault.vitals.report import NO_VITALS_MESSAGE, generate_vital_signs_response
from pharmavault.vitals.tables import MONITORING_ADVICE, URGENT_ADVICE


def test_concerning_vitals_need_urgent_care():
    analysis = analyze_vital_signs(parse_vital_signs("heart rate 45 bpm, bp 190/120"))
    assert analysis.heart_rate.status == VitalStatus.CONCERNING
    assert analysis.blood_pressure.status == VitalStatus.CONCERNING
    assert analysis.overall == OverallStatus.CONCERNING
    assert analysis.urgent_care is True
    assert analysis.recommendations == [URGENT_ADVICE, *MONITORING_ADVICE]


def test_empty_input_is_normal():
    analysis = analyze_vital_signs(VitalSigns())
    assert analysis.overall == OverallStatus.NORMAL
    assert analysis.urgent_care is False
    assert analysis.recommendations == []
    assert all(a.status == VitalStatus.NOT_PROVIDED for _, a in analysis.assessments())


def test_single_abnormal_reading_stays_normal():
    analysis = analyze_vital_signs(VitalSigns(heart_rate=105))
    assert analysis.heart_rate.status == VitalStatus.HIGH
    assert analysis.overall == OverallStatus.NORMAL
    assert analysis.recommendations == [
        "Try relaxation techniques, avoid caffeine, and rest"
    ]


def test_two_abnormal_readings_are_abnormal():
    analysis = analyze_vital_signs(VitalSigns(heart_rate=105, temperature=99.5))
    assert analysis.overall == OverallStatus.ABNORMAL
    assert analysis.urgent_care is False
    assert analysis.recommendations == [
        "Try relaxation techniques, avoid caffeine, and rest",
        "Stay hydrated, rest, and consider fever-reducing medication",
        *MONITORING_ADVICE,
    ]


def test_analysis_is_idempotent():
    vitals = VitalSigns(heart_rate=55, systolic_bp=150, diastolic_bp=95, blood_sugar=60)
    assert analyze_vital_signs(vitals) == analyze_vital_signs(vitals)


def test_celsius_and_fahrenheit_agree():
    celsius = analyze_vital_signs(parse_vital_signs("temp 37°C"))
    fahrenheit = analyze_vital_signs(parse_vital_signs("temp 98.6°F"))
    assert celsius.temperature.status == fahrenheit.temperature.status == VitalStatus.NORMAL


def test_report_for_normal_vitals():
    report = generate_vital_signs_response("Heart rate: 75 bpm, Blood pressure: 118/76 mmHg")
    assert report.startswith("**Your Vital Signs Analysis:**")
    assert "**Heart Rate:** 75 bpm ✅" in report
    assert "**Blood Pressure:** 118/76 mmHg ✅" in report
    assert "**Overall Assessment:** NORMAL ✅" in report
    assert "**Recommendations:**" not in report
    assert "Temperature" not in report


def test_report_shows_converted_temperature():
    report = generate_vital_signs_response("temp 37°C")
    assert "**Temperature:** 98.6 °F ✅" in report


def test_report_for_concerning_vitals():
    report = generate_vital_signs_response("heart rate 45 bpm, bp 190/120")
    assert "**Overall Assessment:** CONCERNING 🚨" in report
    assert "• Seek immediate medical attention" in report
    assert "🚨 **IMPORTANT:**" in report


def test_no_vitals_message():
    assert generate_vital_signs_response("hello there") == NO_VITALS_MESSAGE
