import pytest
from pydantic import ValidationError

from pharmavault.models.vitals import VitalSigns
from pharmavault.vitals.analyzer import analyze_vital_signs
from pharmavault.vitals.parser import detect_vital_signs, parse_vital_signs
from pharmavault.vitals.report import NO_VITALS_MESSAGE, generate_vital_signs_response


def test_parse_standard_format():
    vitals = parse_vital_signs(
        "Heart rate: 75 bpm, Blood pressure: 120/80 mmHg, Temperature: 98.6°F"
    )
    assert vitals.heart_rate == 75
    assert vitals.systolic_bp == 120
    assert vitals.diastolic_bp == 80
    assert vitals.temperature == 98.6


def test_parse_synonyms():
    vitals = parse_vital_signs("spo2 97%, resp rate 16, glucose 110 mg/dL, pulse 64")
    assert vitals.oxygen_saturation == 97
    assert vitals.respiratory_rate == 16
    assert vitals.blood_sugar == 110
    assert vitals.heart_rate == 64


def test_celsius_is_converted_to_fahrenheit():
    vitals = parse_vital_signs("temp 37°C")
    assert vitals.temperature == pytest.approx(98.6)


def test_fahrenheit_wins_over_celsius():
    vitals = parse_vital_signs("temperature 38C, temp 101°F")
    assert vitals.temperature == 101


def test_temperature_without_unit_is_not_extracted():
    vitals = parse_vital_signs("temp 99")
    assert vitals.temperature is None
    assert detect_vital_signs("temp 99")


def test_systolic_only_leaves_blood_pressure_absent():
    vitals = parse_vital_signs("BP 120")
    assert vitals.systolic_bp is None
    assert vitals.diastolic_bp is None


def test_zero_is_a_value():
    vitals = parse_vital_signs("pulse 0")
    assert vitals.heart_rate == 0
    assert vitals.has_any()


def test_synonym_requires_word_boundary():
    assert parse_vital_signs("three 72").heart_rate is None


def test_no_vitals():
    vitals = parse_vital_signs("I feel fine today")
    assert not vitals.has_any()
    assert not detect_vital_signs("I feel fine today")


def test_half_blood_pressure_pair_rejected():
    with pytest.raises(ValidationError):
        VitalSigns(systolic_bp=120)


@pytest.mark.parametrize(
    "text",
    [
        "pulse " + "9" * 5000,
        "pulse " + "9" * 400,
        "bp " + "9" * 400 + "/80",
        "temp " + "9" * 400 + "C",
        "glucose 1234567",
    ],
)
def test_oversized_numbers_are_treated_as_absent(text):
    vitals = parse_vital_signs(text)
    assert not vitals.has_any()
    analysis = analyze_vital_signs(vitals)
    assert all(assessment.value is None for _, assessment in analysis.assessments())
    assert generate_vital_signs_response(text) == NO_VITALS_MESSAGE


def test_oversized_number_does_not_hide_other_vitals():
    vitals = parse_vital_signs("pulse " + "9" * 400 + ", spo2 97%")
    assert vitals.heart_rate is None
    assert vitals.oxygen_saturation == 97
    analysis = analyze_vital_signs(vitals)
    assert analysis.heart_rate.value is None
    assert analysis.oxygen_saturation.value == 97
