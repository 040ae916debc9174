"""생체신호 참고 범위와 고정 문구 테이블 (성인 기준)"""

from pharmavault.models.vitals import VitalCategory, VitalStatus

C = VitalCategory

NORMAL_RANGES: dict[VitalCategory, str] = {
    C.HEART_RATE: "60-100 bpm",
    C.BLOOD_PRESSURE: "90-120/60-80 mmHg",
    C.TEMPERATURE: "97.8-99.1°F (36.5-37.3°C)",
    C.OXYGEN_SATURATION: "95-100%",
    C.RESPIRATORY_RATE: "12-20 breaths/min",
    C.BLOOD_SUGAR: "70-140 mg/dL (varies by timing)",
}

DISPLAY_NAMES: dict[VitalCategory, str] = {
    C.HEART_RATE: "Heart Rate",
    C.BLOOD_PRESSURE: "Blood Pressure",
    C.TEMPERATURE: "Temperature",
    C.OXYGEN_SATURATION: "Oxygen Saturation",
    C.RESPIRATORY_RATE: "Respiratory Rate",
    C.BLOOD_SUGAR: "Blood Sugar",
}

UNITS: dict[VitalCategory, str] = {
    C.HEART_RATE: "bpm",
    C.BLOOD_PRESSURE: "mmHg",
    C.TEMPERATURE: "°F",
    C.OXYGEN_SATURATION: "%",
    C.RESPIRATORY_RATE: "breaths/min",
    C.BLOOD_SUGAR: "mg/dL",
}

# 해석 문구: (항목, 구간) -> 문구. 구간은 판정 등급보다 세분화됨
INTERPRETATIONS: dict[tuple[VitalCategory, str], str] = {
    (C.HEART_RATE, "not_provided"): "Heart rate not provided",
    (C.HEART_RATE, "concerning_low"): "Significantly low heart rate (bradycardia) - may indicate heart problems",
    (C.HEART_RATE, "low"): "Below normal range - could be due to fitness, medications, or heart conditions",
    (C.HEART_RATE, "concerning_high"): "Significantly elevated heart rate (tachycardia) - may indicate stress, fever, or heart issues",
    (C.HEART_RATE, "high"): "Above normal range - could be due to activity, stress, caffeine, or anxiety",
    (C.HEART_RATE, "normal"): "Within normal range",
    (C.BLOOD_PRESSURE, "not_provided"): "Blood pressure not provided",
    (C.BLOOD_PRESSURE, "concerning"): "Hypertensive crisis - requires immediate medical attention",
    (C.BLOOD_PRESSURE, "low"): "Low blood pressure (hypotension) - may cause dizziness or fainting",
    (C.BLOOD_PRESSURE, "high_stage2"): "High blood pressure (hypertension) - should be monitored and managed",
    (C.BLOOD_PRESSURE, "high"): "Elevated blood pressure - lifestyle changes may be beneficial",
    (C.BLOOD_PRESSURE, "normal"): "Within normal range",
    (C.TEMPERATURE, "not_provided"): "Temperature not provided",
    (C.TEMPERATURE, "concerning_high"): "High fever - requires immediate medical attention",
    (C.TEMPERATURE, "fever"): "Fever present - body is fighting infection or illness",
    (C.TEMPERATURE, "high"): "Slightly elevated - may indicate early illness or activity",
    (C.TEMPERATURE, "concerning_low"): "Hypothermia - dangerously low body temperature",
    (C.TEMPERATURE, "low"): "Below normal - may indicate poor circulation or environmental factors",
    (C.TEMPERATURE, "normal"): "Within normal range",
    (C.OXYGEN_SATURATION, "not_provided"): "Oxygen saturation not provided",
    (C.OXYGEN_SATURATION, "concerning"): "Severely low oxygen levels - requires immediate medical attention",
    (C.OXYGEN_SATURATION, "low"): "Below normal - may indicate respiratory or circulation problems",
    (C.OXYGEN_SATURATION, "normal"): "Within normal range",
    (C.RESPIRATORY_RATE, "not_provided"): "Respiratory rate not provided",
    (C.RESPIRATORY_RATE, "concerning"): "Abnormal breathing rate - requires medical evaluation",
    (C.RESPIRATORY_RATE, "low"): "Below normal - may indicate respiratory depression",
    (C.RESPIRATORY_RATE, "high"): "Above normal - may indicate respiratory distress or anxiety",
    (C.RESPIRATORY_RATE, "normal"): "Within normal range",
    (C.BLOOD_SUGAR, "not_provided"): "Blood sugar not provided",
    (C.BLOOD_SUGAR, "concerning_low"): "Severely low blood sugar (hypoglycemia) - requires immediate treatment",
    (C.BLOOD_SUGAR, "low"): "Low blood sugar - may cause symptoms like shakiness or dizziness",
    (C.BLOOD_SUGAR, "concerning_high"): "Very high blood sugar - requires medical attention",
    (C.BLOOD_SUGAR, "high"): "Elevated blood sugar - may indicate diabetes or recent meal",
    (C.BLOOD_SUGAR, "normal"): "Within acceptable range",
}

ADVICE: dict[tuple[VitalCategory, VitalStatus], str] = {
    (C.HEART_RATE, VitalStatus.HIGH): "Try relaxation techniques, avoid caffeine, and rest",
    (C.HEART_RATE, VitalStatus.LOW): "Monitor for symptoms like dizziness or fatigue",
    (C.BLOOD_PRESSURE, VitalStatus.HIGH): "Reduce sodium intake, exercise regularly, and manage stress",
    (C.BLOOD_PRESSURE, VitalStatus.LOW): "Stay hydrated, avoid sudden position changes, and eat regular meals",
    (C.TEMPERATURE, VitalStatus.HIGH): "Stay hydrated, rest, and consider fever-reducing medication",
    (C.TEMPERATURE, VitalStatus.LOW): "Keep warm and monitor for other symptoms",
    (C.OXYGEN_SATURATION, VitalStatus.LOW): "Ensure good posture, practice deep breathing, and avoid smoke",
}

URGENT_ADVICE = "Seek immediate medical attention"
MONITORING_ADVICE = [
    "Monitor your vital signs regularly",
    "Keep a record of your readings to share with healthcare providers",
]

STATUS_MARKERS: dict[VitalStatus, str] = {
    VitalStatus.NORMAL: "✅",
    VitalStatus.LOW: "⬇️",
    VitalStatus.HIGH: "⬆️",
    VitalStatus.CONCERNING: "🚨",
}
