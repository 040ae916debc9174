from pharmavault.triage.knowledge import (
    MAX_CAUSES,
    MAX_MEDICINES,
    SYMPTOMS,
    match_symptoms,
)
from pharmavault.triage.responder import (
    MULTI_SYMPTOM_DOCTOR_ADVICE,
    format_multi_symptom_response,
    generate_medical_response,
)
from pharmavault.triage.topics import (
    CAPABILITIES,
    CLOSING,
    EMERGENCY,
    GREETING,
    MEDICINE_SAFETY,
    THANKS,
)


def _bullet_section(response: str, heading: str) -> list[str]:
    lines = response.split(heading, 1)[1].strip().split("\n\n", 1)[0].splitlines()
    return [line for line in lines if line.startswith("• ")]


def test_knowledge_table_has_fourteen_categories():
    assert len(SYMPTOMS) == 14
    assert SYMPTOMS[0].key == "headache"
    assert SYMPTOMS[-1].key == "cold_flu"


def test_single_symptom_advisory():
    response = generate_medical_response("I have a headache")
    headache = SYMPTOMS[0]
    assert response.startswith("**Headache** can have several common causes:")
    assert f"Please see a healthcare provider if you experience {headache.doctor_advice}." in response
    assert response.endswith(CLOSING)


def test_multi_symptom_advisory_merges_and_caps():
    response = generate_medical_response("I have a headache and a fever")
    assert response.startswith("**Headache and fever**")
    assert MULTI_SYMPTOM_DOCTOR_ADVICE in response
    causes = _bullet_section(response, "**Possible causes:**")
    medicines = _bullet_section(response, "**Common medicines that may help:**")
    assert len(causes) <= MAX_CAUSES
    assert len(medicines) <= MAX_MEDICINES
    assert len(causes) == len(set(causes))


def test_multi_symptom_dedupes_shared_items():
    headache = SYMPTOMS[0]
    response = format_multi_symptom_response([headache, headache])
    causes = _bullet_section(response, "**Possible causes:**")
    assert causes == [f"• {cause}" for cause in headache.causes[:MAX_CAUSES]]


def test_match_symptoms_keeps_table_order():
    matched = match_symptoms("feeling dizzy with a cough")
    assert [s.key for s in matched] == ["cough", "dizziness"]


def test_vitals_take_priority():
    response = generate_medical_response("Heart rate: 75 bpm and I have a headache")
    assert response.startswith("**Your Vital Signs Analysis:**")


def test_medicine_safety_topic():
    assert generate_medical_response("Is this medicine safe to take?") == MEDICINE_SAFETY


def test_emergency_topic():
    assert generate_medical_response("what counts as an emergency") == EMERGENCY


def test_medicine_safety_beats_emergency():
    assert generate_medical_response("urgent: which medicine is safe") == MEDICINE_SAFETY


def test_conversational_topics():
    assert generate_medical_response("  Hello  ") == GREETING
    assert generate_medical_response("thank you so much") == THANKS


def test_capabilities_fallback():
    assert generate_medical_response("what can you do") == CAPABILITIES


def test_response_is_deterministic():
    text = "my back hurts and I feel nauseous"
    assert generate_medical_response(text) == generate_medical_response(text)
