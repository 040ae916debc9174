"""증상 미검출 시 사용하는 고정 주제 응답"""

from __future__ import annotations

CLOSING = (
    "Remember, this is general information only. Your health and safety are "
    "important, so don't hesitate to seek professional medical advice when in doubt."
)

MEDICINE_SAFETY = f"""**Medicine Safety Guidelines:**

**General precautions:**
• Always read labels and follow dosage instructions carefully
• Check expiration dates before taking any medicine
• Be aware of potential drug interactions with other medications
• Don't exceed recommended doses
• Store medicines properly in a cool, dry place

**Before taking any medicine:**
• Consult with a pharmacist or doctor if you're unsure
• Inform healthcare providers about all medicines you're currently taking
• Check for known allergies or previous adverse reactions
• Consider your current medical conditions and health status

**When to consult a healthcare professional:**
Always consult a doctor or pharmacist before starting new medications, especially if you have chronic conditions, are pregnant or breastfeeding, or are taking other medicines.

{CLOSING}"""

EMERGENCY = f"""**When to Seek Emergency Medical Care:**

**Call emergency services immediately for:**
• Difficulty breathing or shortness of breath
• Chest pain or pressure
• Severe allergic reactions (swelling, difficulty breathing)
• Loss of consciousness or fainting
• Severe bleeding that won't stop
• Signs of stroke (face drooping, arm weakness, speech difficulty)
• Severe burns or injuries

**Go to urgent care or ER for:**
• High fever with severe symptoms
• Persistent vomiting or signs of dehydration
• Severe abdominal pain
• Head injuries or severe headaches
• Deep cuts requiring stitches

**General health emergencies:**
If you're ever unsure whether a situation is an emergency, it's always better to err on the side of caution and seek immediate medical attention.

{CLOSING}"""

GREETING = """Hello! I'm your PharmaVault Health Assistant. I'm here to help you with:

• Medicine information and recommendations
• Symptoms analysis and health guidance
• Vital signs monitoring and interpretation
• Prescription assistance
• General health questions

What can I help you with today?"""

HOW_ARE_YOU = """I'm doing great, thank you for asking! I'm here and ready to help you with any health or medicine-related questions.

What would you like to know about today? I can help with:
• Symptoms and health concerns
• Medicine information
• Vital signs analysis
• General health advice"""

THANKS = """You're very welcome! I'm happy to help. If you have any other health questions or need medicine information, feel free to ask anytime.

Stay healthy!"""

GOODBYE = """Goodbye! Take care of your health. Feel free to come back anytime you have questions about medicines or health concerns.

Stay well!"""

CAPABILITIES = f"""Thank you for your health question. I'm here to help with information about common symptoms, vital signs analysis, and general health guidance.

**I can help you with:**
• Common symptoms like headaches, fever, cough, sore throat
• Vital signs analysis (heart rate, blood pressure, temperature, etc.)
• General information about over-the-counter medicines
• Simple home remedies and precautions
• Guidance on when to see a doctor
• Basic health and wellness questions

**For the best assistance, try describing:**
• Your specific symptoms or vital signs
• How long you've been experiencing them
• Any other related concerns

**Vital signs format example:**
Heart rate: 75 bpm, Blood pressure: 120/80 mmHg, Temperature: 98.6°F

**Important reminders:**
• This information is for general guidance only
• Always consult healthcare professionals for serious symptoms
• Don't delay seeking medical care if you're concerned
• Keep emergency numbers handy for urgent situations

Feel free to ask about any specific symptoms, vital signs, or health concerns you may have!

{CLOSING}"""

GREETINGS = ["hi", "hello", "hey", "good morning", "good afternoon", "good evening", "greetings", "howdy"]
HOW_ARE_YOU_PHRASES = ["how are you", "how are you doing", "how's it going", "what's up", "whats up"]
THANKS_PHRASES = ["thanks", "thank you", "appreciate it", "thanks a lot"]
GOODBYE_PHRASES = ["bye", "goodbye", "see you", "farewell", "take care"]


def is_medicine_safety_question(text: str) -> bool:
    return "medicine" in text and ("safe" in text or "take" in text)


def is_emergency_question(text: str) -> bool:
    return any(word in text for word in ("emergency", "urgent", "serious"))


def _is_greeting(text: str) -> bool:
    return any(
        text == greeting or text.startswith(greeting + " ") or text.startswith(greeting + "!")
        for greeting in GREETINGS
    )


def conversational_response(text: str) -> str | None:
    """인사/감사/작별 등 대화형 입력에 대한 응답

    Args:
        text: 소문자화/공백 제거된 입력

    Returns:
        응답 문자열 또는 None
    """
    if _is_greeting(text):
        return GREETING
    if any(phrase in text for phrase in HOW_ARE_YOU_PHRASES):
        return HOW_ARE_YOU
    if any(phrase in text for phrase in THANKS_PHRASES):
        return THANKS
    if any(phrase in text for phrase in GOODBYE_PHRASES):
        return GOODBYE
    return None


def general_health_response(text: str) -> str:
    """고정 주제 우선순위로 일반 응답 선택

    우선순위: 복약 안전 > 응급 > 대화형 > 기능 안내

    Args:
        text: 소문자화/공백 제거된 입력

    Returns:
        응답 문자열
    """
    if is_medicine_safety_question(text):
        return MEDICINE_SAFETY
    if is_emergency_question(text):
        return EMERGENCY
    conversational = conversational_response(text)
    if conversational is not None:
        return conversational
    return CAPABILITIES
