"""증상 키워드와 증상별 고정 안내 지식 테이블"""

from pydantic import BaseModel


class SymptomKnowledge(BaseModel):
    """증상 카테고리별 안내 레코드"""

    key: str
    display_name: str
    phrases: list[str]
    causes: list[str]
    medicines: list[str]
    precautions: list[str]
    doctor_advice: str


SYMPTOMS: list[SymptomKnowledge] = [
    SymptomKnowledge(
        key="headache",
        display_name="headache",
        phrases=[
            "headache", "head pain", "head ache", "migraine", "head hurts",
            "pain in head", "head throbbing", "head pounding",
        ],
        causes=[
            "Dehydration or not drinking enough water",
            "Stress, tension, or anxiety",
            "Lack of sleep or poor sleep quality",
            "Eye strain from screens or bright lights",
            "Sinus congestion or allergies",
            "Low blood sugar or skipping meals",
            "Caffeine withdrawal",
            "Poor posture or neck tension",
        ],
        medicines=[
            "Paracetamol (acetaminophen) - safe and effective for most people",
            "Ibuprofen - helps with pain and inflammation",
            "Aspirin - for adults only, not for children",
            "Plenty of water - often the best first treatment",
        ],
        precautions=[
            "Rest in a quiet, dark room",
            "Apply a cold compress to your forehead",
            "Drink water slowly and steadily",
            "Try gentle neck and shoulder stretches",
            "Avoid bright lights and loud noises",
            "Get some fresh air if possible",
        ],
        doctor_advice=(
            "severe headache, persistent pain lasting more than 2 days, headache "
            "with fever, vision changes, confusion, or neck stiffness"
        ),
    ),
    SymptomKnowledge(
        key="fever",
        display_name="fever",
        phrases=[
            "fever", "high temperature", "hot", "burning up", "feverish",
            "temperature", "chills", "sweating",
        ],
        causes=[
            "Viral infections like cold or flu",
            "Bacterial infections",
            "Inflammatory conditions",
            "Heat exhaustion or dehydration",
            "Some medications or vaccines",
            "Autoimmune conditions",
        ],
        medicines=[
            "Paracetamol - effective fever reducer and safe for most ages",
            "Ibuprofen - reduces fever and inflammation",
            "Plenty of fluids to prevent dehydration",
            "Oral rehydration solutions if needed",
        ],
        precautions=[
            "Rest and get plenty of sleep",
            "Drink lots of fluids (water, herbal teas, clear broths)",
            "Wear light, breathable clothing",
            "Use cool compresses on forehead and wrists",
            "Take lukewarm baths or showers",
            "Monitor temperature regularly",
        ],
        doctor_advice=(
            "fever above 103°F (39.4°C), persistent fever for more than 3 days, "
            "difficulty breathing, severe headache, chest pain, or signs of dehydration"
        ),
    ),
    SymptomKnowledge(
        key="cough",
        display_name="cough",
        phrases=[
            "cough", "coughing", "throat clearing", "hacking", "dry cough",
            "wet cough", "persistent cough",
        ],
        causes=[
            "Common cold or flu virus",
            "Allergies or environmental irritants",
            "Dry air or seasonal changes",
            "Throat irritation from talking or singing",
            "Acid reflux or heartburn",
            "Respiratory infections",
        ],
        medicines=[
            "Cough drops or throat lozenges for soothing relief",
            "Honey (natural cough suppressant - not for children under 1 year)",
            "Cough syrups with dextromethorphan for dry coughs",
            "Expectorants to help loosen mucus",
        ],
        precautions=[
            "Stay well hydrated with warm liquids",
            "Use a humidifier or breathe steam from hot shower",
            "Gargle with warm salt water",
            "Avoid smoke, strong perfumes, and irritants",
            "Sleep with your head elevated",
            "Rest your voice when possible",
        ],
        doctor_advice=(
            "persistent cough lasting more than 2 weeks, coughing up blood, high "
            "fever with cough, difficulty breathing, or chest pain"
        ),
    ),
    SymptomKnowledge(
        key="sore_throat",
        display_name="sore throat",
        phrases=[
            "sore throat", "throat pain", "throat hurts", "scratchy throat",
            "throat ache", "swollen throat", "throat infection",
        ],
        causes=[
            "Viral infections (most common cause)",
            "Bacterial infections like strep throat",
            "Allergies or postnasal drip",
            "Dry air or mouth breathing",
            "Acid reflux",
            "Overuse of voice or shouting",
        ],
        medicines=[
            "Throat lozenges or hard candies for temporary relief",
            "Paracetamol or ibuprofen for pain and inflammation",
            "Throat sprays with numbing agents",
            "Antiseptic gargles or mouthwashes",
        ],
        precautions=[
            "Gargle with warm salt water several times daily",
            "Drink warm fluids like tea with honey",
            "Use a humidifier to add moisture to air",
            "Avoid irritants like cigarette smoke",
            "Rest your voice and avoid whispering",
            "Stay hydrated with plenty of fluids",
        ],
        doctor_advice=(
            "severe throat pain, difficulty swallowing, high fever, white patches "
            "on throat, swollen lymph nodes, or symptoms lasting more than a week"
        ),
    ),
    SymptomKnowledge(
        key="stomach_pain",
        display_name="stomach pain",
        phrases=[
            "stomach pain", "stomach ache", "belly pain", "abdominal pain",
            "tummy ache", "stomach hurts", "gastric pain", "indigestion",
        ],
        causes=[
            "Indigestion from eating too much or too quickly",
            "Gas, bloating, or trapped wind",
            "Food poisoning or stomach bug",
            "Stress, anxiety, or emotional upset",
            "Acid reflux or heartburn",
            "Menstrual cramps (for women)",
            "Constipation or digestive issues",
        ],
        medicines=[
            "Antacids for acid-related stomach discomfort",
            "Simethicone (Gas-X) for gas and bloating",
            "Loperamide for diarrhea (if present)",
            "Probiotics to support digestive health",
        ],
        precautions=[
            "Eat smaller, more frequent meals",
            "Avoid spicy, fatty, or very acidic foods",
            "Stay hydrated with clear fluids",
            "Apply a warm heating pad to your abdomen",
            "Try gentle walking to aid digestion",
            "Practice relaxation techniques if stress-related",
        ],
        doctor_advice=(
            "severe abdominal pain, persistent vomiting, signs of dehydration, high "
            "fever, blood in stool, or pain that worsens over time"
        ),
    ),
    SymptomKnowledge(
        key="dizziness",
        display_name="dizziness",
        phrases=[
            "dizzy", "dizziness", "lightheaded", "vertigo", "spinning",
            "balance problems", "unsteady",
        ],
        causes=[
            "Dehydration or low blood sugar",
            "Inner ear problems or balance disorders",
            "Low blood pressure or sudden position changes",
            "Medication side effects",
            "Anxiety, stress, or panic attacks",
            "Anemia or low iron levels",
            "Vestibular disorders",
        ],
        medicines=[
            "Oral rehydration solutions if dehydrated",
            "Glucose tablets or sweet drinks for low blood sugar",
            "Motion sickness medications if travel-related",
            "Iron supplements if anemic (consult doctor first)",
        ],
        precautions=[
            "Sit or lie down immediately when feeling dizzy",
            "Move slowly and avoid sudden position changes",
            "Stay well hydrated throughout the day",
            "Eat regular, balanced meals",
            "Avoid driving or operating machinery when dizzy",
            "Get up slowly from sitting or lying positions",
        ],
        doctor_advice=(
            "frequent or severe dizziness, dizziness with chest pain or shortness of "
            "breath, fainting episodes, severe headache with dizziness, or if it "
            "significantly affects daily activities"
        ),
    ),
    SymptomKnowledge(
        key="nausea",
        display_name="nausea",
        phrases=[
            "nausea", "nauseous", "sick to stomach", "queasy", "feel like vomiting",
            "morning sickness", "motion sickness",
        ],
        causes=[
            "Stomach flu or food poisoning",
            "Motion sickness or travel",
            "Pregnancy (morning sickness)",
            "Medication side effects",
            "Anxiety or stress",
            "Overeating or eating too quickly",
            "Migraine headaches",
        ],
        medicines=[
            "Ginger supplements or ginger tea (natural anti-nausea)",
            "Dramamine for motion sickness",
            "Antacids if related to stomach acid",
            "Oral rehydration solutions to prevent dehydration",
        ],
        precautions=[
            "Eat small, frequent meals instead of large ones",
            "Choose bland foods like crackers, toast, or rice",
            "Avoid strong smells and greasy foods",
            "Stay hydrated with small sips of clear fluids",
            "Get fresh air and avoid stuffy environments",
            "Rest in a comfortable position",
        ],
        doctor_advice=(
            "persistent vomiting, signs of dehydration, severe abdominal pain, high "
            "fever, or if you cannot keep fluids down for more than 24 hours"
        ),
    ),
    SymptomKnowledge(
        key="fatigue",
        display_name="fatigue",
        phrases=[
            "tired", "fatigue", "exhausted", "weak", "no energy", "sleepy",
            "worn out", "drained",
        ],
        causes=[
            "Lack of quality sleep or sleep disorders",
            "Stress, anxiety, or depression",
            "Poor diet or nutritional deficiencies",
            "Dehydration or not drinking enough water",
            "Sedentary lifestyle or lack of exercise",
            "Underlying medical conditions",
            "Medication side effects",
        ],
        medicines=[
            "Multivitamins if nutritional deficiency suspected",
            "Iron supplements if anemic (consult doctor first)",
            "Vitamin D supplements if deficient",
            "B-complex vitamins for energy support",
        ],
        precautions=[
            "Establish a regular sleep schedule (7-9 hours nightly)",
            "Eat a balanced diet with regular meals",
            "Stay hydrated throughout the day",
            "Exercise regularly, even light walking helps",
            "Manage stress through relaxation techniques",
            "Limit caffeine and alcohol consumption",
        ],
        doctor_advice=(
            "persistent fatigue lasting more than 2 weeks, fatigue with unexplained "
            "weight loss, severe fatigue affecting daily activities, or fatigue with "
            "other concerning symptoms"
        ),
    ),
    SymptomKnowledge(
        key="back_pain",
        display_name="back pain",
        phrases=[
            "back pain", "backache", "lower back pain", "spine pain",
            "back hurts", "back ache",
        ],
        causes=[
            "Poor posture or prolonged sitting",
            "Muscle strain from lifting or sudden movements",
            "Sleeping in awkward positions",
            "Stress and muscle tension",
            "Lack of regular exercise",
            "Herniated disc or spinal issues",
            "Arthritis or joint problems",
        ],
        medicines=[
            "Ibuprofen or naproxen for inflammation and pain",
            "Paracetamol for pain relief",
            "Topical pain relief creams or gels",
            "Muscle relaxants (prescription only)",
        ],
        precautions=[
            "Apply ice for first 24-48 hours, then heat",
            "Gentle stretching and movement (avoid bed rest)",
            "Maintain good posture when sitting and standing",
            "Use proper lifting techniques",
            "Sleep on a supportive mattress",
            "Consider gentle yoga or physical therapy exercises",
        ],
        doctor_advice=(
            "severe back pain, pain radiating down legs, numbness or tingling, loss "
            "of bladder control, or pain following an injury"
        ),
    ),
    SymptomKnowledge(
        key="joint_pain",
        display_name="joint pain",
        phrases=[
            "joint pain", "arthritis", "knee pain", "shoulder pain",
            "joint ache", "stiff joints", "joint stiffness",
        ],
        causes=[
            "Arthritis (osteoarthritis or rheumatoid)",
            "Overuse or repetitive strain",
            "Injury or trauma to the joint",
            "Autoimmune conditions",
            "Weather changes (barometric pressure)",
            "Age-related wear and tear",
            "Inflammatory conditions",
        ],
        medicines=[
            "Ibuprofen or naproxen for inflammation",
            "Paracetamol for pain relief",
            "Topical anti-inflammatory creams",
            "Glucosamine and chondroitin supplements",
        ],
        precautions=[
            "Apply ice for acute pain, heat for stiffness",
            "Gentle range-of-motion exercises",
            "Maintain a healthy weight to reduce joint stress",
            "Use supportive devices if needed",
            "Avoid activities that worsen pain",
            "Consider low-impact exercises like swimming",
        ],
        doctor_advice=(
            "severe joint pain, significant swelling, joint deformity, inability to "
            "use the joint, or pain with fever"
        ),
    ),
    SymptomKnowledge(
        key="skin_issues",
        display_name="skin issues",
        phrases=[
            "rash", "skin rash", "itchy skin", "skin irritation", "eczema",
            "dry skin", "skin allergy", "hives",
        ],
        causes=[
            "Allergic reactions to foods, products, or environment",
            "Eczema or dermatitis",
            "Dry skin or weather changes",
            "Insect bites or stings",
            "Contact with irritants",
            "Stress or hormonal changes",
            "Fungal or bacterial infections",
        ],
        medicines=[
            "Antihistamines for allergic reactions and itching",
            "Hydrocortisone cream for inflammation",
            "Moisturizing lotions and creams",
            "Calamine lotion for soothing relief",
        ],
        precautions=[
            "Avoid known triggers and irritants",
            "Keep skin clean and moisturized",
            "Use gentle, fragrance-free products",
            "Avoid scratching affected areas",
            "Wear loose, breathable clothing",
            "Take cool baths with oatmeal or baking soda",
        ],
        doctor_advice=(
            "severe rash, signs of infection, rash with fever, difficulty breathing "
            "with rash, or rash that doesn't improve with treatment"
        ),
    ),
    SymptomKnowledge(
        key="sleep_issues",
        display_name="sleep issues",
        phrases=[
            "insomnia", "can't sleep", "trouble sleeping", "sleep problems",
            "difficulty sleeping", "restless sleep",
        ],
        causes=[
            "Stress, anxiety, or racing thoughts",
            "Poor sleep hygiene or irregular schedule",
            "Caffeine or alcohol consumption",
            "Screen time before bed",
            "Uncomfortable sleep environment",
            "Medical conditions or medications",
            "Shift work or jet lag",
        ],
        medicines=[
            "Melatonin supplements (natural sleep aid)",
            "Herbal teas like chamomile or valerian",
            "Magnesium supplements for relaxation",
            "Over-the-counter sleep aids (short-term use only)",
        ],
        precautions=[
            "Establish a consistent bedtime routine",
            "Create a cool, dark, quiet sleep environment",
            "Avoid screens 1 hour before bedtime",
            "Limit caffeine after 2 PM",
            "Exercise regularly, but not close to bedtime",
            "Practice relaxation techniques like deep breathing",
        ],
        doctor_advice=(
            "chronic insomnia lasting more than 3 weeks, sleep problems affecting "
            "daily life, loud snoring with breathing pauses, or excessive daytime "
            "sleepiness"
        ),
    ),
    SymptomKnowledge(
        key="anxiety",
        display_name="anxiety",
        phrases=[
            "anxiety", "anxious", "panic", "stress", "worried", "nervous",
            "panic attack", "restless",
        ],
        causes=[
            "Stress from work, relationships, or life changes",
            "Genetic predisposition or family history",
            "Traumatic experiences or PTSD",
            "Medical conditions or hormonal changes",
            "Caffeine or substance use",
            "Perfectionism or overthinking",
            "Social situations or phobias",
        ],
        medicines=[
            "Herbal supplements like chamomile or passionflower",
            "Magnesium supplements for relaxation",
            "L-theanine for calm focus",
            "Prescription medications (consult doctor)",
        ],
        precautions=[
            "Practice deep breathing exercises",
            "Try meditation or mindfulness techniques",
            "Regular exercise to reduce stress hormones",
            "Limit caffeine and alcohol",
            "Maintain social connections and support",
            "Get adequate sleep and nutrition",
        ],
        doctor_advice=(
            "severe anxiety affecting daily life, panic attacks, thoughts of "
            "self-harm, anxiety with depression, or if anxiety interferes with work "
            "or relationships"
        ),
    ),
    SymptomKnowledge(
        key="cold_flu",
        display_name="cold/flu",
        phrases=[
            "cold", "flu", "runny nose", "stuffy nose", "congestion",
            "sneezing", "blocked nose",
        ],
        causes=[
            "Viral infections (rhinovirus, influenza)",
            "Weakened immune system",
            "Exposure to infected individuals",
            "Seasonal changes and weather",
            "Stress or lack of sleep",
            "Poor nutrition or dehydration",
            "Crowded environments",
        ],
        medicines=[
            "Paracetamol or ibuprofen for aches and fever",
            "Decongestants for stuffy nose",
            "Cough suppressants or expectorants",
            "Throat lozenges for sore throat",
            "Saline nasal sprays for congestion",
        ],
        precautions=[
            "Get plenty of rest and sleep",
            "Stay hydrated with warm fluids",
            "Use a humidifier or breathe steam",
            "Gargle with salt water for sore throat",
            "Eat nutritious foods to support immunity",
            "Wash hands frequently to prevent spread",
        ],
        doctor_advice=(
            "high fever lasting more than 3 days, difficulty breathing, severe "
            "headache, chest pain, or if symptoms worsen after initial improvement"
        ),
    ),
]

MAX_CAUSES = 8
MAX_MEDICINES = 6
MAX_PRECAUTIONS = 8


def match_symptoms(text: str) -> list[SymptomKnowledge]:
    """입력 텍스트에 포함된 증상 카테고리를 테이블 순서로 반환

    Args:
        text: 사용자 입력 (대소문자 무관, 부분 문자열 검색)

    Returns:
        매칭된 증상 레코드 목록
    """
    lowered = text.lower()
    return [
        symptom
        for symptom in SYMPTOMS
        if any(phrase in lowered for phrase in symptom.phrases)
    ]
