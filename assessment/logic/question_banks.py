"""
Question Banks

Static, hand-curated question banks for each assessment section. The 0-based
position of a question inside its bank is the authoritative link between an
answer key (``q<index + 1>``) and the question's category.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    APTITUDE_CATEGORIES,
    ACADEMIC_INDEX_TABLE,
    CONTEXT_INDEX_TABLE,
)


class Question(BaseModel):
    """A single survey question with its finite option set."""
    model_config = ConfigDict(frozen=True)

    text: str
    options: Tuple[str, ...] = Field(default_factory=tuple)
    correct: Optional[str] = None
    category: str = ""

    def accepts(self, answer: str) -> bool:
        return answer in self.options


def _q(category: str, text: str, options: List[str], correct: Optional[str] = None) -> Question:
    return Question(text=text, options=tuple(options), correct=correct, category=category)


# =============================================================================
# APTITUDE (5 per category, 25 total)
# =============================================================================

APTITUDE_QUESTIONS: Dict[str, Tuple[Question, ...]] = {
    "numerical": (
        _q("numerical", "What is 15% of 200?", ["20", "25", "30", "35"], "30"),
        _q("numerical", "If 3 apples cost $1.50, how much do 9 apples cost?", ["$3.00", "$4.50", "$5.00", "$6.00"], "$4.50"),
        _q("numerical", "What is the next number in the sequence: 2, 4, 8, 16, ...?", ["24", "32", "28", "20"], "32"),
        _q("numerical", "A train travels 120 km in 2 hours. What is its speed?", ["50 km/h", "60 km/h", "70 km/h", "80 km/h"], "60 km/h"),
        _q("numerical", "If x + 5 = 12, what is x?", ["5", "6", "7", "8"], "7"),
    ),
    "verbal": (
        _q("verbal", "Choose the word that is most similar to 'Happy':", ["Sad", "Joyful", "Angry", "Tired"], "Joyful"),
        _q("verbal", "Complete the analogy: Book is to Library as Painting is to:", ["Museum", "School", "Hospital", "Market"], "Museum"),
        _q("verbal", "Which word does NOT belong: Apple, Banana, Carrot, Orange?", ["Apple", "Banana", "Carrot", "Orange"], "Carrot"),
        _q("verbal", "What is the opposite of 'Brave'?", ["Cowardly", "Strong", "Smart", "Fast"], "Cowardly"),
        _q("verbal", "Choose the correct spelling:", ["Recieve", "Receive", "Receeve", "Recive"], "Receive"),
    ),
    "spatial": (
        _q("spatial", "Which shape can be folded into a cube?", ["Net A", "Net B", "Net C", "Net D"], "Net A"),
        _q("spatial", "If you rotate a square 90 degrees clockwise, what happens?", ["It becomes a circle", "It stays the same", "It becomes a triangle", "It disappears"], "It stays the same"),
        _q("spatial", "Which of these is a 3D shape?", ["Square", "Cube", "Line", "Point"], "Cube"),
        _q("spatial", "How many faces does a tetrahedron have?", ["3", "4", "5", "6"], "4"),
        _q("spatial", "Which pattern completes the sequence?", ["Pattern A", "Pattern B", "Pattern C", "Pattern D"], "Pattern B"),
    ),
    "mechanical": (
        _q("mechanical", "What happens when you pull a spring?", ["It gets shorter", "It gets longer", "It breaks", "It stays the same"], "It gets longer"),
        _q("mechanical", "Which tool is used to measure length?", ["Thermometer", "Ruler", "Scale", "Compass"], "Ruler"),
        _q("mechanical", "What principle explains why boats float?", ["Gravity", "Buoyancy", "Magnetism", "Electricity"], "Buoyancy"),
        _q("mechanical", "How does a lever work?", ["By pushing", "By multiplying force", "By heating", "By cooling"], "By multiplying force"),
        _q("mechanical", "What is needed to create electricity in a circuit?", ["Water", "Battery", "Paper", "Wood"], "Battery"),
    ),
    "logical": (
        _q("logical", "If all roses are flowers, and some flowers are red, are all roses red?", ["Yes", "No", "Maybe", "Sometimes"], "No"),
        _q("logical", "Complete the pattern: 1, 3, 6, 10, 15, ...", ["20", "21", "22", "25"], "21"),
        _q("logical", "Which conclusion follows: All scientists are curious. John is curious. Therefore:", ["John is a scientist", "John might be a scientist", "John is not a scientist", "No conclusion"], "No conclusion"),
        _q("logical", "If A > B and B > C, then:", ["A > C", "A < C", "A = C", "Cannot determine"], "A > C"),
        _q("logical", "Which number is missing: 2, 5, 10, 17, 26, ?", ["35", "37", "39", "41"], "37"),
    ),
}


def flatten_aptitude_bank() -> Tuple[Question, ...]:
    """Return the aptitude questions in answer-key order (q1..q25)."""
    return tuple(
        question
        for category in APTITUDE_CATEGORIES
        for question in APTITUDE_QUESTIONS[category]
    )


APTITUDE_BANK: Tuple[Question, ...] = flatten_aptitude_bank()

# =============================================================================
# ACADEMIC PERFORMANCE
# =============================================================================

_PERCENT_BANDS = ["0-40%", "41-60%", "61-80%", "81-100%"]

ACADEMIC_BANK: Tuple[Question, ...] = tuple(
    _q(ACADEMIC_INDEX_TABLE[index], f"What is your average percentage in {label} (Grade 10)?", _PERCENT_BANDS)
    for index, label in enumerate(["Mathematics", "Science", "English", "Social Science", "Languages"])
)

# =============================================================================
# CONTEXTUAL INPUTS
# =============================================================================

CONTEXT_BANK: Tuple[Question, ...] = (
    _q(
        CONTEXT_INDEX_TABLE[0],
        "How aware are you of different career options and pathways?",
        ["Not aware at all", "Somewhat aware", "Moderately aware", "Very aware"],
    ),
    _q(
        CONTEXT_INDEX_TABLE[1],
        "How much access do you have to educational resources (books, internet, coaching)?",
        ["Limited access", "Moderate access", "Good access", "Excellent access"],
    ),
    _q(
        CONTEXT_INDEX_TABLE[2],
        "How supportive are your parents regarding your career choices?",
        ["Not supportive", "Somewhat supportive", "Moderately supportive", "Very supportive"],
    ),
)

# =============================================================================
# PERSONALITY
# =============================================================================

PERSONALITY_BANK: Tuple[Question, ...] = tuple(
    _q("personality", text, options)
    for text, options in [
        ("Which of the following sounds most like what you're about?", ["Values and wisdom", "Integrity and perfection", "Work hard play hard", "Stability and balance"]),
        ("What role do you play in your friends circle / family?", [
            "I am comfortable dealing with conflict and helping people find middle ground. My role is the mediator.",
            "I make sure everything and everyone is taken care of. My role is the protector.",
            "I help my family understand work ethic, hustle, and the value of having resources. My role is material support.",
            "I focus on nurturing and wanting a healthy and content family.",
        ]),
        ("What's most important to you in a partner?", ["Honest and smart", "Strong presence and power", "Fun and dynamic", "Reliable and respectful"]),
        ("What do you watch most often on TV?", [
            "Documentaries, biographies, human observation",
            "Entertainment, politics, current affairs",
            "Comedy, sport, drama, motivational stories",
            "Soap operas, reality TV, family, gossip, daytime shows",
        ]),
        ("Which best describes how you behave when under stress?", ["Calm, composed, balanced", "Irritated, frustrated, angry", "Moody, loud, restless", "Lazy, depressed, worried"]),
        ("What causes you the most pain?", ["Feeling like I don't live up to my own expectations", "The state of the world", "A sense of rejection", "Feeling disconnected from friends and family"]),
        ("What is your favorite way of working?", ["Alone, but with mentors and guides", "In a team as a leader", "Independently but with a strong network", "In a team as a member"]),
        ("How would your ideal self spend spare time?", ["Reading, in deep discussion, and reflecting", "Learning about issues and/or attending political events", "There's no such thing as spare time! Networking, connecting, working", "Enjoying time with family and friends"]),
        ("How would you describe yourself in three words?", ["Idealistic, introverted, insightful", "Driven, dedicated, determined", "Passionate, motivated, friendly", "Caring, loving, loyal"]),
        ("In what type of environment do you work best?", ["Remote, silent and still, natural", "A meeting room or gathering space", "Anywhere and everywhere (during my commute, in a coffee shop, in my bedroom)", "A space specific to my type of work: home, office, laboratory"]),
        ("What's your work style?", ["Slow and reflective", "Focused and organized", "Fast and rushed", "Specific and deliberate"]),
        ("How would you like to make a difference in the world?", ["Through spreading knowledge", "Through politics and activism", "Through business and/or leadership", "Through local community"]),
        ("How do you prepare for a vacation?", ["By picking my reading material", "By having a focused plan of key sites to visit", "With a list of the best hotels, clubs, and restaurants", "With an easygoing attitude"]),
        ("How do you deal with tough conversations?", ["Look for a compromise", "Fight for the most objective truth", "Fight to prove I'm right", "Avoid confrontation"]),
        ("If someone in your life is having a bad week, what do you do?", ["Give them advice and guidance", "Become protective and encourage them to improve", "Urge them to have a drink or take a walk with me", "Go to them and keep them company"]),
        ("How do you see rejection?", ["It's part of life", "It's a challenge I can rise to meet", "It's frustrating but I'll move on", "It's a real setback"]),
        ("At an event/party how do you spend your time?", ["I have a meaningful discussion with one or two people", "I usually talk with a group of people", "I somehow end up the center of attention", "I help with whatever needs to be done"]),
        ("How do you feel if you make a mistake?", ["I feel guilty and ashamed", "I have to tell everyone", "I want to hide it", "I reach out to someone supportive"]),
        ("What do you do when you have to make a big decision?", ["I reflect privately", "I ask my mentors and guides", "I weigh the pros and cons", "I talk to family and friends"]),
        ("Which best describes your daily routine?", ["It changes moment to moment", "It's very focused and organized", "I follow the best opportunity that comes up", "It's simple and scheduled"]),
    ]
)


def question_at(bank: Tuple[Question, ...], index: int) -> Optional[Question]:
    """Return the question at a 0-based index, or None when out of range."""
    if 0 <= index < len(bank):
        return bank[index]
    return None
