# services/quiz_engine/definitions.py
# Fixed scoring rubric constants shared by the scorer, classifier and formatter.

from enum import Enum
from typing import Tuple

# --- Question kinds ---

LIKERT_SCALE = "likert-scale"
MULTIPLE_CHOICE = "multiple-choice"

# --- Likert intensity levels ---
# selected_option indexes into this scale; each question weight is multiplied
# by the level's multiplier.

LIKERT_LEVELS: Tuple[Tuple[str, int], ...] = (
    ("Strongly disagree", -2),
    ("Disagree", -1),
    ("Neutral", 0),
    ("Agree", 1),
    ("Strongly agree", 2),
)

# --- Strength bands (inclusive lower bounds on |score|) ---

STRONG_THRESHOLD = 20
MODERATE_THRESHOLD = 10
SLIGHT_THRESHOLD = 5


class Band(str, Enum):
    STRONG = "Strong"
    MODERATE = "Moderate"
    SLIGHT = "Slight"
    BALANCED = "Balanced"


# Approximate maximum |score| used to size the results bar.
MAX_DISPLAY_SCORE = 40

# --- Personality type classification ---

UNCLASSIFIED = "Unknown"

MBTI_QUIZ_ID = "mbti-personality"

# (scale_id, letter when score > 0, letter when score <= 0), in code order
MBTI_DIMENSIONS: Tuple[Tuple[str, str, str], ...] = (
    ("EI", "E", "I"),  # Extraversion vs Introversion
    ("SN", "S", "N"),  # Sensing vs Intuition
    ("TF", "T", "F"),  # Thinking vs Feeling
    ("JP", "J", "P"),  # Judging vs Perceiving
)
