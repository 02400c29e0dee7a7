# Scoring and result-derivation engine for personality quizzes.

from .classifier import classify, register_classifier
from .engine import QuizEngine
from .formatter import band, describe, format_signed, get_scale_description
from .scorer import accumulate_scores, calculate_quiz_scores, latest_answers

__all__ = [
    "QuizEngine",
    "accumulate_scores",
    "calculate_quiz_scores",
    "latest_answers",
    "classify",
    "register_classifier",
    "band",
    "describe",
    "format_signed",
    "get_scale_description",
]
