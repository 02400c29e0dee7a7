# services/quiz_engine/formatter.py
# Human-readable strength and direction text for signed scale scores.

from typing import Optional

from .definitions import Band, MODERATE_THRESHOLD, SLIGHT_THRESHOLD, STRONG_THRESHOLD
from .models import Number, Quiz, QuizScale


def band(absolute_score: Number) -> Band:
    """Maps a score magnitude onto its strength band."""
    magnitude = abs(absolute_score)
    if magnitude >= STRONG_THRESHOLD:
        return Band.STRONG
    if magnitude >= MODERATE_THRESHOLD:
        return Band.MODERATE
    if magnitude >= SLIGHT_THRESHOLD:
        return Band.SLIGHT
    return Band.BALANCED


def describe(scale: Optional[QuizScale], score: Number) -> str:
    if scale is None:
        return ""

    strength = band(score)
    if strength is Band.BALANCED:
        return f"Balanced between {scale.positive_label} and {scale.negative_label}"

    tendency = scale.positive_label if score > 0 else scale.negative_label
    return f"{strength.value} preference for {tendency}"


def get_scale_description(scale_id: str, score: Number, quiz: Quiz) -> str:
    scale = next((s for s in quiz.scales if s.id == scale_id), None)
    return describe(scale, score)


def _format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_signed(score: Number) -> str:
    """Renders a score with an explicit '+' for positive values ('0' stays '0')."""
    if score > 0:
        return f"+{_format_number(score)}"
    return _format_number(score)
