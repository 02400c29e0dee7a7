# services/quiz_engine/results_generator.py
# Builds the per-scale results breakdown shown after a quiz is completed.

import logging
from typing import Any, Dict, List, Optional

from .definitions import MAX_DISPLAY_SCORE
from .formatter import band, describe, format_signed
from .models import Quiz, QuizResult, ScaleBreakdown

logger = logging.getLogger(__name__)


def build_scale_breakdown(quiz: Quiz, result: QuizResult) -> List[ScaleBreakdown]:
    """One entry per declared scale, in the quiz's scale order."""
    breakdown = []
    for scale in quiz.scales:
        score = result.scores.get(scale.id, 0)
        magnitude = min(abs(score) / MAX_DISPLAY_SCORE * 100, 100)
        breakdown.append(ScaleBreakdown(
            scale_id=scale.id,
            name=scale.name,
            description=scale.description,
            score=score,
            display_score=format_signed(score),
            band=band(score).value,
            summary=describe(scale, score),
            magnitude_percent=round(magnitude, 1),
            leaning="positive" if score >= 0 else "negative",
        ))
    return breakdown


def describe_personality_type(quiz: Quiz, result: QuizResult) -> Optional[str]:
    if not quiz.personality_types or not result.personality_type:
        return None
    return quiz.personality_types.get(result.personality_type)


def generate_results(quiz: Quiz, result: QuizResult) -> Dict[str, Any]:
    """
    Combines a scored result with everything needed to present it.

    Returns:
        A dictionary with the original result, the per-scale breakdown and the
        personality type description (None when the quiz has no types or the
        code has no entry in the quiz's table).
    """
    type_description = describe_personality_type(quiz, result)
    if result.personality_type and type_description is None:
        logger.warning(f"Personality type '{result.personality_type}' has no description in quiz '{quiz.id}'")

    return {
        "result": result,
        "breakdown": build_scale_breakdown(quiz, result),
        "personality_type_description": type_description,
    }
