# services/quiz_engine/classifier.py
# Derives a categorical personality type code from accumulated scale scores.

import logging
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from .definitions import MBTI_DIMENSIONS, MBTI_QUIZ_ID, UNCLASSIFIED
from .models import Number

logger = logging.getLogger(__name__)

Classifier = Callable[[Mapping[str, Number]], str]

# quiz_id -> classification function
CLASSIFIERS: Dict[str, Classifier] = {}


def register_classifier(quiz_id: str) -> Callable[[Classifier], Classifier]:
    """Registers the decorated function as the classification scheme for quiz_id."""
    def decorator(func: Classifier) -> Classifier:
        CLASSIFIERS[quiz_id] = func
        return func
    return decorator


def letter_code_classifier(dimensions: Sequence[Tuple[str, str, str]]) -> Classifier:
    """
    Builds a classifier emitting one letter per dimension, in the given order.

    Each dimension is (scale_id, positive_letter, negative_letter). A strictly
    positive score selects the positive letter; zero and negative scores both
    select the negative letter. Missing scales count as 0.
    """
    def classify_scores(scores: Mapping[str, Number]) -> str:
        return "".join(
            positive if (scores.get(scale_id) or 0) > 0 else negative
            for scale_id, positive, negative in dimensions
        )
    return classify_scores


register_classifier(MBTI_QUIZ_ID)(letter_code_classifier(MBTI_DIMENSIONS))


def classify(
    quiz_id: str,
    personality_types: Optional[Mapping[str, str]],
    scores: Mapping[str, Number],
) -> str:
    """
    Returns the category code for a quiz's scores, or UNCLASSIFIED when the
    quiz declares no personality types or has no registered scheme.
    """
    if not personality_types:
        return UNCLASSIFIED

    scheme = CLASSIFIERS.get(quiz_id)
    if scheme is None:
        logger.debug(f"No classification scheme registered for quiz '{quiz_id}'")
        return UNCLASSIFIED

    return scheme(scores)
