# services/quiz_engine/scorer.py
# Accumulates per-scale scores from quiz answers and builds the final result.

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from .classifier import classify
from .definitions import LIKERT_LEVELS, UNCLASSIFIED
from .models import (
    LikertQuestion,
    MultipleChoiceQuestion,
    Number,
    Question,
    Quiz,
    QuizAnswer,
    QuizResult,
)

logger = logging.getLogger(__name__)


def _resolve_weights(question: Question, selected_option: int) -> Optional[Dict[str, Number]]:
    """Returns the weight mapping an answer contributes, or None if it contributes nothing."""
    if isinstance(question, MultipleChoiceQuestion):
        if not 0 <= selected_option < len(question.options):
            return None
        return question.options[selected_option].weights or None

    if isinstance(question, LikertQuestion):
        if not 0 <= selected_option < len(LIKERT_LEVELS):
            return None
        _, multiplier = LIKERT_LEVELS[selected_option]
        return {scale_id: weight * multiplier for scale_id, weight in question.weights.items()} or None

    logger.warning(f"Unsupported question kind {type(question).__name__} for question {getattr(question, 'id', '?')}")
    return None


def accumulate_scores(
    scale_ids: Iterable[str],
    questions: Sequence[Question],
    answers: Iterable[QuizAnswer],
) -> Dict[str, Number]:
    """
    Folds answers into a score for every declared scale.

    Answers pointing at unknown questions or out-of-range options are skipped,
    as are weights for scales the quiz does not declare.
    """
    scores: Dict[str, Number] = {scale_id: 0 for scale_id in scale_ids}
    question_map = {q.id: q for q in questions}

    for answer in answers:
        question = question_map.get(answer.question_id)
        if question is None:
            logger.debug(f"Skipping answer for unknown question {answer.question_id}")
            continue

        weights = _resolve_weights(question, answer.selected_option)
        if not weights:
            logger.debug(f"No weights for question {answer.question_id} option {answer.selected_option}")
            continue

        for scale_id, weight in weights.items():
            if scale_id in scores:
                scores[scale_id] += weight

    return scores


def latest_answers(answers: Iterable[QuizAnswer]) -> List[QuizAnswer]:
    """Keeps one answer per question: the latest selection, at the first answer's position."""
    by_question: Dict[int, QuizAnswer] = {}
    for answer in answers:
        by_question[answer.question_id] = answer
    return list(by_question.values())


def calculate_quiz_scores(
    quiz: Quiz,
    questions: Sequence[Question],
    answers: Iterable[QuizAnswer],
) -> QuizResult:
    """Scores a completed quiz and derives its personality type when the quiz defines one."""
    scores = accumulate_scores((scale.id for scale in quiz.scales), questions, answers)

    personality_type = None
    if quiz.personality_types:
        code = classify(quiz.id, quiz.personality_types, scores)
        if code != UNCLASSIFIED:
            personality_type = code

    logger.debug(f"Calculated scores for quiz '{quiz.id}': {scores} (type={personality_type})")
    return QuizResult(
        quiz_id=quiz.id,
        scores=scores,
        personality_type=personality_type,
        completed_at=datetime.now(timezone.utc),
    )
