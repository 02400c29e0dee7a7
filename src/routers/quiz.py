import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from services.quiz_engine.engine import QuizEngine
from services.quiz_engine.models import CatalogError, QuizList, QuizNotFoundError
from services.quiz_engine.scorer import latest_answers
from src.core.config import quiz_settings
from src.schemas.quiz import QuizDetail, QuizResultResponse, SubmissionRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _load_quiz_engine() -> QuizEngine:
    return QuizEngine(data_dir=quiz_settings.data_dir)


def get_quiz_engine() -> QuizEngine:
    """Shared engine instance; a catalog that fails to load is retried on the next request."""
    try:
        return _load_quiz_engine()
    except (CatalogError, ValidationError) as e:
        logger.exception(f"Could not load quiz catalog from '{quiz_settings.data_dir}': {e}")
        raise HTTPException(status_code=500, detail="Quiz data could not be loaded")


@router.get("/quizzes", response_model=QuizList)
async def list_quizzes(engine: QuizEngine = Depends(get_quiz_engine)):
    """Lists every quiz in the catalog."""
    return QuizList(quizzes=engine.list_quizzes())


@router.get("/quizzes/{quiz_id}", response_model=QuizDetail)
async def get_quiz(quiz_id: str, engine: QuizEngine = Depends(get_quiz_engine)):
    """Returns a quiz's metadata together with its question set."""
    try:
        return QuizDetail(quiz=engine.get_quiz(quiz_id), questions=engine.get_questions(quiz_id))
    except QuizNotFoundError as e:
        logger.warning(f"Quiz lookup failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except (CatalogError, ValidationError) as e:
        logger.exception(f"Could not load questions for quiz '{quiz_id}': {e}")
        raise HTTPException(status_code=500, detail="Quiz data could not be loaded")


@router.post("/quizzes/{quiz_id}/results", response_model=QuizResultResponse)
async def submit_quiz(
    quiz_id: str,
    request: SubmissionRequest,
    engine: QuizEngine = Depends(get_quiz_engine),
):
    """
    Scores a completed quiz submission.

    Repeated answers for the same question are collapsed to the latest one
    before scoring; answers for unknown questions are ignored by the engine.
    """
    answers = latest_answers(request.answers)
    try:
        results = engine.generate_results(quiz_id, answers)
    except QuizNotFoundError as e:
        logger.warning(f"Submission for unknown quiz: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except (CatalogError, ValidationError) as e:
        logger.exception(f"Could not load questions for quiz '{quiz_id}': {e}")
        raise HTTPException(status_code=500, detail="Quiz data could not be loaded")

    result = results["result"]
    logger.info(
        f"Scored quiz '{quiz_id}' with {len(answers)} answers",
        extra={"quiz_id": quiz_id, "personality_type": result.personality_type},
    )
    return QuizResultResponse(**results)
