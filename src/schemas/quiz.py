from typing import List, Optional

from pydantic import BaseModel

from services.quiz_engine.models import Question, Quiz, QuizAnswer, QuizResult, ScaleBreakdown


class QuizDetail(BaseModel):
    quiz: Quiz
    questions: List[Question]


class SubmissionRequest(BaseModel):
    answers: List[QuizAnswer]


class QuizResultResponse(BaseModel):
    result: QuizResult
    breakdown: List[ScaleBreakdown]
    personality_type_description: Optional[str] = None
