from datetime import datetime
from types import MappingProxyType
from typing import Annotated, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

Number = Union[int, float]


class QuizScale(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    positive_label: str
    negative_label: str


class QuizOption(BaseModel):
    text: str
    weights: Dict[str, Number] = Field(default_factory=dict)  # {scale_id: signed weight}


class LikertQuestion(BaseModel):
    """Direct-weighted question: weights scaled by the chosen intensity level."""
    id: int
    text: str
    type: Literal["likert-scale"] = "likert-scale"
    weights: Dict[str, Number] = Field(default_factory=dict)


class MultipleChoiceQuestion(BaseModel):
    """Choice-weighted question: each option carries its own weights."""
    id: int
    text: str
    type: Literal["multiple-choice"] = "multiple-choice"
    options: List[QuizOption] = Field(default_factory=list)


Question = Annotated[
    Union[LikertQuestion, MultipleChoiceQuestion],
    Field(discriminator="type"),
]


class Quiz(BaseModel):
    id: str
    title: str
    description: str = ""
    estimated_time: str = ""
    question_count: int = 0
    scales: List[QuizScale]
    personality_types: Optional[Dict[str, str]] = None  # {code: description}


class QuizData(BaseModel):
    id: str
    questions: List[Question]


class QuizList(BaseModel):
    quizzes: List[Quiz]


class QuizAnswer(BaseModel):
    question_id: int
    selected_option: int  # option index, or Likert level index


class QuizResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    quiz_id: str
    scores: Mapping[str, Number]
    personality_type: Optional[str] = None
    completed_at: datetime

    @field_validator('scores')
    @classmethod
    def freeze_scores(cls, value):
        # Read-only view over a private copy; the caller's dict stays detached.
        return MappingProxyType(dict(value))

    @field_serializer('scores')
    def serialize_scores(self, value):
        return dict(value)


class ScaleBreakdown(BaseModel):
    scale_id: str
    name: str
    description: str
    score: Number
    display_score: str
    band: str
    summary: str
    magnitude_percent: float
    leaning: Literal["positive", "negative"]


# Custom Error Classes
class CatalogError(ValueError):
    """Raised when a quiz catalog or question file cannot be read or parsed."""
    pass

class QuizNotFoundError(LookupError):
    """Raised when a quiz id is not present in the loaded catalog."""
    pass
