from pathlib import Path

import pytest

from services.quiz_engine.models import (
    LikertQuestion,
    MultipleChoiceQuestion,
    Quiz,
    QuizOption,
    QuizScale,
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets" / "assessment-data"


@pytest.fixture
def assets_dir() -> Path:
    """Directory holding the bundled quiz catalog."""
    return ASSETS_DIR


@pytest.fixture
def two_scale_quiz() -> Quiz:
    """Minimal quiz with scales A and B and no personality types."""
    return Quiz(
        id="two-scale",
        title="Two Scale Quiz",
        scales=[
            QuizScale(id="A", name="Scale A", positive_label="Alpha", negative_label="Omega"),
            QuizScale(id="B", name="Scale B", positive_label="Bold", negative_label="Careful"),
        ],
    )


@pytest.fixture
def two_scale_questions():
    """One multiple-choice question and one Likert question over scales A and B."""
    return [
        MultipleChoiceQuestion(
            id=1,
            text="Pick one",
            options=[
                QuizOption(text="First", weights={"A": 10}),
                QuizOption(text="Second", weights={"B": 10}),
            ],
        ),
        LikertQuestion(id=2, text="I agree with this", weights={"A": 3, "B": -1}),
    ]


@pytest.fixture
def mbti_quiz() -> Quiz:
    return Quiz(
        id="mbti-personality",
        title="MBTI",
        scales=[
            QuizScale(id="EI", name="E/I", positive_label="Extraversion", negative_label="Introversion"),
            QuizScale(id="SN", name="S/N", positive_label="Sensing", negative_label="Intuition"),
            QuizScale(id="TF", name="T/F", positive_label="Thinking", negative_label="Feeling"),
            QuizScale(id="JP", name="J/P", positive_label="Judging", negative_label="Perceiving"),
        ],
        personality_types={"ENFP": "The Champion", "INFP": "The Healer", "ESTJ": "The Supervisor"},
    )


@pytest.fixture
def mbti_questions():
    """Two-option question per MBTI dimension, +/-10 per option."""
    return [
        MultipleChoiceQuestion(
            id=index,
            text=f"{scale_id} question",
            options=[
                QuizOption(text="positive", weights={scale_id: 10}),
                QuizOption(text="negative", weights={scale_id: -10}),
            ],
        )
        for index, scale_id in enumerate(["EI", "SN", "TF", "JP"], start=1)
    ]
