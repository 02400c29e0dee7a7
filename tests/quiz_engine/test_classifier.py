import pytest

from services.quiz_engine.classifier import (
    CLASSIFIERS,
    classify,
    letter_code_classifier,
    register_classifier,
)
from services.quiz_engine.definitions import MBTI_QUIZ_ID, UNCLASSIFIED

MBTI_TYPES = {"ENFP": "The Champion", "ISTJ": "The Inspector"}


def test_mbti_code_from_signs():
    scores = {"EI": 5, "SN": -3, "TF": 0, "JP": -1}
    assert classify(MBTI_QUIZ_ID, MBTI_TYPES, scores) == "ENFP"


def test_mbti_all_positive():
    scores = {"EI": 1, "SN": 0.5, "TF": 12, "JP": 40}
    assert classify(MBTI_QUIZ_ID, MBTI_TYPES, scores) == "ESTJ"


def test_zero_scores_resolve_to_second_letter():
    scores = {"EI": 0, "SN": 0, "TF": 0, "JP": 0}
    assert classify(MBTI_QUIZ_ID, MBTI_TYPES, scores) == "INFP"


def test_missing_dimensions_default_to_zero():
    assert classify(MBTI_QUIZ_ID, MBTI_TYPES, {"EI": 3}) == "ENFP"
    assert classify(MBTI_QUIZ_ID, MBTI_TYPES, {}) == "INFP"


def test_code_does_not_need_an_entry_in_the_type_table():
    # The table signals applicability only; the code is derived from scores alone.
    scores = {"EI": -1, "SN": 2, "TF": 2, "JP": -2}
    assert classify(MBTI_QUIZ_ID, MBTI_TYPES, scores) == "ISTP"


@pytest.mark.parametrize("quiz_id", ["big-five", "work-style", "", "MBTI-PERSONALITY"])
def test_unregistered_quiz_is_unclassified(quiz_id):
    scores = {"EI": 5, "SN": -3, "TF": 0, "JP": -1}
    assert classify(quiz_id, MBTI_TYPES, scores) == UNCLASSIFIED


@pytest.mark.parametrize("personality_types", [None, {}])
def test_no_type_table_is_unclassified(personality_types):
    assert classify(MBTI_QUIZ_ID, personality_types, {"EI": 5}) == UNCLASSIFIED


def test_letter_code_classifier_uses_given_order():
    scheme = letter_code_classifier([("b", "X", "Y"), ("a", "P", "Q")])
    assert scheme({"a": 1, "b": -1}) == "YP"


def test_register_classifier_adds_scheme():
    quiz_id = "test-color-quiz"

    @register_classifier(quiz_id)
    def warm_or_cool(scores):
        return "WARM" if scores.get("temp", 0) > 0 else "COOL"

    try:
        assert classify(quiz_id, {"WARM": "w", "COOL": "c"}, {"temp": 2}) == "WARM"
        assert classify(quiz_id, {"WARM": "w", "COOL": "c"}, {"temp": -2}) == "COOL"
    finally:
        CLASSIFIERS.pop(quiz_id, None)
