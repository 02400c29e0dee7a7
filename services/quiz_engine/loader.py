import logging
from typing import Any, Dict

import yaml

from services.quiz_engine.models import CatalogError, QuizData, QuizList

logger = logging.getLogger(__name__)


def load_quiz_list_data(data: Dict[str, Any]) -> QuizList:
    """Validates raw catalog data against the QuizList model."""
    return QuizList.model_validate(data)


def load_quiz_data(data: Dict[str, Any]) -> QuizData:
    """
    Validates a raw question set against the QuizData model.

    Duplicate question IDs are reported but not rejected; the last one wins
    when answers are scored.
    """
    quiz_data = QuizData.model_validate(data)

    seen_ids = set()
    for question in quiz_data.questions:
        if question.id in seen_ids:
            logger.warning(f"Duplicate question ID {question.id} in quiz '{quiz_data.id}'")
        seen_ids.add(question.id)

    return quiz_data


def _read_yaml(file_path: str) -> Dict[str, Any]:
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogError(f"File not found: {file_path}")
    except (UnicodeDecodeError, OSError) as e:
        raise CatalogError(f"Could not read {file_path}: {e}")
    except yaml.YAMLError as e:
        raise CatalogError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise CatalogError(f"YAML file is empty or invalid: {file_path}")
    return data


def load_quiz_list_from_file(file_path: str) -> QuizList:
    """Loads the quiz catalog (quizzes.yml) and validates it."""
    return load_quiz_list_data(_read_yaml(file_path))


def load_quiz_data_from_file(file_path: str) -> QuizData:
    """Loads one quiz's question set (<quiz_id>.yml) and validates it."""
    return load_quiz_data(_read_yaml(file_path))
