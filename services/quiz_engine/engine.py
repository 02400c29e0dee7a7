import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .loader import load_quiz_data_from_file, load_quiz_list_from_file
from .models import Question, Quiz, QuizAnswer, QuizNotFoundError, QuizResult
from .results_generator import generate_results
from .scorer import calculate_quiz_scores

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "quizzes.yml"


class QuizEngine:
    """
    Holds a loaded quiz catalog and scores answers against it.
    """
    def __init__(self, data_dir: str = "assets/assessment-data"):
        """
        Loads the quiz catalog from data_dir.

        Args:
            data_dir: Directory holding quizzes.yml and one <quiz_id>.yml per quiz.
        """
        self.data_dir = Path(data_dir)
        catalog = load_quiz_list_from_file(str(self.data_dir / CATALOG_FILENAME))
        self.quizzes: Dict[str, Quiz] = {quiz.id: quiz for quiz in catalog.quizzes}
        self._questions: Dict[str, List[Question]] = {}
        logger.info(f"Loaded {len(self.quizzes)} quizzes from {self.data_dir}")

    def list_quizzes(self) -> List[Quiz]:
        return list(self.quizzes.values())

    def get_quiz(self, quiz_id: str) -> Quiz:
        quiz = self.quizzes.get(quiz_id)
        if quiz is None:
            raise QuizNotFoundError(f"Quiz not found: {quiz_id}")
        return quiz

    def get_questions(self, quiz_id: str) -> List[Question]:
        """Returns the question set for a catalog quiz, loading it on first use."""
        quiz = self.get_quiz(quiz_id)
        if quiz.id not in self._questions:
            quiz_data = load_quiz_data_from_file(str(self.data_dir / f"{quiz.id}.yml"))
            self._questions[quiz.id] = quiz_data.questions
        return self._questions[quiz.id]

    def calculate_scores(self, quiz_id: str, answers: Iterable[QuizAnswer]) -> QuizResult:
        quiz = self.get_quiz(quiz_id)
        return calculate_quiz_scores(quiz, self.get_questions(quiz_id), answers)

    def generate_results(self, quiz_id: str, answers: Iterable[QuizAnswer]) -> Dict[str, Any]:
        """Scores answers and returns the result with its per-scale breakdown."""
        result = self.calculate_scores(quiz_id, answers)
        return generate_results(self.get_quiz(quiz_id), result)
