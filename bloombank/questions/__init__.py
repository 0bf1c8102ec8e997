"""
Question variants for the bloombank question bank.

Each variant (multiple choice, true/false, matching) has its own module with
a pydantic model that carries:
- a literal question_type tag used for dispatch
- its own answer fields and their index invariants
- _detail_lines(): the variant-specific part of describe()
"""

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from bloombank.errors import InvalidQuestionError

if TYPE_CHECKING:
    from .base import Question


class QuestionType(str, Enum):
    """Supported question shapes."""
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    MATCHING = "matching"

    @property
    def label(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    QuestionType.MULTIPLE_CHOICE: "Multiple Choice",
    QuestionType.TRUE_FALSE: "True/False",
    QuestionType.MATCHING: "Matching",
}


# Model registry - populated by @register decorator
QUESTION_MODELS: dict[QuestionType, "type[Question]"] = {}


def register(question_type: QuestionType):
    """Decorator to register a question model for its tag."""
    def decorator(cls):
        QUESTION_MODELS[question_type] = cls
        return cls
    return decorator


def get_model(question_type: "str | QuestionType") -> "type[Question] | None":
    """Get the model class for a question type."""
    if isinstance(question_type, str) and not isinstance(question_type, QuestionType):
        try:
            question_type = QuestionType(question_type.lower())
        except ValueError:
            return None
    return QUESTION_MODELS.get(question_type)


def build_question(question_type: "str | QuestionType", **fields: Any) -> "Question":
    """
    Construct a question of the given type.

    Args:
        question_type: Variant tag (enum member or its string value)
        **fields: Common and variant-specific fields

    Returns:
        A validated question with id 0

    Raises:
        InvalidQuestionError: Unknown type or a field breaks a rule
    """
    model = get_model(question_type)
    if model is None:
        raise InvalidQuestionError(f"Unknown question type: {question_type!r}")
    try:
        return model(**fields)
    except ValidationError as e:
        raise InvalidQuestionError(validation_message(e)) from e


# Import models to trigger registration
from .base import BloomLevel, Question, validation_message
from . import multiple_choice
from . import true_false
from . import matching
from .matching import MatchingQuestion
from .multiple_choice import MultipleChoiceQuestion
from .true_false import TrueFalseQuestion

__all__ = [
    "BloomLevel",
    "MatchingQuestion",
    "MultipleChoiceQuestion",
    "QUESTION_MODELS",
    "Question",
    "QuestionType",
    "TrueFalseQuestion",
    "build_question",
    "get_model",
    "register",
]
