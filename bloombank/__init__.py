"""
bloombank - in-memory question bank classified by Bloom's Taxonomy.

Three question shapes (multiple choice, true/false, matching), a repository
that rejects repeated questions across adjacent years, and a console menu.
"""

from bloombank.errors import (
    BloomBankError,
    DuplicateQuestionError,
    InvalidQuestionError,
    QuestionNotFoundError,
)
from bloombank.questions import (
    BloomLevel,
    MatchingQuestion,
    MultipleChoiceQuestion,
    Question,
    QuestionType,
    TrueFalseQuestion,
    build_question,
)
from bloombank.repository import QuestionRepository

__version__ = "1.0.0"

__all__ = [
    "BloomBankError",
    "BloomLevel",
    "DuplicateQuestionError",
    "InvalidQuestionError",
    "MatchingQuestion",
    "MultipleChoiceQuestion",
    "Question",
    "QuestionNotFoundError",
    "QuestionRepository",
    "QuestionType",
    "TrueFalseQuestion",
    "build_question",
]
