"""
True/False question.

A statement the student marks as true or false.
"""
from __future__ import annotations

from typing import Literal

from . import QuestionType, register
from .base import Question


@register(QuestionType.TRUE_FALSE)
class TrueFalseQuestion(Question):
    """Binary choice question."""

    question_type: Literal[QuestionType.TRUE_FALSE] = QuestionType.TRUE_FALSE
    correct_answer: bool

    def _detail_lines(self) -> list[str]:
        return [f"Correct answer: {'True' if self.correct_answer else 'False'}"]
