"""
Multiple-choice question.

An ordered list of options with one correct answer, stored as a 0-based index.
"""
from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from . import QuestionType, register
from .base import Question

MIN_OPTIONS = 2
MAX_OPTIONS = 6


@register(QuestionType.MULTIPLE_CHOICE)
class MultipleChoiceQuestion(Question):
    """Question answered by picking one of several options."""

    question_type: Literal[QuestionType.MULTIPLE_CHOICE] = QuestionType.MULTIPLE_CHOICE
    options: list[str] = Field(min_length=MIN_OPTIONS, max_length=MAX_OPTIONS)
    correct_option: int

    @model_validator(mode="after")
    def _check_correct_option(self) -> MultipleChoiceQuestion:
        if not 0 <= self.correct_option < len(self.options):
            raise ValueError(
                f"correct_option {self.correct_option} is out of range for {len(self.options)} options"
            )
        return self

    def _detail_lines(self) -> list[str]:
        lines = ["Options:"]
        lines.extend(f"  {i}. {option}" for i, option in enumerate(self.options, 1))
        lines.append(f"Correct option: {self.correct_option + 1}")
        return lines
