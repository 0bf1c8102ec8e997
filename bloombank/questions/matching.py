"""
Matching question.

Left items are numbered, right items are lettered. correct_mapping[i] is the
index of the right item that matches left_items[i].
"""
from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from . import QuestionType, register
from .base import Question

MIN_PAIRS = 2
MAX_PAIRS = 6


def item_letter(index: int) -> str:
    """Letter shown for a right-hand item (0 -> 'A')."""
    return chr(ord("A") + index)


@register(QuestionType.MATCHING)
class MatchingQuestion(Question):
    """Question answered by pairing left items with right items."""

    question_type: Literal[QuestionType.MATCHING] = QuestionType.MATCHING
    left_items: list[str] = Field(min_length=MIN_PAIRS, max_length=MAX_PAIRS)
    right_items: list[str]
    correct_mapping: list[int]

    @model_validator(mode="after")
    def _check_mapping(self) -> MatchingQuestion:
        size = len(self.left_items)
        if len(self.right_items) != size:
            raise ValueError(
                f"right_items has {len(self.right_items)} entries, expected {size}"
            )
        if len(self.correct_mapping) != size:
            raise ValueError(
                f"correct_mapping has {len(self.correct_mapping)} entries, expected {size}"
            )
        for position, target in enumerate(self.correct_mapping):
            if not 0 <= target < len(self.right_items):
                raise ValueError(
                    f"correct_mapping[{position}] = {target} is out of range"
                )
        return self

    def pairs(self) -> list[tuple[str, str]]:
        """The correct (left, right) pairs in left-item order."""
        return [
            (left, self.right_items[target])
            for left, target in zip(self.left_items, self.correct_mapping)
        ]

    def _detail_lines(self) -> list[str]:
        lines = ["Left items:"]
        lines.extend(f"  {i}. {item}" for i, item in enumerate(self.left_items, 1))
        lines.append("Right items:")
        lines.extend(f"  {item_letter(i)}. {item}" for i, item in enumerate(self.right_items))
        lines.append("Correct matches:")
        lines.extend(
            f"  {i} -> {item_letter(target)}"
            for i, target in enumerate(self.correct_mapping, 1)
        )
        return lines
