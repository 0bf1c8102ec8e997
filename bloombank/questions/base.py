"""
Common fields and Bloom level for all question variants.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from . import QuestionType


class BloomLevel(IntEnum):
    """Bloom's Taxonomy cognitive levels, ordered by demand."""
    REMEMBER = 1
    UNDERSTAND = 2
    APPLY = 3
    ANALYZE = 4
    EVALUATE = 5
    CREATE = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def description(self) -> str:
        return _BLOOM_DESCRIPTIONS[self]


_BLOOM_DESCRIPTIONS = {
    BloomLevel.REMEMBER: "Most basic level (recall information)",
    BloomLevel.UNDERSTAND: "Grasp the meaning of information",
    BloomLevel.APPLY: "Use knowledge in new situations",
    BloomLevel.ANALYZE: "Break information into parts",
    BloomLevel.EVALUATE: "Judge the value of information",
    BloomLevel.CREATE: "Highest level (produce something new)",
}


def validation_message(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


class Question(BaseModel):
    """
    Fields shared by every question variant.

    The id is assigned by the repository and frozen; anything built by a
    caller carries id 0 until it is inserted.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    question_type: QuestionType
    id: int = Field(default=0, ge=0, frozen=True)
    text: str
    bloom_level: BloomLevel
    estimated_minutes: int = Field(ge=1)
    year: int = Field(default=0, ge=0)

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question text must not be empty")
        return value

    @model_validator(mode="after")
    def _require_variant(self) -> Question:
        if type(self) is Question:
            raise ValueError("Question is abstract; build a variant with build_question()")
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        # Validate the whole record with the new value before touching it,
        # so a failed assignment leaves the model unchanged.
        if name in type(self).model_fields and name != "id":
            type(self).model_validate({**self.model_dump(), name: value})
        super().__setattr__(name, value)

    def variant_tag(self) -> QuestionType:
        return self.question_type

    def describe(self) -> str:
        """Multi-line, human-readable rendering of the question."""
        lines = [
            f"Question: {self.text}",
            f"Bloom level: {self.bloom_level.label}",
            f"Estimated time: {self.estimated_minutes} minutes",
        ]
        if self.year > 0:
            lines.append(f"Year: {self.year}")
        lines.append(f"Type: {self.question_type.label}")
        lines.extend(self._detail_lines())
        return "\n".join(lines)

    def _detail_lines(self) -> list[str]:
        return []
