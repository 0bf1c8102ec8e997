"""
In-memory question repository.

Owns the question list, assigns ids and enforces duplicate prevention:
- a text may not be registered twice under the same year
- a text may not repeat the previous year's text (adjacent-year rule)
- a text may not repeat any live text at all (global exact match)

Two secondary indices back these checks and are kept consistent with the
question list after every operation, including rejected updates.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Iterator

from loguru import logger
from pydantic import ValidationError

from bloombank.errors import DuplicateQuestionError, InvalidQuestionError, QuestionNotFoundError
from bloombank.questions import BloomLevel, Question, get_model
from bloombank.questions.base import validation_message


class QuestionRepository:
    """
    Authoritative store for the questions of one session.

    Records are copied on the way in and out; callers never hold a
    reference to the stored objects.
    """

    def __init__(self):
        self._questions: list[Question] = []
        self._next_id = 1
        self._texts_by_year: dict[int, set[str]] = defaultdict(set)
        self._id_by_text: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.all_questions())

    # ========================================
    # Duplicate detection
    # ========================================

    def is_similar(self, text: str, year: int) -> bool:
        """Check whether (text, year) collides with a registered question."""
        if year > 0 and text in self._texts_by_year.get(year, ()):
            return True

        if year > 1 and text in self._texts_by_year.get(year - 1, ()):
            return True

        # Global exact-text match, regardless of year
        if text in self._id_by_text:
            return True

        return False

    def _register(self, text: str, year: int, question_id: int) -> None:
        if year > 0:
            self._texts_by_year[year].add(text)
        self._id_by_text[text] = question_id

    def _unregister(self, text: str, year: int) -> None:
        if year > 0:
            texts = self._texts_by_year.get(year)
            if texts is not None:
                texts.discard(text)
                if not texts:
                    del self._texts_by_year[year]
        self._id_by_text.pop(text, None)

    # ========================================
    # CRUD Operations
    # ========================================

    def insert(self, question: Question) -> int:
        """
        Store a new question.

        Args:
            question: Fully built question; its id is ignored

        Returns:
            The assigned id (>= 1)

        Raises:
            DuplicateQuestionError: Text collides under the duplicate rules
            InvalidQuestionError: Question fails re-validation
        """
        stored = self._stored_copy(question, self._next_id)

        text, year = stored.text, stored.year
        if self.is_similar(text, year):
            logger.info(f"Rejected insert of similar question (year={year}): {text!r}")
            raise DuplicateQuestionError(text, year)

        self._next_id += 1

        self._register(text, year, stored.id)
        self._questions.append(stored)
        logger.debug(f"Inserted question {stored.id} ({stored.question_type.value})")
        return stored.id

    def update(self, question_id: int, question: Question) -> Question:
        """
        Replace a stored question wholesale.

        The stored record keeps question_id whatever id the new value carries.
        On rejection the old text/year registration is restored.

        Returns:
            Copy of the stored record

        Raises:
            QuestionNotFoundError: No question with that id
            DuplicateQuestionError: New text collides with another question
            InvalidQuestionError: Question fails re-validation
        """
        position = self._position_of(question_id)
        if position is None:
            raise QuestionNotFoundError(question_id)

        stored = self._stored_copy(question, question_id)

        old = self._questions[position]
        old_text, old_year = old.text, old.year
        new_text, new_year = stored.text, stored.year

        self._unregister(old_text, old_year)

        if new_text != old_text and self.is_similar(new_text, new_year):
            self._register(old_text, old_year, question_id)
            logger.info(f"Rejected update of question {question_id}: similar to an existing question")
            raise DuplicateQuestionError(new_text, new_year)

        self._register(new_text, new_year, question_id)
        self._questions[position] = stored
        logger.debug(f"Updated question {question_id}")
        return stored.model_copy(deep=True)

    def delete(self, question_id: int) -> None:
        """
        Remove a question and free its text/year registration.

        Raises:
            QuestionNotFoundError: No question with that id
        """
        position = self._position_of(question_id)
        if position is None:
            raise QuestionNotFoundError(question_id)

        removed = self._questions.pop(position)
        self._unregister(removed.text, removed.year)
        logger.debug(f"Deleted question {question_id}")

    # ========================================
    # Queries
    # ========================================

    def find_by_id(self, question_id: int) -> Question | None:
        """Get a question by id."""
        position = self._position_of(question_id)
        if position is None:
            return None
        return self._questions[position].model_copy(deep=True)

    def find_by_bloom_level(self, level: BloomLevel | int) -> list[Question]:
        """Questions at the given Bloom level, in insertion order."""
        return [q.model_copy(deep=True) for q in self._questions if q.bloom_level == level]

    def find_by_year(self, year: int) -> list[Question]:
        """Questions stored with exactly this year (0 = questions without a year)."""
        return [q.model_copy(deep=True) for q in self._questions if q.year == year]

    def total_estimated_minutes(self) -> int:
        """Sum of estimated minutes over all live questions."""
        return sum(q.estimated_minutes for q in self._questions)

    def all_questions(self) -> list[Question]:
        """Every live question, in insertion order."""
        return [q.model_copy(deep=True) for q in self._questions]

    # ========================================
    # Helpers
    # ========================================

    def _position_of(self, question_id: int) -> int | None:
        for position, question in enumerate(self._questions):
            if question.id == question_id:
                return position
        return None

    @staticmethod
    def _stored_copy(question: Question, question_id: int) -> Question:
        """Re-validate as the registered variant and return a detached copy carrying question_id."""
        question_type = getattr(question, "question_type", None)
        model = get_model(question_type) if question_type is not None else None
        if model is None:
            raise InvalidQuestionError(f"Unknown question type: {question_type!r}")

        data = question.model_dump()
        data["id"] = question_id
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise InvalidQuestionError(validation_message(e)) from e
