"""
Aggregate views over a set of questions.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from bloombank.questions import BloomLevel, Question, QuestionType


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_duration(minutes: int) -> str:
    """
    Render a total estimated time.

    Examples:
        45  -> "45 minutes"
        60  -> "60 minutes (1 hour)"
        135 -> "135 minutes (2 hours and 15 minutes)"
    """
    text = f"{minutes} minutes"
    if minutes >= 60:
        hours, rest = divmod(minutes, 60)
        breakdown = _plural(hours, "hour")
        if rest > 0:
            breakdown += f" and {_plural(rest, 'minute')}"
        text += f" ({breakdown})"
    return text


def count_by_level(questions: Iterable[Question]) -> dict[BloomLevel, int]:
    """Question count per Bloom level, every level present, in level order."""
    counts = Counter(q.bloom_level for q in questions)
    return {level: counts.get(level, 0) for level in BloomLevel}


def count_by_type(questions: Iterable[Question]) -> dict[QuestionType, int]:
    """Question count per question type, every type present."""
    counts = Counter(q.question_type for q in questions)
    return {qtype: counts.get(qtype, 0) for qtype in QuestionType}


def minutes_by_level(questions: Iterable[Question]) -> dict[BloomLevel, int]:
    """Estimated minutes per Bloom level, every level present."""
    totals: dict[BloomLevel, int] = {level: 0 for level in BloomLevel}
    for q in questions:
        totals[q.bloom_level] += q.estimated_minutes
    return totals
