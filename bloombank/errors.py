"""
Exception types raised by the question bank.

Every error here is recoverable: the console driver reports it and returns
to the main menu.
"""


class BloomBankError(Exception):
    """Base class for question bank errors."""
    pass


class DuplicateQuestionError(BloomBankError):
    """Raised when a question collides with an existing one (same text, same or previous year)."""

    def __init__(self, text: str, year: int):
        self.text = text
        self.year = year
        where = f"year {year}" if year > 0 else "no year"
        super().__init__(f"Question is similar to an existing one ({where}): {text!r}")


class QuestionNotFoundError(BloomBankError):
    """Raised when an operation references an id that is not in the bank."""

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"Question {question_id} not found")


class InvalidQuestionError(BloomBankError, ValueError):
    """Raised when a question's fields break a structural rule (index bounds, sizes)."""
    pass
