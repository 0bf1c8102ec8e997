"""
Interactive menu for authoring and browsing questions.

A blocking, numbered text menu over a QuestionRepository. Every prompt
re-asks until it gets valid input; repository errors are reported and the
menu carries on. End of input or Ctrl-C leaves the loop.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from loguru import logger
from rich.console import Console
from rich.markup import escape

from bloombank.config import Settings, get_settings
from bloombank.display import (
    bloom_levels_table,
    breakdown_table,
    question_panel,
    question_table,
    screen_header,
)
from bloombank.errors import DuplicateQuestionError, InvalidQuestionError, QuestionNotFoundError
from bloombank.questions import BloomLevel, Question, QuestionType, build_question
from bloombank.questions.matching import item_letter
from bloombank.reporting import count_by_level, format_duration, minutes_by_level
from bloombank.repository import QuestionRepository

MENU_TITLE = "Bloom's Taxonomy Question Bank"

MENU_OPTIONS = [
    (1, "Create a new question"),
    (2, "Update an existing question"),
    (3, "Delete a question"),
    (4, "Search questions by Bloom level"),
    (5, "Search questions by year"),
    (6, "Show all questions"),
    (7, "Show estimated test completion time"),
    (0, "Exit"),
]

GOODBYE = "Thank you for using the Bloom's Taxonomy Question Bank!"


class QuestionMenu:
    """Console driver for a question repository."""

    def __init__(
        self,
        repository: QuestionRepository | None = None,
        settings: Settings | None = None,
        console: Console | None = None,
        stream: TextIO | None = None,
    ):
        self.repository = repository if repository is not None else QuestionRepository()
        self.settings = settings or get_settings()
        self.console = console or Console()
        self.stream = stream
        self._actions: dict[int, Callable[[], None]] = {
            1: self.create_question,
            2: self.update_question,
            3: self.delete_question,
            4: self.search_by_level,
            5: self.search_by_year,
            6: self.show_all,
            7: self.show_total_time,
        }

    # =========================================================================
    # Main loop
    # =========================================================================

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        try:
            while True:
                self._show_menu()
                choice = self._ask_int("Enter your choice: ", 0, len(self._actions))
                if choice == 0:
                    break
                self._actions[choice]()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving menu")
            self.console.print()

        self.console.print(f"[bold cyan]{GOODBYE}[/bold cyan]")

    def _show_menu(self) -> None:
        self._begin(MENU_TITLE)
        for number, label in MENU_OPTIONS:
            self.console.print(f"  [cyan]{number}.[/cyan] {label}")

    # =========================================================================
    # Actions
    # =========================================================================

    def create_question(self) -> None:
        self._begin("Create a New Question")
        self.console.print("Select the question type:")
        types = list(QuestionType)
        for number, qtype in enumerate(types, 1):
            self.console.print(f"  [cyan]{number}.[/cyan] {qtype.label}")
        qtype = types[self._ask_int(f"Enter the type (1-{len(types)}): ", 1, len(types)) - 1]

        fields: dict[str, Any] = {
            "text": self._ask_text("Enter the question text: "),
            "year": self._ask_int(
                "Enter the question year (0 if not applicable): ", 0, self.settings.max_year
            ),
        }
        self.console.print(bloom_levels_table())
        fields["bloom_level"] = BloomLevel(self._ask_int("Enter the Bloom level (1-6): ", 1, 6))
        fields["estimated_minutes"] = self._ask_int(
            f"Enter the estimated time to answer (minutes, "
            f"{self.settings.min_minutes}-{self.settings.max_minutes}): ",
            self.settings.min_minutes,
            self.settings.max_minutes,
        )
        fields.update(self._ask_variant_fields(qtype))

        try:
            question_id = self.repository.insert(build_question(qtype, **fields))
        except InvalidQuestionError as e:
            self._error(f"Invalid question: {e}")
        except DuplicateQuestionError:
            self._error("The question is similar to an existing one in the same or previous year.")
        else:
            self.console.print(f"[green]Question added successfully with ID: {question_id}[/green]")

        self._pause()

    def update_question(self) -> None:
        self._begin("Update a Question")
        if not self._list_questions("No questions available to update."):
            self._pause()
            return

        question_id = self._ask_int("Enter the ID of the question to update: ", 0, sys.maxsize)
        current = self.repository.find_by_id(question_id)
        if current is None:
            self.console.print("[yellow]Question not found.[/yellow]")
            self._pause()
            return

        self.console.print("Current question details:")
        self.console.print(question_panel(current))

        fields = current.model_dump(exclude={"id", "question_type"})
        fields["text"] = self._ask_text(
            "Enter the new question text (leave blank to keep the current one): ",
            default=current.text,
        )

        year_label = str(current.year) if current.year > 0 else "no year"
        year = self._ask_int(f"Enter the new year (0 to keep {year_label}): ", 0, self.settings.max_year)
        if year > 0:
            fields["year"] = year

        self.console.print(bloom_levels_table(with_descriptions=False))
        level = self._ask_optional_int(
            "Enter the new Bloom level (1-6, 0 to keep the current one): ", 1, 6
        )
        if level is not None:
            fields["bloom_level"] = BloomLevel(level)

        minutes = self._ask_optional_int(
            "Enter the new estimated time (minutes, 0 to keep the current one): ",
            self.settings.min_minutes,
            self.settings.max_minutes,
        )
        if minutes is not None:
            fields["estimated_minutes"] = minutes

        if self._ask_yes_no(f"Update {_VARIANT_PARTS[current.question_type]}?"):
            fields.update(self._ask_variant_fields(current.question_type, current))

        try:
            self.repository.update(question_id, build_question(current.question_type, **fields))
        except InvalidQuestionError as e:
            self._error(f"Invalid question: {e}")
        except DuplicateQuestionError:
            self._error("Could not update the question. It may be similar to an existing one.")
        except QuestionNotFoundError:
            self.console.print("[yellow]Question not found.[/yellow]")
        else:
            self.console.print("[green]Question updated successfully.[/green]")

        self._pause()

    def delete_question(self) -> None:
        self._begin("Delete a Question")
        if not self._list_questions("No questions available to delete."):
            self._pause()
            return

        question_id = self._ask_int("Enter the ID of the question to delete: ", 0, sys.maxsize)
        try:
            self.repository.delete(question_id)
        except QuestionNotFoundError:
            self.console.print("[yellow]Question not found.[/yellow]")
        else:
            self.console.print("[green]Question deleted successfully.[/green]")

        self._pause()

    def search_by_level(self) -> None:
        self._begin("Search Questions by Bloom Level")
        self.console.print(bloom_levels_table(with_descriptions=False))
        level = BloomLevel(self._ask_int("Enter the Bloom level to search for (1-6): ", 1, 6))

        self._print_results(
            self.repository.find_by_bloom_level(level),
            f"Bloom level: {level.label}",
        )
        self._pause()

    def search_by_year(self) -> None:
        self._begin("Search Questions by Year")
        year = self._ask_int("Enter the year to search for: ", 0, self.settings.max_year)

        self._print_results(self.repository.find_by_year(year), f"year: {year}")
        self._pause()

    def show_all(self) -> None:
        self._begin("All Questions")
        questions = self.repository.all_questions()
        if not questions:
            self.console.print("No questions available.")
        else:
            self.console.print(f"Total questions: {len(questions)}\n")
            for q in questions:
                self.console.print(question_panel(q))
        self._pause()

    def show_total_time(self) -> None:
        self._begin("Estimated Test Completion Time")
        total = self.repository.total_estimated_minutes()
        self.console.print(f"Total estimated time: [bold]{format_duration(total)}[/bold]")

        questions = self.repository.all_questions()
        if questions:
            self.console.print(breakdown_table(count_by_level(questions), minutes_by_level(questions)))
        self._pause()

    # =========================================================================
    # Variant fields
    # =========================================================================

    def _ask_variant_fields(
        self, qtype: QuestionType, current: Question | None = None
    ) -> dict[str, Any]:
        """Prompt for the answer fields of one variant, offering current values as defaults."""
        low, high = self.settings.min_choices, self.settings.max_choices

        if qtype == QuestionType.MULTIPLE_CHOICE:
            count = self._ask_int(f"Enter the number of options ({low}-{high}): ", low, high)
            previous = getattr(current, "options", [])
            options = [
                self._ask_text(f"Enter option {i + 1}: ", default=_at(previous, i))
                for i in range(count)
            ]
            correct = self._ask_int(f"Enter the correct option (1-{count}): ", 1, count) - 1
            return {"options": options, "correct_option": correct}

        if qtype == QuestionType.TRUE_FALSE:
            answer = self._ask_int("Enter the correct answer (1 for True, 0 for False): ", 0, 1)
            return {"correct_answer": answer == 1}

        count = self._ask_int(f"Enter the number of pairs to match ({low}-{high}): ", low, high)
        previous_left = getattr(current, "left_items", [])
        previous_right = getattr(current, "right_items", [])
        left = [
            self._ask_text(f"Enter left item {i + 1}: ", default=_at(previous_left, i))
            for i in range(count)
        ]
        right = [
            self._ask_text(
                f"Enter right item {item_letter(i)}: ", default=_at(previous_right, i)
            )
            for i in range(count)
        ]
        mapping = [
            self._ask_int(
                f"Enter the right item that matches left item {i + 1} (1-{count}): ", 1, count
            ) - 1
            for i in range(count)
        ]
        return {"left_items": left, "right_items": right, "correct_mapping": mapping}

    # =========================================================================
    # Input helpers
    # =========================================================================

    def _read(self, message: str) -> str:
        raw = self.console.input(message, markup=False, stream=self.stream)
        if self.stream is not None and raw == "":
            raise EOFError
        return raw.rstrip("\r\n")

    def _ask_int(self, message: str, low: int, high: int) -> int:
        while True:
            raw = self._read(message).strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and low <= value <= high:
                return value
            self.console.print(
                f"[yellow]Invalid input. Please enter a number between {low} and {high}.[/yellow]"
            )

    def _ask_optional_int(self, message: str, low: int, high: int) -> int | None:
        """Like _ask_int, but 0 means keep the current value (returns None)."""
        while True:
            value = self._ask_int(message, 0, high)
            if value == 0:
                return None
            if value >= low:
                return value
            self.console.print(
                f"[yellow]Invalid input. Please enter 0 or a number between {low} and {high}.[/yellow]"
            )

    def _ask_text(self, message: str, default: str | None = None) -> str:
        if default:
            message = f"{message.rstrip(': ')} [{default}]: "
        while True:
            raw = self._read(message)
            if raw.strip():
                return raw
            if default:
                return default
            self.console.print("[yellow]Please enter some text.[/yellow]")

    def _ask_yes_no(self, question: str) -> bool:
        return self._ask_int(f"{question} (1 for Yes, 0 for No): ", 0, 1) == 1

    # =========================================================================
    # Output helpers
    # =========================================================================

    def _begin(self, title: str) -> None:
        if self.settings.clear_screen:
            self.console.clear()
        self.console.print(screen_header(title))

    def _pause(self) -> None:
        if self.settings.pause_after_action:
            self._read("\nPress Enter to continue...")

    def _error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def _list_questions(self, empty_message: str) -> bool:
        questions = self.repository.all_questions()
        if not questions:
            self.console.print(empty_message)
            return False
        self.console.print("Available questions:")
        self.console.print(question_table(questions, self.settings.preview_length))
        return True

    def _print_results(self, questions: list[Question], criterion: str) -> None:
        if not questions:
            self.console.print(f"No questions found for {escape(criterion)}")
            return
        self.console.print(f"Found {len(questions)} question(s) for {escape(criterion)}\n")
        for q in questions:
            self.console.print(question_panel(q))


_VARIANT_PARTS = {
    QuestionType.MULTIPLE_CHOICE: "options",
    QuestionType.TRUE_FALSE: "correct answer",
    QuestionType.MATCHING: "matching items",
}


def _at(items: list[str], index: int) -> str | None:
    return items[index] if index < len(items) else None
