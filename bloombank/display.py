"""
Rich renderables for the question bank console.

All functions return renderables; printing is left to the caller's Console.
"""
from __future__ import annotations

from typing import Iterable

from rich import box
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from bloombank.questions import BloomLevel, Question, QuestionType

# =============================================================================
# THEME
# =============================================================================

THEME = {
    "primary": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "dim": "grey50",
}

STYLES = {
    "primary": Style(color=THEME["primary"], bold=True),
    "success": Style(color=THEME["success"], bold=True),
    "warning": Style(color=THEME["warning"], bold=True),
    "error": Style(color=THEME["error"], bold=True),
    "dim": Style(color=THEME["dim"]),
}

TYPE_COLORS = {
    QuestionType.MULTIPLE_CHOICE: "magenta",
    QuestionType.TRUE_FALSE: "cyan",
    QuestionType.MATCHING: "blue",
}


def preview(text: str, length: int) -> str:
    """Truncate text to length characters, marking the cut with '...'."""
    if len(text) > length:
        return text[:length] + "..."
    return text


def screen_header(title: str) -> Panel:
    """Title banner shown at the top of each screen."""
    return Panel(
        Text(title, style=STYLES["primary"]),
        border_style=Style(color=THEME["primary"]),
        box=box.DOUBLE,
        padding=(0, 1),
    )


def question_panel(question: Question) -> Panel:
    """
    Full view of one question.

    Args:
        question: Any question variant

    Returns:
        Panel holding describe() output, titled with id and type
    """
    color = TYPE_COLORS.get(question.question_type, THEME["primary"])
    header = Text()
    header.append(f"#{question.id} ", style=STYLES["dim"])
    header.append(question.question_type.label.upper(), style=Style(color=color, bold=True))

    return Panel(
        Text(question.describe()),
        title=header,
        title_align="left",
        border_style=Style(color=color),
        box=box.ROUNDED,
        padding=(0, 1),
    )


def question_table(questions: Iterable[Question], preview_length: int = 50) -> Table:
    """Compact listing used when picking a question by id."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Question")
    table.add_column("Type")
    table.add_column("Year", justify="right")

    for q in questions:
        table.add_row(
            str(q.id),
            Text(preview(q.text, preview_length)),
            q.question_type.label,
            str(q.year) if q.year > 0 else "",
        )
    return table


def bloom_levels_table(with_descriptions: bool = True) -> Table:
    """Legend of the six Bloom levels."""
    table = Table(title="Bloom's Taxonomy Levels", box=box.SIMPLE, header_style="bold")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Level")
    if with_descriptions:
        table.add_column("Description", style=STYLES["dim"])

    for level in BloomLevel:
        row = [str(level.value), level.label]
        if with_descriptions:
            row.append(level.description)
        table.add_row(*row)
    return table


def breakdown_table(
    counts: dict[BloomLevel, int],
    minutes: dict[BloomLevel, int],
) -> Table:
    """Questions and minutes per Bloom level."""
    table = Table(title="By Bloom Level", box=box.SIMPLE, header_style="bold")
    table.add_column("Level")
    table.add_column("Questions", justify="right")
    table.add_column("Minutes", justify="right")

    for level in BloomLevel:
        table.add_row(level.label, str(counts.get(level, 0)), str(minutes.get(level, 0)))
    return table
