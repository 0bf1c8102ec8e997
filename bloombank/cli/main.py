"""
bloombank - Bloom's Taxonomy question bank for the terminal.

Usage:
    bloombank              # Launch the interactive menu
    bloombank menu         # Same, explicitly
    bloombank levels       # Show the Bloom level legend
    bloombank --log-level DEBUG menu

Questions live in memory for the lifetime of the process.
"""

from __future__ import annotations

import sys
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console

from bloombank.cli.menu import QuestionMenu
from bloombank.config import Settings, get_settings
from bloombank.display import bloom_levels_table
from bloombank.repository import QuestionRepository

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="bloombank",
    help="Bloom's Taxonomy question bank - author and browse quiz questions",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def configure_logging(settings: Settings, level: str | None = None) -> None:
    """Replace loguru's default sink with the configured ones."""
    level = (level or settings.log_level).upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level=level, rotation="1 MB", retention=3)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Launch the interactive menu when no command is given."""
    configure_logging(get_settings(), log_level)
    if ctx.invoked_subcommand is None:
        menu()


# =============================================================================
# Commands
# =============================================================================


@app.command()
def menu(
    no_clear: Annotated[
        bool, typer.Option("--no-clear", help="Do not clear the screen between menus")
    ] = False,
) -> None:
    """
    Run the interactive question menu.

    Examples:
        bloombank menu
        bloombank menu --no-clear
    """
    settings = get_settings()
    if no_clear:
        settings = settings.model_copy(update={"clear_screen": False})

    logger.debug("Starting interactive menu")
    QuestionMenu(QuestionRepository(), settings=settings, console=console).run()


@app.command()
def levels() -> None:
    """Show the six Bloom's Taxonomy levels."""
    console.print(bloom_levels_table())


# =============================================================================
# Entry Point
# =============================================================================

def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
