"""
Unit tests for the rich renderables.

Renders to an in-memory console and checks the plain text.
"""

import io

import pytest
from rich.console import Console

from bloombank.display import (
    bloom_levels_table,
    breakdown_table,
    preview,
    question_panel,
    question_table,
)
from bloombank.questions import BloomLevel


@pytest.fixture
def render():
    def _render(renderable) -> str:
        console = Console(file=io.StringIO(), width=120, color_system=None)
        console.print(renderable)
        return console.file.getvalue()
    return _render


def test_preview_truncates():
    assert preview("x" * 60, 50) == "x" * 50 + "..."
    assert preview("short", 50) == "short"


def test_question_panel(render, sample_matching):
    out = render(question_panel(sample_matching))
    assert "MATCHING" in out
    assert "Match each protocol to its port." in out
    assert "1 -> C" in out


def test_question_panel_keeps_brackets(render, make_tf):
    out = render(question_panel(make_tf("Is [bold] a tag?")))
    assert "[bold]" in out


def test_question_table_keeps_brackets(render, make_tf):
    out = render(question_table([make_tf("What does [red] mean?")]))
    assert "[red]" in out


def test_question_table(render, make_tf):
    long_text = "A" * 80
    out = render(question_table([make_tf(long_text, year=2020), make_tf("Short")], preview_length=50))
    assert "A" * 50 + "..." in out
    assert "A" * 51 not in out
    assert "2020" in out
    assert "True/False" in out


def test_bloom_levels_table(render):
    out = render(bloom_levels_table())
    for level in BloomLevel:
        assert level.label in out
    assert "recall information" in out
    assert "recall information" not in render(bloom_levels_table(with_descriptions=False))


def test_breakdown_table(render):
    counts = {level: 0 for level in BloomLevel}
    counts[BloomLevel.APPLY] = 3
    minutes = {level: 0 for level in BloomLevel}
    minutes[BloomLevel.APPLY] = 12
    out = render(breakdown_table(counts, minutes))
    assert "Apply" in out
    assert "12" in out
