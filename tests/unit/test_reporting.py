"""
Unit tests for aggregate reporting helpers.
"""

import pytest

from bloombank.questions import BloomLevel, QuestionType
from bloombank.reporting import count_by_level, count_by_type, format_duration, minutes_by_level


class TestFormatDuration:
    """Test total-time formatting."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (0, "0 minutes"),
            (45, "45 minutes"),
            (59, "59 minutes"),
            (60, "60 minutes (1 hour)"),
            (61, "61 minutes (1 hour and 1 minute)"),
            (135, "135 minutes (2 hours and 15 minutes)"),
            (180, "180 minutes (3 hours)"),
        ],
    )
    def test_format(self, minutes, expected):
        assert format_duration(minutes) == expected


class TestBreakdowns:
    """Test per-level and per-type counts."""

    def test_empty(self):
        counts = count_by_level([])
        assert list(counts) == list(BloomLevel)
        assert all(v == 0 for v in counts.values())

    def test_count_by_level(self, make_tf):
        questions = [
            make_tf("A", level=BloomLevel.APPLY),
            make_tf("B", level=BloomLevel.APPLY),
            make_tf("C", level=BloomLevel.CREATE),
        ]
        counts = count_by_level(questions)
        assert counts[BloomLevel.APPLY] == 2
        assert counts[BloomLevel.CREATE] == 1
        assert counts[BloomLevel.REMEMBER] == 0

    def test_count_by_type(self, make_tf, sample_mcq, sample_matching):
        counts = count_by_type([make_tf("A"), sample_mcq, sample_matching, make_tf("B")])
        assert counts == {
            QuestionType.MULTIPLE_CHOICE: 1,
            QuestionType.TRUE_FALSE: 2,
            QuestionType.MATCHING: 1,
        }

    def test_minutes_by_level(self, make_tf):
        questions = [
            make_tf("A", level=BloomLevel.EVALUATE, minutes=10),
            make_tf("B", level=BloomLevel.EVALUATE, minutes=5),
            make_tf("C", level=BloomLevel.REMEMBER, minutes=1),
        ]
        minutes = minutes_by_level(questions)
        assert minutes[BloomLevel.EVALUATE] == 15
        assert minutes[BloomLevel.REMEMBER] == 1
        assert sum(minutes.values()) == 16
