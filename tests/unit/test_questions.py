"""
Unit tests for the question models.

Tests construction, index validation, the type registry and describe().
"""

import pytest
from pydantic import ValidationError

from bloombank.errors import InvalidQuestionError
from bloombank.questions import (
    QUESTION_MODELS,
    BloomLevel,
    MatchingQuestion,
    MultipleChoiceQuestion,
    Question,
    QuestionType,
    TrueFalseQuestion,
    build_question,
    get_model,
)

COMMON = {
    "text": "What does DNS stand for?",
    "bloom_level": BloomLevel.REMEMBER,
    "estimated_minutes": 2,
}


class TestRegistry:
    """Test the question model registry."""

    def test_all_types_registered(self):
        """Every question type should have a model."""
        assert set(QUESTION_MODELS) == set(QuestionType)

    def test_get_model_by_string(self):
        assert get_model("matching") is MatchingQuestion

    def test_get_model_by_enum(self):
        assert get_model(QuestionType.TRUE_FALSE) is TrueFalseQuestion

    def test_get_model_invalid_type(self):
        assert get_model("essay") is None

    def test_build_unknown_type(self):
        with pytest.raises(InvalidQuestionError):
            build_question("essay", **COMMON)

    def test_variant_tag(self, sample_mcq, sample_matching):
        assert sample_mcq.variant_tag() == QuestionType.MULTIPLE_CHOICE
        assert sample_matching.variant_tag() == QuestionType.MATCHING


class TestBloomLevel:
    """Test the Bloom level enumeration."""

    def test_levels_are_ordered(self):
        assert [level.value for level in BloomLevel] == [1, 2, 3, 4, 5, 6]
        assert BloomLevel.REMEMBER < BloomLevel.CREATE

    def test_labels(self):
        assert BloomLevel.ANALYZE.label == "Analyze"
        assert BloomLevel.CREATE.description

    def test_level_from_int(self):
        q = build_question("true_false", **{**COMMON, "bloom_level": 4}, correct_answer=False)
        assert q.bloom_level is BloomLevel.ANALYZE


class TestCommonFields:
    """Test fields shared by every variant."""

    def test_defaults(self):
        q = build_question("true_false", **COMMON, correct_answer=True)
        assert q.id == 0
        assert q.year == 0

    def test_blank_text_rejected(self):
        with pytest.raises(InvalidQuestionError, match="text"):
            build_question("true_false", **{**COMMON, "text": "   "}, correct_answer=True)

    def test_zero_minutes_rejected(self):
        with pytest.raises(InvalidQuestionError):
            build_question("true_false", **{**COMMON, "estimated_minutes": 0}, correct_answer=True)

    def test_negative_year_rejected(self):
        with pytest.raises(InvalidQuestionError):
            build_question("true_false", **COMMON, year=-1, correct_answer=True)

    def test_invalid_bloom_level_rejected(self):
        with pytest.raises(InvalidQuestionError):
            build_question("true_false", **{**COMMON, "bloom_level": 7}, correct_answer=True)

    def test_id_is_frozen(self):
        q = build_question("true_false", **COMMON, correct_answer=True)
        with pytest.raises(ValidationError):
            q.id = 5

    def test_assignment_is_validated(self):
        q = build_question("true_false", **COMMON, correct_answer=True)
        q.text = "Is UDP connectionless?"
        assert q.text == "Is UDP connectionless?"
        with pytest.raises(ValidationError):
            q.estimated_minutes = -3
        assert q.estimated_minutes == 2

    def test_invalid_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_question("true_false", **{**COMMON, "text": ""}, correct_answer=True)

    def test_base_question_cannot_be_built(self):
        with pytest.raises(ValidationError, match="abstract"):
            Question(question_type=QuestionType.MATCHING, **COMMON)


class TestMultipleChoice:
    """Test the multiple-choice model."""

    def test_valid(self, sample_mcq):
        assert isinstance(sample_mcq, MultipleChoiceQuestion)
        assert sample_mcq.correct_option == 2

    def test_correct_option_out_of_range(self):
        with pytest.raises(InvalidQuestionError, match="correct_option"):
            build_question("multiple_choice", **COMMON, options=["a", "b"], correct_option=2)

    def test_negative_correct_option(self):
        with pytest.raises(InvalidQuestionError):
            build_question("multiple_choice", **COMMON, options=["a", "b"], correct_option=-1)

    def test_too_few_options(self):
        with pytest.raises(InvalidQuestionError):
            build_question("multiple_choice", **COMMON, options=["a"], correct_option=0)

    def test_too_many_options(self):
        with pytest.raises(InvalidQuestionError):
            build_question(
                "multiple_choice", **COMMON, options=list("abcdefg"), correct_option=0
            )

    def test_shrinking_options_below_correct_option_fails(self, sample_mcq):
        with pytest.raises(ValidationError):
            sample_mcq.options = ["only", "two"]
        assert sample_mcq.options == ["Physical", "Data Link", "Network", "Transport"]
        assert sample_mcq.correct_option == 2

    def test_describe(self, sample_mcq):
        text = sample_mcq.describe()
        assert "Question: Which layer of the OSI model handles routing?" in text
        assert "Bloom level: Understand" in text
        assert "Year: 2020" in text
        assert "Type: Multiple Choice" in text
        assert "  3. Network" in text
        assert "Correct option: 3" in text


class TestTrueFalse:
    """Test the true/false model."""

    def test_describe_without_year(self):
        q = build_question("true_false", **COMMON, correct_answer=False)
        text = q.describe()
        assert "Year:" not in text
        assert "Type: True/False" in text
        assert "Correct answer: False" in text


class TestMatching:
    """Test the matching model."""

    def test_valid(self, sample_matching):
        assert sample_matching.pairs() == [("HTTP", "80"), ("SSH", "22"), ("DNS", "53")]

    def test_mismatched_right_items(self):
        with pytest.raises(InvalidQuestionError, match="right_items"):
            build_question(
                "matching", **COMMON,
                left_items=["a", "b"], right_items=["1"], correct_mapping=[0, 0],
            )

    def test_mapping_wrong_length(self):
        with pytest.raises(InvalidQuestionError, match="correct_mapping"):
            build_question(
                "matching", **COMMON,
                left_items=["a", "b"], right_items=["1", "2"], correct_mapping=[0],
            )

    def test_mapping_out_of_range(self):
        with pytest.raises(InvalidQuestionError, match="out of range"):
            build_question(
                "matching", **COMMON,
                left_items=["a", "b"], right_items=["1", "2"], correct_mapping=[0, 2],
            )

    def test_failed_mapping_assignment_keeps_old_mapping(self, sample_matching):
        with pytest.raises(ValidationError):
            sample_matching.correct_mapping = [0, 0, 9]
        assert sample_matching.correct_mapping == [2, 0, 1]

    def test_describe(self, sample_matching):
        text = sample_matching.describe()
        assert "  1. HTTP" in text
        assert "  A. 22" in text
        assert "  1 -> C" in text
        assert "  3 -> B" in text
