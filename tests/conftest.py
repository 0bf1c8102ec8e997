"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from bloombank.config import Settings
from bloombank.questions import BloomLevel, build_question
from bloombank.repository import QuestionRepository


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (scripted menu sessions)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def repository():
    """Provide an empty question repository."""
    return QuestionRepository()


@pytest.fixture
def quiet_settings():
    """Settings that never clear the screen or wait for Enter."""
    return Settings(clear_screen=False, pause_after_action=False, log_file=None)


@pytest.fixture
def make_tf():
    """Factory for true/false questions with sensible defaults."""
    def _make(text="The OSI model has seven layers.", year=0, level=BloomLevel.REMEMBER, minutes=2):
        return build_question(
            "true_false",
            text=text,
            year=year,
            bloom_level=level,
            estimated_minutes=minutes,
            correct_answer=True,
        )
    return _make


@pytest.fixture
def sample_mcq():
    """Provide a sample multiple-choice question."""
    return build_question(
        "multiple_choice",
        text="Which layer of the OSI model handles routing?",
        bloom_level=BloomLevel.UNDERSTAND,
        estimated_minutes=3,
        year=2020,
        options=["Physical", "Data Link", "Network", "Transport"],
        correct_option=2,
    )


@pytest.fixture
def sample_matching():
    """Provide a sample matching question."""
    return build_question(
        "matching",
        text="Match each protocol to its port.",
        bloom_level=BloomLevel.APPLY,
        estimated_minutes=5,
        year=2021,
        left_items=["HTTP", "SSH", "DNS"],
        right_items=["22", "53", "80"],
        correct_mapping=[2, 0, 1],
    )
