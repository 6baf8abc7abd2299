"""Shared fixtures for BAI2 ingestion tests."""

import pytest

from bai2_kernel.logging_config import LogContext, reset_logging

from tests.samples import SAMPLE_LINES


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_text() -> str:
    return "\n".join(SAMPLE_LINES) + "\n"


@pytest.fixture(autouse=True)
def _clean_log_context():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
