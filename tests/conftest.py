"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import logging

import pytest

from kvdict.store.dictionary import Dictionary
from kvdict.utils import logging as kvdict_logging


# ============================================================================
# Dictionary Fixtures
# ============================================================================

@pytest.fixture
def store() -> Dictionary:
    """Create a fresh, empty Dictionary with the default capacity hint."""
    return Dictionary()


@pytest.fixture
def abc_store() -> Dictionary:
    """Create a Dictionary holding A, B and C in insertion order."""
    d = Dictionary(capacity_hint=3)
    d.insert("A", 1)
    d.insert("B", 2)
    d.insert("C", 3)
    return d


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def clean_logger():
    """Restore the kvdict package logger after a test configures it."""
    logger = logging.getLogger(kvdict_logging.PACKAGE_LOGGER)
    level = logger.level
    handlers = list(logger.handlers)

    yield logger

    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
    kvdict_logging._handler = None
