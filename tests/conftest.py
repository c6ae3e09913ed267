"""
Shared fixtures for byte_amount tests.
"""
import sys

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture byte_amount log records emitted during a test."""
    messages = []
    logger.enable('byte_amount')
    handler_id = logger.add(messages.append, level='DEBUG', format='{level} | {message}')
    yield messages
    logger.remove(handler_id)
    logger.disable('byte_amount')


@pytest.fixture
def restore_logger():
    """Drop any sinks a test added and restore loguru's default stderr sink."""
    yield logger
    logger.remove()
    logger.add(sys.stderr)
    logger.disable('byte_amount')
