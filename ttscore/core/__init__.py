"""
Core Package
ttscore/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from ttscore.core.exceptions import (
    ExportError,
    ScoreValidationError,
    TTScoreException,
)
from ttscore.core.logging import configure_logging

__all__ = [
    # Exceptions
    "ExportError",
    "ScoreValidationError",
    "TTScoreException",
    # Logging
    "configure_logging",
]
