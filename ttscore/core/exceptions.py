"""
Custom Exceptions - Table Tennis Skill Test Scorer
ttscore/core/exceptions.py

The two error classes of the scoring core. Both are recovered at the
UI/HTTP boundary; nothing here is fatal.
"""

from typing import Optional, Union

from ttscore.models.enumerations import ExportErrorKind


class TTScoreException(Exception):
    """Base exception for the scoring core."""

    pass


class ScoreValidationError(TTScoreException):
    """A score entry is not an integer in the closed range [0, 30]."""

    kind = "out_of_range"
    message_key = "value_out_of_range"

    def __init__(self, raw_input: object, field_key: Optional[str] = None):
        self.raw_input = raw_input
        self.field_key = field_key
        target = f" for {field_key}" if field_key else ""
        super().__init__(f"Score {raw_input!r}{target} is not an integer in [0, 30]")


class ExportError(TTScoreException):
    """Document export failed at one of its stages."""

    def __init__(self, kind: Union[ExportErrorKind, str], message: str = "Document export failed"):
        # raises ValueError for anything outside the three stage kinds
        self.kind = ExportErrorKind(kind)
        self.message = message
        super().__init__(f"{self.kind.value}: {message}")
