"""
Score Classifier
ttscore/scoring/classifier.py

Maps an integer score to one of five ordinal bands:

    0-11   below_average
    12-17  fair
    18-23  good
    24-30  excellent
    other  invalid

Returns stable keys (Band members), never display strings, so the same
function serves live per-entry feedback and aggregate classification.
"""

from typing import Tuple

from ttscore.models.enumerations import Band

SCORE_MIN = 0
SCORE_MAX = 30

BAND_RANGES: Tuple[Tuple[int, int, Band], ...] = (
    (0, 11, Band.BELOW_AVERAGE),
    (12, 17, Band.FAIR),
    (18, 23, Band.GOOD),
    (24, 30, Band.EXCELLENT),
)


def classify(score: int) -> Band:
    """Total over all integers; anything outside [0, 30] is INVALID."""
    for low, high, band in BAND_RANGES:
        if low <= score <= high:
            return band
    return Band.INVALID


def is_positive(band: Band) -> bool:
    """True for the two upper bands (good, excellent)."""
    return band in (Band.GOOD, Band.EXCELLENT)
