"""
Score Session
ttscore/scoring/session.py

The canonical model of one test sitting: the subject and both score
groups. UI events mutate the session; displays are projected from it and
never read back.

    enter("movement", 3, "25")   → stores 25 in movement slot 3
    enter("movement", 3, "")     → clears the slot
    enter("movement", 3, "31")   → clears the slot, raises ScoreValidationError
    compute_result()             → ScoreResult, or None if a group is empty
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Tuple, Union

import structlog

from ttscore.core.exceptions import ScoreValidationError
from ttscore.models.enumerations import Band, GroupKey
from ttscore.models.score import ScoreEntry, Subject
from ttscore.scoring.aggregator import GROUP_SLOTS, Aggregator, GroupStats, ScoreGroup
from ttscore.scoring.classifier import SCORE_MAX, SCORE_MIN, classify
from ttscore.scoring.utils import round_half_away

logger = structlog.get_logger(__name__)

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

RawInput = Union[str, int, None]


@dataclass(frozen=True)
class ScoreResult:
    """Derived from both groups; recomputed on submit, never stored independently."""
    movement: GroupStats
    outcome: GroupStats
    total_mean: Decimal
    total_band: Band


def parse_field_key(field_key: str) -> Tuple[GroupKey, int]:
    """'movement_3' → (GroupKey.MOVEMENT, 3)."""
    prefix, _, slot = field_key.partition("_")
    try:
        group = GroupKey(prefix)
        slot_no = int(slot)
    except ValueError:
        raise ValueError(f"Unknown score field: {field_key!r}") from None
    if not 1 <= slot_no <= GROUP_SLOTS:
        raise ValueError(f"Unknown score field: {field_key!r}")
    return group, slot_no


def parse_score(raw: RawInput, field_key: Optional[str] = None) -> Optional[int]:
    """
    Parse one raw input.

    Returns None for an empty input (slot cleared). Non-integers and values
    outside [0, 30] raise the same ScoreValidationError.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ScoreValidationError(raw, field_key)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if text == "":
            return None
        if not _INTEGER_RE.match(text):
            raise ScoreValidationError(raw, field_key)
        try:
            value = int(text)
        except ValueError:
            # digit count beyond the interpreter's conversion limit
            raise ScoreValidationError(raw, field_key) from None
    else:
        raise ScoreValidationError(raw, field_key)

    if not SCORE_MIN <= value <= SCORE_MAX:
        raise ScoreValidationError(raw, field_key)
    return value


def validate_entry(group: GroupKey, slot: int, raw: RawInput) -> Optional[ScoreEntry]:
    """None clears the slot; a ScoreEntry is stored; ScoreValidationError rejects."""
    field_key = f"{group.value}_{slot}"
    value = parse_score(raw, field_key)
    if value is None:
        return None
    return ScoreEntry(group=group, slot=slot, value=value)


def compute_result(
    subject: Optional[Subject],
    movement: ScoreGroup,
    outcome: ScoreGroup,
    aggregator: Optional[Aggregator] = None,
) -> Optional[ScoreResult]:
    """
    Combine both groups. Returns None when either group is empty.

    The subject does not enter the arithmetic; it travels with the result
    to the presenter.
    """
    aggregator = aggregator or Aggregator()
    movement_stats = aggregator.stats(movement)
    outcome_stats = aggregator.stats(outcome)

    if movement_stats.is_empty or outcome_stats.is_empty:
        logger.info(
            "result_skipped_empty_group",
            movement_empty=movement_stats.is_empty,
            outcome_empty=outcome_stats.is_empty,
        )
        return None

    total_mean = (movement_stats.mean + outcome_stats.mean) / 2
    total_band = classify(round_half_away(total_mean))

    logger.info(
        "result_computed",
        subject=subject.name if subject else None,
        movement_mean=float(movement_stats.mean),
        outcome_mean=float(outcome_stats.mean),
        total_mean=float(total_mean),
        total_band=total_band.value,
    )

    return ScoreResult(
        movement=movement_stats,
        outcome=outcome_stats,
        total_mean=total_mean,
        total_band=total_band,
    )


class ScoreSession:
    """Subject plus the movement and outcome groups."""

    def __init__(self, aggregator: Optional[Aggregator] = None):
        self.aggregator = aggregator or Aggregator()
        self.subject = Subject()
        self.groups: Dict[GroupKey, ScoreGroup] = {key: ScoreGroup(key) for key in GroupKey}

    def enter(self, group: GroupKey, slot: int, raw: RawInput) -> Optional[ScoreEntry]:
        """
        Apply one input event.

        On rejection the slot is cleared before the error propagates, so
        the group's stats already reflect the now-absent entry.
        """
        target = self.groups[group]
        try:
            entry = validate_entry(group, slot, raw)
        except ScoreValidationError as exc:
            target.set(slot, None)
            logger.info("entry_rejected", field=exc.field_key, raw_input=repr(raw))
            raise

        target.set(slot, entry.value if entry else None)
        return entry

    def enter_field(self, field_key: str, raw: RawInput) -> Optional[ScoreEntry]:
        group, slot = parse_field_key(field_key)
        return self.enter(group, slot, raw)

    def value(self, group: GroupKey, slot: int) -> Optional[int]:
        return self.groups[group].get(slot)

    def group_stats(self, group: GroupKey) -> GroupStats:
        return self.aggregator.stats(self.groups[group])

    def compute_result(self) -> Optional[ScoreResult]:
        return compute_result(
            self.subject,
            self.groups[GroupKey.MOVEMENT],
            self.groups[GroupKey.OUTCOME],
            self.aggregator,
        )

    def reset(self) -> None:
        self.subject = Subject()
        for group in self.groups.values():
            group.clear()
