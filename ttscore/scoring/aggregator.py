"""
Group Aggregator
ttscore/scoring/aggregator.py

Mean and band of one six-slot score group.

Formula:
    mean = Σ present values / 6       (fixed divisor, absent slots weigh zero)
    band = classify(round_half_away(mean))

A group with no present values yields EMPTY_STATS and is never classified.
The fixed divisor is deliberate: one entry of 30 gives mean 5.0
(below_average). Do not divide by the number of present entries.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from ttscore.models.enumerations import Band, GroupKey
from ttscore.scoring.classifier import classify
from ttscore.scoring.utils import round_half_away

GROUP_SLOTS = 6


@dataclass
class ScoreGroup:
    """Six slots of one group; None marks an absent entry."""
    key: GroupKey
    slots: List[Optional[int]] = field(default_factory=lambda: [None] * GROUP_SLOTS)

    @classmethod
    def from_values(cls, key: GroupKey, values: Sequence[Optional[int]]) -> "ScoreGroup":
        if len(values) > GROUP_SLOTS:
            raise ValueError(f"{key.value} has {GROUP_SLOTS} slots, got {len(values)} values")
        slots = list(values) + [None] * (GROUP_SLOTS - len(values))
        return cls(key=key, slots=slots)

    def _index(self, slot: int) -> int:
        if not 1 <= slot <= GROUP_SLOTS:
            raise ValueError(f"slot must be in 1..{GROUP_SLOTS}, got {slot}")
        return slot - 1

    def get(self, slot: int) -> Optional[int]:
        return self.slots[self._index(slot)]

    def set(self, slot: int, value: Optional[int]) -> None:
        self.slots[self._index(slot)] = value

    def clear(self) -> None:
        self.slots = [None] * GROUP_SLOTS

    def present_values(self) -> List[int]:
        return [v for v in self.slots if v is not None]


@dataclass(frozen=True)
class GroupStats:
    """Output of Aggregator.stats()."""
    mean: Decimal          # Σ present / 6, unrounded
    band: Optional[Band]   # None for an empty group

    @property
    def is_empty(self) -> bool:
        return self.band is None


EMPTY_STATS = GroupStats(mean=Decimal("0"), band=None)


class Aggregator:
    """Compute fixed-divisor group means and classify them."""

    divisor = Decimal(GROUP_SLOTS)

    def stats(self, group: ScoreGroup) -> GroupStats:
        values = group.present_values()
        if not values:
            return EMPTY_STATS

        mean = Decimal(sum(values)) / self.divisor
        return GroupStats(mean=mean, band=classify(round_half_away(mean)))
