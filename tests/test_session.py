# tests/test_session.py
from decimal import Decimal

import pytest

from ttscore.core.exceptions import ScoreValidationError
from ttscore.models.enumerations import Band, GroupKey
from ttscore.models.score import Subject
from ttscore.scoring.aggregator import ScoreGroup
from ttscore.scoring.session import (
    ScoreSession,
    compute_result,
    parse_field_key,
    parse_score,
    validate_entry,
)


class TestParseScore:

    @pytest.mark.parametrize("raw,expected", [("0", 0), ("30", 30), (" 15 ", 15), (12, 12), ("+7", 7)])
    def test_accepts_integers_in_range(self, raw, expected):
        assert parse_score(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_clears(self, raw):
        assert parse_score(raw) is None

    @pytest.mark.parametrize(
        "raw",
        [
            "31", "-1", 31, -1, "abc", "12.5", "1e1", True, 12.0,
            "\u0662\u0660",  # Arabic-Indic twenty
            "\uff12\uff10",  # fullwidth twenty
            pytest.param("1" * 5000, id="oversized_digits"),
        ],
    )
    def test_rejects_with_single_error_kind(self, raw):
        with pytest.raises(ScoreValidationError) as exc_info:
            parse_score(raw, "movement_1")
        assert exc_info.value.kind == "out_of_range"
        assert exc_info.value.message_key == "value_out_of_range"
        assert exc_info.value.field_key == "movement_1"


class TestFieldKeys:

    def test_parse(self):
        assert parse_field_key("movement_3") == (GroupKey.MOVEMENT, 3)
        assert parse_field_key("outcome_6") == (GroupKey.OUTCOME, 6)

    @pytest.mark.parametrize("key", ["movement_0", "movement_7", "serve_1", "outcome", "outcome_x"])
    def test_unknown(self, key):
        with pytest.raises(ValueError):
            parse_field_key(key)


class TestValidateEntry:

    def test_returns_entry(self):
        entry = validate_entry(GroupKey.OUTCOME, 2, "25")
        assert entry.value == 25
        assert entry.field_key == "outcome_2"

    def test_empty_returns_none(self):
        assert validate_entry(GroupKey.OUTCOME, 2, "") is None


class TestScoreSession:

    def test_enter_stores_value(self):
        session = ScoreSession()
        session.enter(GroupKey.MOVEMENT, 1, "20")
        assert session.value(GroupKey.MOVEMENT, 1) == 20

    def test_empty_input_clears_slot(self):
        session = ScoreSession()
        session.enter(GroupKey.MOVEMENT, 1, "20")
        session.enter(GroupKey.MOVEMENT, 1, "")
        assert session.value(GroupKey.MOVEMENT, 1) is None
        assert session.group_stats(GroupKey.MOVEMENT).is_empty

    @pytest.mark.parametrize("raw", ["31", "-1", pytest.param("9" * 5000, id="oversized_digits")])
    def test_rejected_input_clears_slot_and_updates_mean(self, raw):
        session = ScoreSession()
        for slot in range(1, 7):
            session.enter(GroupKey.MOVEMENT, slot, "30")
        with pytest.raises(ScoreValidationError):
            session.enter(GroupKey.MOVEMENT, 6, raw)
        assert session.value(GroupKey.MOVEMENT, 6) is None
        assert session.group_stats(GroupKey.MOVEMENT).mean == Decimal("25")

    def test_enter_field(self):
        session = ScoreSession()
        session.enter_field("outcome_4", 18)
        assert session.value(GroupKey.OUTCOME, 4) == 18

    def test_compute_result_requires_both_groups(self):
        session = ScoreSession()
        session.enter(GroupKey.MOVEMENT, 1, "20")
        assert session.compute_result() is None

    def test_reset(self):
        session = ScoreSession()
        session.subject = Subject(name="A")
        session.enter(GroupKey.MOVEMENT, 1, "20")
        session.enter(GroupKey.OUTCOME, 1, "20")
        session.reset()
        assert session.subject.name == ""
        assert session.group_stats(GroupKey.MOVEMENT).is_empty
        assert session.group_stats(GroupKey.OUTCOME).is_empty
        assert session.compute_result() is None


class TestComputeResult:

    def test_total_of_full_and_zero_groups(self):
        result = compute_result(
            None,
            ScoreGroup.from_values(GroupKey.MOVEMENT, [30] * 6),
            ScoreGroup.from_values(GroupKey.OUTCOME, [0] * 6),
        )
        assert result.total_mean == Decimal("15")
        assert result.total_band == Band.FAIR

    def test_total_half_rounds_up(self):
        """11 and 12 average to 11.5, which classifies as 12 → fair."""
        result = compute_result(
            None,
            ScoreGroup.from_values(GroupKey.MOVEMENT, [11] * 6),
            ScoreGroup.from_values(GroupKey.OUTCOME, [12] * 6),
        )
        assert result.total_mean == Decimal("11.5")
        assert result.total_band == Band.FAIR

    def test_empty_group_gives_none(self):
        assert compute_result(
            None,
            ScoreGroup(GroupKey.MOVEMENT),
            ScoreGroup.from_values(GroupKey.OUTCOME, [20] * 6),
        ) is None

    def test_group_bands_are_kept(self, good_result):
        assert good_result.movement.band == Band.GOOD
        assert good_result.outcome.band == Band.GOOD
        assert good_result.total_band == Band.GOOD
