"""
Result Presenter
ttscore/services/presenter.py

Pure projections of domain state under a locale:

    render(subject, result, locale)  → RenderableSummary
    project_form(session, locale, result)  → FormView (live per-field feedback)

Switching locale re-invokes these with the same ScoreResult; nothing is
recomputed, so displayed numbers stay identical across toggles.
"""

from typing import Optional

from ttscore.i18n import lookup, strings
from ttscore.models.enumerations import Band, Gender, GroupKey, Locale, MessageTone
from ttscore.models.score import Subject
from ttscore.models.summary import (
    FieldView,
    FormView,
    GroupView,
    RenderableSummary,
    SummaryRow,
    SummaryTrigger,
)
from ttscore.scoring.aggregator import GROUP_SLOTS, GroupStats
from ttscore.scoring.classifier import classify, is_positive
from ttscore.scoring.session import ScoreResult, ScoreSession
from ttscore.scoring.utils import format_one_decimal

EMPTY_DISPLAY = "-"

GROUP_TITLE_KEYS = {
    GroupKey.MOVEMENT: "movement_test",
    GroupKey.OUTCOME: "outcome_test",
}

GROUP_ACCENTS = {
    GroupKey.MOVEMENT: "emerald",
    GroupKey.OUTCOME: "blue",
}


def gender_label(gender: Optional[str], locale: Locale) -> str:
    """Localized label for the two known values, a dash for anything else."""
    try:
        return lookup(locale, Gender(gender).value)
    except ValueError:
        return EMPTY_DISPLAY


def band_label(band: Band, locale: Locale) -> str:
    return lookup(locale, band.value)


def mean_display(stats: GroupStats, locale: Locale) -> str:
    """'20.0 (Baik)' for a populated group, '-' for an empty one."""
    if stats.is_empty:
        return EMPTY_DISPLAY
    return f"{format_one_decimal(stats.mean)} ({band_label(stats.band, locale)})"


def message_for(total_band: Band, locale: Locale):
    """Binary selector: affirmative for good/excellent, encouraging otherwise."""
    if is_positive(total_band):
        return lookup(locale, "msg_excellent"), MessageTone.AFFIRMATIVE
    return lookup(locale, "msg_improve"), MessageTone.ENCOURAGING


def render(
    subject: Subject,
    result: ScoreResult,
    locale: Locale,
    trigger: Optional[SummaryTrigger] = None,
) -> RenderableSummary:
    """The export trigger defaults to an enabled download button."""
    locale = Locale(locale)
    message, tone = message_for(result.total_band, locale)

    subject_rows = [
        SummaryRow(label=lookup(locale, "full_name"), value=subject.name),
        SummaryRow(label=lookup(locale, "age"), value=subject.age),
        SummaryRow(label=lookup(locale, "gender"), value=gender_label(subject.gender, locale)),
    ]

    score_rows = []
    for key, stats in ((GroupKey.MOVEMENT, result.movement), (GroupKey.OUTCOME, result.outcome)):
        score_rows.append(
            SummaryRow(
                label=lookup(locale, GROUP_TITLE_KEYS[key]),
                value=format_one_decimal(stats.mean),
                detail=band_label(stats.band, locale),
                accent=GROUP_ACCENTS[key],
            )
        )

    return RenderableSummary(
        locale=locale,
        title=lookup(locale, "result_title"),
        subject_rows=subject_rows,
        score_rows=score_rows,
        total_label=lookup(locale, "final_total_score"),
        total_value=format_one_decimal(result.total_mean),
        total_band=band_label(result.total_band, locale),
        message=message,
        tone=tone,
        thank_you=lookup(locale, "thank_you"),
        trigger=trigger or SummaryTrigger(label=lookup(locale, "download_pdf")),
    )


def project_form(
    session: ScoreSession,
    locale: Locale,
    result: Optional[ScoreResult] = None,
    trigger: Optional[SummaryTrigger] = None,
) -> FormView:
    locale = Locale(locale)
    groups = []
    for key in GroupKey:
        fields = []
        for slot in range(1, GROUP_SLOTS + 1):
            value = session.value(key, slot)
            fields.append(
                FieldView(
                    key=f"{key.value}_{slot}",
                    value=value,
                    band_label="" if value is None else band_label(classify(value), locale),
                )
            )
        groups.append(
            GroupView(
                key=key.value,
                title=lookup(locale, GROUP_TITLE_KEYS[key]),
                fields=fields,
                mean_display=mean_display(session.group_stats(key), locale),
            )
        )

    summary = render(session.subject, result, locale, trigger) if result is not None else None
    return FormView(
        locale=locale,
        language_name=lookup(locale, "language_name"),
        labels=strings(locale),
        groups=groups,
        result=summary,
        result_visible=summary is not None,
    )
