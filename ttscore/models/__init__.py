from ttscore.models.enumerations import (
    Band,
    ExportErrorKind,
    Gender,
    GroupKey,
    Locale,
    MessageTone,
)
from ttscore.models.score import ScoreEntry, Subject

__all__ = [
    "Band",
    "ExportErrorKind",
    "Gender",
    "GroupKey",
    "Locale",
    "MessageTone",
    "ScoreEntry",
    "Subject",
]

from ttscore.models.summary import (  # noqa: E402
    FieldView,
    FormView,
    GroupView,
    RenderableSummary,
    SummaryRow,
    SummaryTrigger,
)

__all__ += [
    "FieldView",
    "FormView",
    "GroupView",
    "RenderableSummary",
    "SummaryRow",
    "SummaryTrigger",
]
