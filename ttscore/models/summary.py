from pydantic import BaseModel, Field
from typing import List, Optional, Dict

from ttscore.models.enumerations import Locale, MessageTone


class SummaryRow(BaseModel):
    """One label/value pair of the result grid."""
    label: str
    value: str
    detail: Optional[str] = Field(default=None, description="Band label shown next to a mean")
    accent: Optional[str] = Field(default=None, description="Colour key for the value")


class SummaryTrigger(BaseModel):
    """The interactive export control embedded in the summary."""
    id: str = "download_pdf"
    label: str
    enabled: bool = True


class RenderableSummary(BaseModel):
    """Localized projection of a ScoreResult, ready to lay out."""
    locale: Locale
    title: str
    subject_rows: List[SummaryRow]
    score_rows: List[SummaryRow]
    total_label: str
    total_value: str
    total_band: str
    message: str
    tone: MessageTone
    thank_you: str
    trigger: Optional[SummaryTrigger] = None
    layout_width: Optional[int] = Field(
        default=None,
        description="Fixed layout width in CSS px; None follows the viewer",
    )


class FieldView(BaseModel):
    key: str
    value: Optional[int] = None
    band_label: str = ""


class GroupView(BaseModel):
    key: str
    title: str
    fields: List[FieldView]
    mean_display: str


class FormView(BaseModel):
    """Everything the input surface shows, projected from (session, locale)."""
    locale: Locale
    language_name: str
    labels: Dict[str, str]
    groups: List[GroupView]
    result: Optional[RenderableSummary] = None
    result_visible: bool = False
