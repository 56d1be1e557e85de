"""
Interactive Scoring Controller
ttscore/services/score_app.py

Event handlers of the input surface. Each handler mutates the canonical
ScoreSession (or the locale) and returns a fresh FormView projection:

    on_input(field_key, raw)  live validation + per-field band + group mean
    on_submit()               compute and show the result (no-op if a group is empty)
    on_toggle_locale()        re-project labels and the shown result, no recompute
    on_reset()                clear entries, subject and result
    on_export()               async single-slot PDF export

The export trigger's enabled flag is the only mutual exclusion: a second
export while one is running is ignored.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

import structlog

from ttscore.config import get_settings
from ttscore.core.exceptions import ExportError, ScoreValidationError
from ttscore.i18n import lookup, next_locale
from ttscore.models.enumerations import Locale
from ttscore.models.score import Subject
from ttscore.models.summary import FormView, RenderableSummary, SummaryTrigger
from ttscore.scoring.session import RawInput, ScoreResult, ScoreSession
from ttscore.services.document_exporter import DocumentExporter, ExportedDocument
from ttscore.services.presenter import project_form, render

logger = structlog.get_logger(__name__)


class Notifier(Protocol):
    """Blocking acknowledgment surface (modal)."""

    def show(self, message: str) -> None: ...

    def dismiss(self) -> None: ...


@dataclass
class RecordingNotifier:
    """Notifier that keeps every message; used headless and in tests."""
    messages: List[str] = field(default_factory=list)
    visible: bool = False

    def show(self, message: str) -> None:
        self.messages.append(message)
        self.visible = True

    def dismiss(self) -> None:
        self.visible = False


@dataclass
class ExportTrigger:
    label: str
    enabled: bool = True


class ScoringApp:
    """Holds session, locale and the shown result; projects them on demand."""

    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        locale: Optional[Locale] = None,
        exporter: Optional[DocumentExporter] = None,
    ):
        self.notifier = notifier if notifier is not None else RecordingNotifier()
        self.locale = Locale(locale or get_settings().DEFAULT_LOCALE)
        self.exporter = exporter
        self.session = ScoreSession()
        self.result: Optional[ScoreResult] = None
        self.trigger = ExportTrigger(label=lookup(self.locale, "download_pdf"))

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def _trigger_view(self) -> SummaryTrigger:
        return SummaryTrigger(label=self.trigger.label, enabled=self.trigger.enabled)

    def summary(self) -> Optional[RenderableSummary]:
        if self.result is None:
            return None
        return render(self.session.subject, self.result, self.locale, self._trigger_view())

    def form_view(self) -> FormView:
        return project_form(self.session, self.locale, self.result, self._trigger_view())

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def set_subject(self, name: str = "", age: str = "", gender: Optional[str] = None) -> None:
        self.session.subject = Subject(name=name, age=age, gender=gender)

    def on_input(self, field_key: str, raw: RawInput) -> FormView:
        try:
            self.session.enter_field(field_key, raw)
        except ScoreValidationError as exc:
            self.notifier.show(lookup(self.locale, exc.message_key))
        return self.form_view()

    def on_submit(self) -> FormView:
        result = self.session.compute_result()
        if result is not None:
            self.result = result
        return self.form_view()

    def set_locale(self, locale: Locale) -> FormView:
        self.locale = Locale(locale)
        if self.trigger.enabled:
            self.trigger.label = lookup(self.locale, "download_pdf")
        logger.info("locale_switched", locale=self.locale.value)
        return self.form_view()

    def on_toggle_locale(self) -> FormView:
        return self.set_locale(next_locale(self.locale))

    def on_reset(self) -> FormView:
        self.session.reset()
        self.result = None
        logger.info("session_reset")
        return self.form_view()

    async def on_export(self) -> Optional[ExportedDocument]:
        """
        Export the shown summary. Returns None when nothing is shown, when an
        export is already running, or when the export failed (after the
        generic notice has been shown).
        """
        summary = self.summary()
        if summary is None or not self.trigger.enabled:
            return None

        exporter = self.exporter or DocumentExporter()
        original_label = self.trigger.label
        start_locale = self.locale
        self.trigger.label = lookup(self.locale, "generating")
        self.trigger.enabled = False
        try:
            return await exporter.export(summary, self.session.subject.name)
        except ExportError as exc:
            logger.error("export_failed", kind=exc.kind.value, error=exc.message)
            self.notifier.show(lookup(self.locale, "export_failed"))
            return None
        finally:
            if self.locale == start_locale:
                self.trigger.label = original_label
            else:
                self.trigger.label = lookup(self.locale, "download_pdf")
            self.trigger.enabled = True
