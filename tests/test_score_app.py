# tests/test_score_app.py

"""
Controller Tests - Input events, submit, locale toggle, reset and export
"""

import asyncio

import pytest

from ttscore.core.exceptions import ExportError
from ttscore.models.enumerations import GroupKey, Locale
from ttscore.services.document_exporter import DocumentExporter, ExportedDocument
from ttscore.services.presenter import EMPTY_DISPLAY
from ttscore.services.score_app import ScoringApp


class RecordingExporter:
    """Captures the trigger state seen while the export is running."""

    def __init__(self, app=None, fail=False):
        self.app = app
        self.fail = fail
        self.seen = []
        self.calls = 0

    async def export(self, summary, subject_name):
        self.calls += 1
        if self.app is not None:
            self.seen.append((self.app.trigger.enabled, self.app.trigger.label))
        if self.fail:
            raise ExportError("capture_failure", "boom")
        return ExportedDocument(filename=f"x-{subject_name}.pdf", content=b"%PDF-1.4", page_count=1)


class TestOnInput:

    def test_valid_input_updates_live_display(self, scoring_app, notifier):
        view = scoring_app.on_input("movement_1", "20")
        movement = view.groups[0]
        assert movement.fields[0].band_label == "Baik"
        # 20 / 6
        assert movement.mean_display == "3.3 (Kurang Baik)"
        assert notifier.messages == []

    @pytest.mark.parametrize(
        "raw", ["31", "-1", "abc", "\u0662\u0660", pytest.param("1" * 5000, id="oversized_digits")]
    )
    def test_invalid_input_shows_modal_once_and_clears(self, scoring_app, notifier, raw):
        scoring_app.on_input("movement_1", "30")
        scoring_app.on_input("movement_2", "30")
        view = scoring_app.on_input("movement_2", raw)

        assert notifier.messages == ["Nilai harus berupa angka bulat antara 0 dan 30."]
        assert notifier.visible
        assert scoring_app.session.value(GroupKey.MOVEMENT, 2) is None
        assert view.groups[0].fields[1].band_label == ""
        # recomputed without the rejected entry: 30 / 6
        assert view.groups[0].mean_display == "5.0 (Kurang Baik)"

    def test_modal_uses_current_locale(self, notifier):
        app = ScoringApp(notifier=notifier, locale=Locale.EN)
        app.on_input("outcome_3", "99")
        assert notifier.messages == ["Value must be a whole number between 0 and 30."]

    def test_clearing_last_entry_shows_empty_sentinel(self, scoring_app):
        scoring_app.on_input("outcome_1", "10")
        view = scoring_app.on_input("outcome_1", "")
        assert view.groups[1].mean_display == EMPTY_DISPLAY

    def test_long_subject_is_accepted(self, scoring_app):
        scoring_app.set_subject(name="A" * 300, age="1" * 50)
        assert scoring_app.session.subject.name == "A" * 300

    def test_form_view_reflects_busy_trigger(self, filled_app):
        filled_app.on_submit()
        filled_app.trigger.enabled = False
        filled_app.trigger.label = "Membuat PDF..."
        trigger = filled_app.form_view().result.trigger
        assert trigger.enabled is False
        assert trigger.label == "Membuat PDF..."


class TestOnSubmit:

    def test_submit_shows_result(self, filled_app):
        view = filled_app.on_submit()
        assert view.result_visible
        assert view.result.total_value == "20.0"
        assert view.result.total_band == "Baik"
        assert view.result.subject_rows[2].value == "Laki-laki"

    def test_submit_with_empty_group_shows_nothing(self, scoring_app):
        scoring_app.on_input("movement_1", "20")
        view = scoring_app.on_submit()
        assert view.result is None
        assert not view.result_visible
        assert scoring_app.on_submit() == view


class TestLocaleToggle:

    def test_toggle_reprojects_without_recompute(self, filled_app):
        filled_app.on_submit()
        result_before = filled_app.result
        id_view = filled_app.form_view()

        en_view = filled_app.on_toggle_locale()
        assert filled_app.locale == Locale.EN
        assert filled_app.result is result_before
        assert en_view.result.total_value == id_view.result.total_value
        assert en_view.result.total_band == "Good"
        assert en_view.groups[0].fields[0].band_label == "Good"
        assert en_view.language_name == "English"
        assert en_view.result.trigger.label == "Download PDF"

        back = filled_app.on_toggle_locale()
        assert back == id_view

    def test_toggle_many_times_does_not_drift(self, filled_app):
        filled_app.on_submit()
        values = set()
        for _ in range(10):
            view = filled_app.on_toggle_locale()
            values.add((view.result.total_value, view.groups[0].mean_display.split()[0]))
        assert values == {("20.0", "20.0")}


class TestOnReset:

    def test_reset_clears_everything(self, filled_app):
        filled_app.on_submit()
        view = filled_app.on_reset()
        assert [g.mean_display for g in view.groups] == [EMPTY_DISPLAY, EMPTY_DISPLAY]
        assert view.result is None
        assert not view.result_visible
        assert filled_app.session.subject.name == ""

    def test_submit_after_reset_is_noop(self, filled_app):
        filled_app.on_submit()
        filled_app.on_reset()
        view = filled_app.on_submit()
        assert view.result is None


class TestOnExport:

    def test_nothing_to_export(self, scoring_app):
        exporter = RecordingExporter()
        scoring_app.exporter = exporter
        assert asyncio.run(scoring_app.on_export()) is None
        assert exporter.calls == 0

    def test_trigger_disabled_during_export_and_restored(self, filled_app):
        filled_app.on_submit()
        exporter = RecordingExporter(filled_app)
        filled_app.exporter = exporter

        document = asyncio.run(filled_app.on_export())

        assert document.filename == "x-Budi Santoso.pdf"
        assert exporter.seen == [(False, "Membuat PDF...")]
        assert filled_app.trigger.enabled is True
        assert filled_app.trigger.label == "Unduh PDF"

    def test_failure_shows_generic_notice_and_restores(self, filled_app, notifier):
        filled_app.on_submit()
        filled_app.exporter = RecordingExporter(filled_app, fail=True)

        assert asyncio.run(filled_app.on_export()) is None

        assert notifier.messages == ["Gagal membuat PDF. Silakan coba lagi."]
        assert filled_app.trigger.enabled is True
        assert filled_app.trigger.label == "Unduh PDF"

    def test_busy_trigger_blocks_second_export(self, filled_app):
        filled_app.on_submit()
        exporter = RecordingExporter()
        filled_app.exporter = exporter
        filled_app.trigger.enabled = False
        assert asyncio.run(filled_app.on_export()) is None
        assert exporter.calls == 0

    def test_real_export(self, filled_app, export_settings):
        filled_app.on_submit()
        filled_app.exporter = DocumentExporter(export_settings)
        document = asyncio.run(filled_app.on_export())
        assert document.filename == "Hasil-Tes-Tenis-Meja-Budi_Santoso.pdf"
        assert document.content.startswith(b"%PDF")
