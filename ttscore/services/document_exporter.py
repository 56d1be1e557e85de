"""
Document Exporter
ttscore/services/document_exporter.py

Turns a rendered summary into an A4 PDF:

  1. snapshot   — copy of the summary at the reference layout width,
                  export trigger removed (render_failure)
  2. rasterize  — Pillow bitmap at the supersampling factor, opaque
                  background; runs in a worker thread and is the only
                  await point (capture_failure)
  3. assemble   — reportlab A4 portrait in millimetres, image scaled to
                  page width with top padding; sliced across pages or
                  placed on one tall page (assembly_failure)
  4. filename   — <prefix>-<sanitized subject name>.pdf

The exporter knows nothing about scores; the summary is an opaque visual
artifact. Every stage failure is raised as ExportError with its kind.
"""

import asyncio
import re
from dataclasses import dataclass
from io import BytesIO
from typing import Optional, Tuple

import structlog
from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ttscore.config import Settings, get_settings
from ttscore.core.exceptions import ExportError
from ttscore.models.enumerations import ExportErrorKind
from ttscore.models.summary import RenderableSummary
from ttscore.services.rasterizer import SummaryRasterizer

logger = structlog.get_logger(__name__)

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_UNDERSCORE_RUN = re.compile(r"_+")


@dataclass
class ExportedDocument:
    """Output of DocumentExporter.export()."""
    filename: str
    content: bytes
    page_count: int
    media_type: str = "application/pdf"


def sanitize_name(name: str) -> str:
    """
    Replace every character outside [A-Za-z0-9] with '_' and collapse runs.

    "Jane  O'Brien!!" → "Jane_O_Brien_"
    """
    return _UNDERSCORE_RUN.sub("_", _NON_ALNUM.sub("_", name or ""))


def export_filename(subject_name: str, prefix: str) -> str:
    return f"{prefix}-{sanitize_name(subject_name)}.pdf"


def snapshot(summary: RenderableSummary, layout_width: int) -> RenderableSummary:
    """Detached copy at a fixed layout width, without the export trigger."""
    return summary.model_copy(
        update={"layout_width": layout_width, "trigger": None},
        deep=True,
    )


def assemble_pdf(
    image: Image.Image,
    top_padding_mm: float = 20.0,
    page_mode: str = "paginate",
    title: Optional[str] = None,
) -> Tuple[bytes, int]:
    """
    Place the bitmap on A4 pages. Returns (pdf_bytes, page_count).

    paginate:     page width = 210 mm, content sliced into page-height bands;
                  every page keeps the top padding.
    single_page:  one page, 210 mm wide and tall enough for the whole image
                  (never shorter than A4).
    """
    page_w, page_h = A4  # points
    img_w, img_h = image.size
    points_per_px = page_w / img_w
    scaled_h = img_h * points_per_px
    top_pad = top_padding_mm * mm

    buffer = BytesIO()

    if page_mode == "single_page":
        height = max(page_h, scaled_h + top_pad)
        pdf = canvas.Canvas(buffer, pagesize=(page_w, height))
        if title:
            pdf.setTitle(title)
        pdf.drawImage(ImageReader(image), 0, height - top_pad - scaled_h, width=page_w, height=scaled_h)
        pdf.showPage()
        pdf.save()
        return buffer.getvalue(), 1

    if page_mode != "paginate":
        raise ValueError(f"Unknown page mode: {page_mode!r}")

    available = page_h - top_pad
    if available <= 0:
        raise ValueError("Top padding leaves no room on the page")
    slice_px = max(1, int(available / points_per_px))

    pdf = canvas.Canvas(buffer, pagesize=A4)
    if title:
        pdf.setTitle(title)
    pages = 0
    for top in range(0, img_h, slice_px):
        band = image.crop((0, top, img_w, min(top + slice_px, img_h)))
        band_h = band.size[1] * points_per_px
        pdf.drawImage(ImageReader(band), 0, page_h - top_pad - band_h, width=page_w, height=band_h)
        pdf.showPage()
        pages += 1
    pdf.save()
    return buffer.getvalue(), pages


class DocumentExporter:
    """Snapshot → rasterize → assemble, each stage mapped to an ExportError kind."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rasterizer: Optional[SummaryRasterizer] = None,
    ):
        self.settings = settings or get_settings()
        self.rasterizer = rasterizer or SummaryRasterizer(
            scale=self.settings.EXPORT_SCALE,
            background=self.settings.EXPORT_BACKGROUND,
            font_path=self.settings.EXPORT_FONT_PATH,
        )

    async def export(self, summary: RenderableSummary, subject_name: str) -> ExportedDocument:
        filename = export_filename(subject_name, self.settings.EXPORT_FILENAME_PREFIX)
        logger.info("export_started", filename=filename)

        try:
            frozen = snapshot(summary, self.settings.EXPORT_LAYOUT_WIDTH_PX)
        except Exception as exc:
            raise ExportError(ExportErrorKind.RENDER_FAILURE, str(exc)) from exc

        try:
            image = await asyncio.to_thread(self.rasterizer.rasterize, frozen)
        except Exception as exc:
            raise ExportError(ExportErrorKind.CAPTURE_FAILURE, str(exc)) from exc

        try:
            content, pages = assemble_pdf(
                image,
                top_padding_mm=self.settings.EXPORT_TOP_PADDING_MM,
                page_mode=self.settings.EXPORT_PAGE_MODE,
                title=frozen.title,
            )
        except Exception as exc:
            raise ExportError(ExportErrorKind.ASSEMBLY_FAILURE, str(exc)) from exc

        logger.info(
            "export_completed",
            filename=filename,
            pages=pages,
            image_size=image.size,
            bytes=len(content),
        )
        return ExportedDocument(filename=filename, content=content, page_count=pages)
