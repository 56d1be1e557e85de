"""
Summary Rasterizer
ttscore/services/rasterizer.py

Lays out a RenderableSummary and paints it into an opaque RGB bitmap with
Pillow. All geometry is expressed in CSS pixels and multiplied by the
supersampling factor, so a 1024 px layout at scale 2 yields a 2048 px wide
image.

Layout (top to bottom):
    title, underlined
    label/value grid (two columns at >= 768 px, one column below)
    total box (label, total mean, total band)
    quoted encouragement message
    thank-you line
    export trigger (only when still present in the summary)
"""

from typing import Callable, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ttscore.models.enumerations import MessageTone
from ttscore.models.summary import RenderableSummary, SummaryRow

# Tailwind palette used by the on-screen summary
PALETTE = {
    "white": "#ffffff",
    "slate-100": "#f1f5f9",
    "slate-400": "#94a3b8",
    "slate-500": "#64748b",
    "slate-700": "#334155",
    "slate-800": "#1e293b",
    "indigo-50": "#eef2ff",
    "indigo-500": "#6366f1",
    "indigo-600": "#4f46e5",
    "indigo-700": "#4338ca",
    "indigo-800": "#3730a3",
    "emerald": "#059669",
    "blue": "#2563eb",
    "orange": "#ea580c",
}

TONE_COLORS = {
    MessageTone.AFFIRMATIVE: PALETTE["emerald"],
    MessageTone.ENCOURAGING: PALETTE["orange"],
}

DEFAULT_VIEWPORT_WIDTH = 1024
TWO_COLUMN_BREAKPOINT = 768

PADDING = 32
BORDER_TOP = 4
GAP_X = 32
GAP_Y = 16
LINE_HEIGHT = 1.5

DrawOp = Callable[[ImageDraw.ImageDraw], None]


class SummaryRasterizer:
    """Paint a summary at a fixed supersampling factor on an opaque background."""

    def __init__(
        self,
        scale: int = 2,
        background: str = "#ffffff",
        font_path: Optional[str] = None,
        viewport_width: int = DEFAULT_VIEWPORT_WIDTH,
    ):
        if scale < 1:
            raise ValueError("scale must be >= 1")
        self.scale = scale
        self.background = background
        self.font_path = font_path
        self.viewport_width = viewport_width
        self._fonts = {}

    # ------------------------------------------------------------------
    # Fonts and measuring
    # ------------------------------------------------------------------

    def _font(self, size: int) -> ImageFont.ImageFont:
        px = size * self.scale
        if px not in self._fonts:
            if self.font_path:
                self._fonts[px] = ImageFont.truetype(self.font_path, px)
            else:
                self._fonts[px] = ImageFont.load_default(size=px)
        return self._fonts[px]

    def _px(self, value: float) -> int:
        return int(round(value * self.scale))

    def _line(self, size: int) -> int:
        return self._px(size * LINE_HEIGHT)

    @staticmethod
    def _text_width(draw: ImageDraw.ImageDraw, text: str, font) -> int:
        return int(round(draw.textlength(text, font=font)))

    def _wrap(self, draw, text: str, font, max_width: int) -> List[str]:
        words = text.split()
        if not words:
            return [""]
        lines, current = [], words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if self._text_width(draw, candidate, font) <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
        return lines

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _grid_cells(self, summary: RenderableSummary, columns: int) -> List[Optional[SummaryRow]]:
        cells: List[Optional[SummaryRow]] = list(summary.subject_rows)
        if columns == 2 and len(cells) % 2:
            cells.append(None)  # spacer keeps both score rows on one line
        cells.extend(summary.score_rows)
        return cells

    def _layout(
        self, draw: ImageDraw.ImageDraw, summary: RenderableSummary, width: int
    ) -> Tuple[int, List[DrawOp]]:
        ops: List[DrawOp] = []
        s = self._px
        full_w = s(width)
        inner_left = s(PADDING)
        inner_right = full_w - s(PADDING)
        inner_w = inner_right - inner_left
        center_x = full_w // 2

        ops.append(lambda d: d.rectangle([0, 0, full_w, s(BORDER_TOP)], fill=PALETTE["indigo-600"]))
        y = s(BORDER_TOP + PADDING)

        # Title
        title_font = self._font(24)
        title_y = y
        ops.append(lambda d: d.text(
            (center_x, title_y), summary.title, font=title_font, fill=PALETTE["slate-800"],
            anchor="ma", stroke_width=max(1, self.scale // 2), stroke_fill=PALETTE["slate-800"],
        ))
        y += self._line(24) + s(16)
        rule_y = y
        ops.append(lambda d: d.line([inner_left, rule_y, inner_right, rule_y], fill=PALETTE["slate-100"], width=s(1)))
        y += s(24)

        # Label/value grid
        columns = 2 if width >= TWO_COLUMN_BREAKPOINT else 1
        col_w = (inner_w - s(GAP_X) * (columns - 1)) // columns
        label_font = self._font(16)
        detail_font = self._font(12)
        row_h = self._line(16) + s(8)
        cells = self._grid_cells(summary, columns)
        for index, cell in enumerate(cells):
            col = index % columns
            row_top = y + (index // columns) * (row_h + s(GAP_Y))
            if cell is not None:
                ops.append(self._cell_op(cell, inner_left + col * (col_w + s(GAP_X)), row_top,
                                         col_w, row_h, label_font, detail_font))
        rows = (len(cells) + columns - 1) // columns
        y += rows * row_h + max(rows - 1, 0) * s(GAP_Y) + s(32)

        # Total box
        box_top = y
        box_inner = s(24)
        total_label_font = self._font(14)
        total_value_font = self._font(36)
        total_band_font = self._font(18)
        label_y = box_top + box_inner
        value_y = label_y + self._line(14) + s(4)
        band_y = value_y + self._line(36) + s(8)
        box_bottom = band_y + self._line(18) + box_inner
        ops.append(lambda d: d.rounded_rectangle(
            [inner_left, box_top, inner_right, box_bottom], radius=s(12), fill=PALETTE["indigo-50"]))
        ops.append(lambda d: d.text(
            (center_x, label_y), summary.total_label.upper(), font=total_label_font,
            fill=PALETTE["indigo-500"], anchor="ma"))
        ops.append(lambda d: d.text(
            (center_x, value_y), summary.total_value, font=total_value_font,
            fill=PALETTE["indigo-700"], anchor="ma",
            stroke_width=self.scale, stroke_fill=PALETTE["indigo-700"]))
        ops.append(lambda d: d.text(
            (center_x, band_y), summary.total_band, font=total_band_font,
            fill=PALETTE["indigo-800"], anchor="ma",
            stroke_width=max(1, self.scale // 2), stroke_fill=PALETTE["indigo-800"]))
        y = box_bottom + s(24)

        # Message
        message_font = self._font(18)
        color = TONE_COLORS[summary.tone]
        for line in self._wrap(draw, f"\"{summary.message}\"", message_font, inner_w):
            line_y = y
            ops.append(lambda d, line=line, line_y=line_y: d.text(
                (center_x, line_y), line, font=message_font, fill=color, anchor="ma"))
            y += self._line(18)
        y += s(8) + s(16)

        # Thank-you line
        thanks_font = self._font(14)
        thanks_y = y
        ops.append(lambda d: d.text(
            (center_x, thanks_y), summary.thank_you, font=thanks_font,
            fill=PALETTE["slate-400"], anchor="ma"))
        y += self._line(14) + s(24)

        # Export trigger
        if summary.trigger is not None:
            button_font = self._font(16)
            label_w = self._text_width(draw, summary.trigger.label, button_font)
            button_w = label_w + s(48)
            button_h = self._line(16) + s(16)
            button_top = y
            left = center_x - button_w // 2
            fill = PALETTE["slate-800"] if summary.trigger.enabled else PALETTE["slate-500"]
            ops.append(lambda d: d.rounded_rectangle(
                [left, button_top, left + button_w, button_top + button_h], radius=s(8), fill=fill))
            ops.append(lambda d: d.text(
                (center_x, button_top + button_h // 2), summary.trigger.label, font=button_font,
                fill=PALETTE["white"], anchor="mm"))
            y += button_h

        y += s(PADDING)
        return y, ops

    def _cell_op(self, cell: SummaryRow, left: int, top: int, width: int, height: int,
                 label_font, detail_font) -> DrawOp:
        s = self._px
        right = left + width
        bottom = top + height

        def op(d: ImageDraw.ImageDraw) -> None:
            d.text((left, top), cell.label, font=label_font, fill=PALETTE["slate-500"])
            x = right
            if cell.detail:
                detail = f"({cell.detail})".upper()
                d.text((x, top + s(4)), detail, font=detail_font, fill=PALETTE["slate-400"], anchor="ra")
                x -= self._text_width(d, detail, detail_font) + s(4)
            color = PALETTE.get(cell.accent or "", PALETTE["slate-700"])
            d.text((x, top), cell.value, font=label_font, fill=color, anchor="ra",
                   stroke_width=max(1, self.scale // 2), stroke_fill=color)
            d.line([left, bottom, right, bottom], fill=PALETTE["slate-100"], width=s(1))

        return op

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def rasterize(self, summary: RenderableSummary) -> Image.Image:
        """Return an RGB image (no alpha) of the summary."""
        width = summary.layout_width or self.viewport_width
        # Measuring pass on a scratch surface, then paint at the final height
        scratch = ImageDraw.Draw(Image.new("RGB", (1, 1), self.background))
        height, ops = self._layout(scratch, summary, width)

        image = Image.new("RGB", (self._px(width), height), self.background)
        draw = ImageDraw.Draw(image)
        for op in ops:
            op(draw)
        return image
