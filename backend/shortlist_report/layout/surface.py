"""
PDF drawing surface - reportlab-backed implementation of IDrawingSurface

Responsibilities:
1. Text measurement and wrapping with the active font
2. Record drawing operations per page so any page can be revisited
3. Replay the recorded pages onto a reportlab canvas on save

Depends on:
- reportlab: font metrics (pdfmetrics), wrapping (simpleSplit), PDF output

Test points:
- test_new_page_and_select: page creation / revisiting
- test_font_state: set_font / get_font round trip
- test_wrap_empty_text: empty text wraps to one blank line
- test_save_writes_pdf: artifact written with the expected page count
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from ..interfaces import IDrawingSurface, LayoutError

# Line spacing of multi-line text drawn with max_width
LINE_HEIGHT_FACTOR = 1.15

STANDARD_FONTS = {
    ("helvetica", "normal"): "Helvetica",
    ("helvetica", "bold"): "Helvetica-Bold",
    ("helvetica", "italic"): "Helvetica-Oblique",
    ("helvetica", "bolditalic"): "Helvetica-BoldOblique",
    ("times", "normal"): "Times-Roman",
    ("times", "bold"): "Times-Bold",
    ("times", "italic"): "Times-Italic",
    ("times", "bolditalic"): "Times-BoldItalic",
    ("courier", "normal"): "Courier",
    ("courier", "bold"): "Courier-Bold",
    ("courier", "italic"): "Courier-Oblique",
    ("courier", "bolditalic"): "Courier-BoldOblique",
}


@dataclass
class TextOp:
    """Recorded text placement (top-left origin)"""
    text: str
    x: float
    y: float
    font_name: str
    size: float
    align: str = "left"


@dataclass
class LineOp:
    """Recorded line"""
    x1: float
    y1: float
    x2: float
    y2: float
    width: float


@dataclass
class PageRecord:
    """One page of the document as an ordered list of operations"""
    index: int
    ops: list[TextOp | LineOp] = field(default_factory=list)

    def texts(self) -> list[str]:
        return [op.text for op in self.ops if isinstance(op, TextOp)]

    def text_ops(self) -> list[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    def lines(self) -> list[LineOp]:
        return [op for op in self.ops if isinstance(op, LineOp)]

    def find(self, text: str) -> TextOp | None:
        """First text operation with exactly this text"""
        for op in self.text_ops():
            if op.text == text:
                return op
        return None


class PdfSurface(IDrawingSurface):
    """Recording surface that renders to PDF with reportlab"""

    def __init__(
        self,
        page_width: float = 576.0,
        page_height: float = 936.0,
        output_dir: Path | None = None,
        title: str | None = None,
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.output_dir = Path(output_dir) if output_dir else Path(".")
        self.title = title
        self.pages: list[PageRecord] = [PageRecord(index=1)]
        self._current = 0
        self._family = "helvetica"
        self._style = "normal"
        self._size = 16.0
        self._line_width = 0.2

    # === Pages ===

    def new_page(self) -> None:
        self.pages.append(PageRecord(index=len(self.pages) + 1))
        self._current = len(self.pages) - 1

    def current_page_index(self) -> int:
        return self._current + 1

    def page_count(self) -> int:
        return len(self.pages)

    def select_page(self, index: int) -> None:
        if not 1 <= index <= len(self.pages):
            raise LayoutError(f"page {index} does not exist (page count {len(self.pages)})")
        self._current = index - 1

    @property
    def current_page(self) -> PageRecord:
        return self.pages[self._current]

    # === Fonts and measurement ===

    def set_font(self, family: str, style: str, size: float) -> None:
        key = (family.lower(), style.lower())
        if key not in STANDARD_FONTS:
            raise LayoutError(f"unsupported font: {family} {style}")
        self._family, self._style = key
        self._size = float(size)

    def get_font(self) -> tuple[str, str, float]:
        return self._family, self._style, self._size

    @property
    def font_name(self) -> str:
        return STANDARD_FONTS[(self._family, self._style)]

    def measure_width(self, text: str) -> float:
        return pdfmetrics.stringWidth(text, self.font_name, self._size)

    def wrap_to_width(self, text: str, max_width: float) -> list[str]:
        return simpleSplit(text, self.font_name, self._size, max_width) or [""]

    # === Drawing ===

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        align: str = "left",
        max_width: float | None = None,
    ) -> None:
        if align not in ("left", "center", "right"):
            raise LayoutError(f"unsupported alignment: {align}")
        lines = self.wrap_to_width(text, max_width) if max_width else [text]
        for i, line in enumerate(lines):
            self.current_page.ops.append(TextOp(
                text=line,
                x=x,
                y=y + i * self._size * LINE_HEIGHT_FACTOR,
                font_name=self.font_name,
                size=self._size,
                align=align,
            ))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.current_page.ops.append(LineOp(x1, y1, x2, y2, self._line_width))

    def set_line_width(self, width: float) -> None:
        self._line_width = width

    # === Output ===

    def save(self, name: str) -> Path:
        """Replay every recorded page onto a reportlab canvas"""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        pdf_path = self.output_dir / f"{name}.pdf"

        c = canvas.Canvas(str(pdf_path), pagesize=(self.page_width, self.page_height))
        c.setTitle(self.title or name)
        for page in self.pages:
            for op in page.ops:
                if isinstance(op, TextOp):
                    self._render_text(c, op)
                else:
                    c.setLineWidth(op.width)
                    c.line(op.x1, self._flip(op.y1), op.x2, self._flip(op.y2))
            c.showPage()
        c.save()
        return pdf_path

    def _render_text(self, c: canvas.Canvas, op: TextOp) -> None:
        c.setFont(op.font_name, op.size)
        y = self._flip(op.y)
        if op.align == "center":
            c.drawCentredString(op.x, y, op.text)
        elif op.align == "right":
            c.drawRightString(op.x, y, op.text)
        else:
            c.drawString(op.x, y, op.text)

    def _flip(self, y: float) -> float:
        """Top-left y to reportlab's bottom-left y"""
        return self.page_height - y
