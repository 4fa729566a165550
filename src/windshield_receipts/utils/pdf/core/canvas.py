from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from windshield_receipts.utils.pdf.core.builder import build_pdf_bytes
from windshield_receipts.utils.pdf.core.drawing import _draw_image, _draw_line, _draw_text, _set_color
from windshield_receipts.utils.pdf.core.fonts import REGULAR
from windshield_receipts.utils.pdf.core.images import PdfImage
from windshield_receipts.utils.pdf.core.layout_common import PAGE_H, PAGE_W, color


@dataclass(frozen=True)
class TextRun:
    page: int
    x: float
    y: float
    text: str
    font: str
    size: float


@dataclass
class ReceiptCanvas:
    """
    Page-by-page drawing surface for one receipt. Keeps the raw content streams plus
    a log of every text run, so callers can check what landed on which page.
    """

    pages: List[List[str]] = field(default_factory=lambda: [[]])
    texts: List[TextRun] = field(default_factory=list)
    images: Dict[str, PdfImage] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def current_page(self) -> int:
        return len(self.pages) - 1

    def new_page(self) -> int:
        self.pages.append([])
        return self.current_page

    def text(
        self,
        text: str,
        x: float,
        y: float,
        font: str = REGULAR,
        size: float = 10,
        align: str = "left",
        color_name: str | None = None,
    ) -> None:
        ops = self.pages[-1]
        if color_name:
            ops.append(_set_color(color(color_name)))
        ops.append(_draw_text(text, x, y, font, size, align))
        if color_name:
            ops.append(_set_color(color("text")))
        self.texts.append(TextRun(self.current_page, x, y, str(text), font, size))

    def rule(self, x1: float, y1: float, x2: float, y2: float, color_name: str = "rule") -> None:
        self.pages[-1].append(_set_color(color(color_name)))
        self.pages[-1].append(_draw_line(x1, y1, x2, y2))
        self.pages[-1].append(_set_color(color("text")))

    def image(self, image: PdfImage, x: float, y: float, w: float, h: float) -> str:
        name = f"Im{len(self.images) + 1}"
        self.images[name] = image
        self.pages[-1].append(_draw_image(name, x, y, w, h))
        return name

    def page_text(self, page: int) -> List[str]:
        return [run.text for run in self.texts if run.page == page]

    def all_text(self) -> List[str]:
        return [run.text for run in self.texts]

    def find_page(self, text: str) -> int | None:
        """Page index of the first run containing `text`, or None."""
        for run in self.texts:
            if text in run.text:
                return run.page
        return None

    def to_pdf_bytes(self) -> bytes:
        streams = ["".join(ops) for ops in self.pages]
        return build_pdf_bytes(streams, self.images, page_size=(PAGE_W, PAGE_H))
