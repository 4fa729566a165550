from __future__ import annotations

import unicodedata

from windshield_receipts.utils.pdf.core.fonts import text_width_mm
from windshield_receipts.utils.pdf.core.layout_common import MM, PAGE_H_MM


def _normalize_ascii(text: str) -> str:
    """Remove diacritics to stay compatible with built-in PDF Type1 fonts."""
    normalized = unicodedata.normalize("NFKD", str(text))
    return normalized.encode("ascii", "ignore").decode("ascii")


def _escape_pdf_text(text: str) -> str:
    ascii_text = _normalize_ascii(text)
    return ascii_text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _pt(value_mm: float) -> str:
    return f"{value_mm * MM:.2f}"


def _pt_y(y_mm: float) -> str:
    # PDF y grows up from the page bottom
    return f"{(PAGE_H_MM - y_mm) * MM:.2f}"


def _draw_text(text: str, x: float, y: float, font: str, size: float, align: str = "left") -> str:
    if align == "right":
        x -= text_width_mm(text, font, size)
    elif align == "center":
        x -= text_width_mm(text, font, size) / 2
    safe = _escape_pdf_text(text)
    return f"BT {font} {size:g} Tf {_pt(x)} {_pt_y(y)} Td ({safe}) Tj ET\n"


def _draw_line(x1: float, y1: float, x2: float, y2: float, width: float = 0.2) -> str:
    return f"{width * MM:.2f} w {_pt(x1)} {_pt_y(y1)} m {_pt(x2)} {_pt_y(y2)} l S\n"


def _draw_image(name: str, x: float, y: float, w: float, h: float) -> str:
    """Place image XObject `name` with its top-left corner at (x, y)."""
    return f"q {_pt(w)} 0 0 {_pt(h)} {_pt(x)} {_pt_y(y + h)} cm /{name} Do Q\n"


def _set_color(rgb: str) -> str:
    return f"{rgb} rg {rgb} RG\n"
