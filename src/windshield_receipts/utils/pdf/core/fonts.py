"""
Built-in Type1 fonts (Helvetica, Helvetica-Bold): resource names and glyph widths
used for right/centre alignment and word wrapping.
"""

from __future__ import annotations

from typing import Dict, List

REGULAR = "/F1"
BOLD = "/F2"

BASE_FONTS: Dict[str, str] = {
    REGULAR: "Helvetica",
    BOLD: "Helvetica-Bold",
}

# Advance widths (1/1000 em) for ASCII 32..126, from the standard AFM files.
_HELVETICA_WIDTHS = [
    278, 278, 355, 556, 556, 889, 667, 191, 333, 333, 389, 584, 278, 333, 278, 278,
    556, 556, 556, 556, 556, 556, 556, 556, 556, 556, 278, 278, 584, 584, 584, 556,
    1015, 667, 667, 722, 722, 667, 611, 778, 722, 278, 500, 667, 556, 833, 722, 778,
    667, 778, 722, 667, 611, 722, 667, 944, 667, 667, 611, 278, 278, 278, 469, 556,
    333, 556, 556, 500, 556, 556, 278, 556, 556, 222, 222, 500, 222, 833, 556, 556,
    556, 556, 333, 500, 278, 556, 500, 722, 500, 500, 500, 334, 260, 334, 584,
]

_HELVETICA_BOLD_WIDTHS = [
    278, 333, 474, 556, 556, 889, 722, 238, 333, 333, 389, 584, 278, 333, 278, 278,
    556, 556, 556, 556, 556, 556, 556, 556, 556, 556, 333, 333, 584, 584, 584, 611,
    975, 722, 722, 722, 722, 667, 611, 778, 722, 278, 556, 722, 611, 833, 722, 778,
    667, 778, 722, 667, 611, 722, 667, 944, 667, 667, 611, 333, 278, 333, 584, 556,
    333, 556, 611, 556, 611, 556, 333, 611, 611, 278, 278, 556, 278, 889, 611, 611,
    611, 611, 389, 556, 333, 611, 556, 778, 556, 556, 500, 389, 280, 389, 584,
]

_WIDTHS = {REGULAR: _HELVETICA_WIDTHS, BOLD: _HELVETICA_BOLD_WIDTHS}

PT_PER_MM = 72 / 25.4


def width_1000(font: str, ch: str) -> int:
    code = ord(ch)
    if code < 32 or code > 126:
        return 556
    return _WIDTHS.get(font, _HELVETICA_WIDTHS)[code - 32]


def text_width_mm(text: str, font: str, size: float) -> float:
    units = sum(width_1000(font, ch) for ch in str(text))
    return units * size / 1000.0 / PT_PER_MM


def wrap_text(text: str, width_mm: float, font: str, size: float) -> List[str]:
    """
    Greedy word wrap by rendered width. Newlines are kept as hard breaks, so an empty
    source line produces an empty output line (paragraph gap).
    """
    lines: List[str] = []
    for paragraph in str(text).split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if current and text_width_mm(candidate, font, size) > width_mm:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines
