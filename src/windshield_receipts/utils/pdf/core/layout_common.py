"""
Layout and style constants for receipt rendering.
Positions are millimetres measured from the top-left corner of an A4 page.
"""

from dataclasses import dataclass

MM = 72 / 25.4

# Page geometry (A4)
PAGE_W_MM, PAGE_H_MM = 210, 297
PAGE_W, PAGE_H = round(PAGE_W_MM * MM), round(PAGE_H_MM * MM)

MARGIN_LEFT = 20
MARGIN_RIGHT = 190
MARGIN_TOP = 20
CONTENT_BOTTOM = 270

# Column positions of the line-item table
COL_ITEM = 20
COL_DESCRIPTION = 35
COL_QTY = 120
COL_QTY_VALUE = 123
COL_PRICE = 140
COL_TOTAL = 170
COL_TOTAL_RIGHT = 175

# Totals block
TOTALS_LABEL_X = 140
TOTALS_RULE_X = 130

# Text wrap widths
WIDE_TEXT_WIDTH = 170
PAYMENT_NOTICE_WIDTH = 80

# Line heights for wrapped legal text
LEGAL_LINE_HEIGHT = 3.5
DISCLAIMER_LINE_HEIGHT = 4

# Logo box
LOGO_W, LOGO_H = 60, 20

# Colors (RGB components in 0-1 space encoded as strings for PDF ops)
COLORS = {
    "text": "0 0 0",
    "rule": "0.78 0.78 0.78",
    "signature_rule": "0.39 0.39 0.39",
    "attention": "0.71 0 0",
    "muted": "0.45 0.50 0.56",
}


def color(name: str) -> str:
    return COLORS.get(name, "0 0 0")


@dataclass(frozen=True)
class PageBreakPolicy:
    """
    Checkpoint thresholds (cursor y in mm). A new page is started when the cursor is below:
    - after_payment: right after the payment-info block
    - before_calibration: before the calibration-declined disclaimer
    - before_signature: before the signature block
    """

    after_payment: float = 220
    before_calibration: float = 180
    before_signature: float = 250
    content_bottom: float = CONTENT_BOTTOM
    top_margin: float = MARGIN_TOP


DEFAULT_POLICY = PageBreakPolicy()
