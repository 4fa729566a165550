"""
Layout cursor, page-break decisions and the fixed receipt section order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from windshield_receipts.core.models.job import Job
from windshield_receipts.core.models.variant import ReceiptVariant
from windshield_receipts.core.services.classifier import requires_signature, shows_calibration_disclaimer
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.layout_common import DEFAULT_POLICY, PageBreakPolicy

HEADER = "header"
INVOICE_HEADER = "invoice_header"
CUSTOMER = "customer"
LINE_ITEMS = "line_items"
TOTALS = "totals"
PAYMENT_INFO = "payment_info"
CALIBRATION_DISCLAIMER = "calibration_disclaimer"
WARRANTY = "warranty"
SIGNATURE = "signature"


@dataclass
class LayoutCursor:
    """Vertical position (mm from page top) and page index of one receipt being laid out."""

    y: float
    page: int = 0
    policy: PageBreakPolicy = DEFAULT_POLICY

    def advance(self, dy: float) -> float:
        self.y += dy
        return self.y


def start_cursor(policy: PageBreakPolicy = DEFAULT_POLICY) -> LayoutCursor:
    return LayoutCursor(y=policy.top_margin, page=0, policy=policy)


def break_page(canvas: ReceiptCanvas, cursor: LayoutCursor) -> None:
    cursor.page = canvas.new_page()
    cursor.y = cursor.policy.top_margin


def break_if_below(canvas: ReceiptCanvas, cursor: LayoutCursor, threshold: float) -> bool:
    """Checkpoint break: new page when the cursor is past `threshold`."""
    if cursor.y > threshold:
        break_page(canvas, cursor)
        return True
    return False


def ensure_room(canvas: ReceiptCanvas, cursor: LayoutCursor, height: float) -> bool:
    """
    New page when `height` mm of content would run past the content bottom.
    A block taller than a whole page is started at the top and not moved again.
    """
    if cursor.y + height > cursor.policy.content_bottom and cursor.y > cursor.policy.top_margin:
        break_page(canvas, cursor)
        return True
    return False


def section_sequence(job: Job, variant: ReceiptVariant) -> List[str]:
    sections = [HEADER, INVOICE_HEADER, CUSTOMER, LINE_ITEMS, TOTALS, PAYMENT_INFO]
    if shows_calibration_disclaimer(job, variant):
        sections.append(CALIBRATION_DISCLAIMER)
    sections.append(WARRANTY)
    if requires_signature(job, variant):
        sections.append(SIGNATURE)
    return sections


def flow_lines(
    canvas: ReceiptCanvas,
    cursor: LayoutCursor,
    lines: List[str],
    x: float,
    font: str,
    size: float,
    leading: float,
    color_name: str | None = None,
) -> None:
    """Write wrapped lines one by one, starting a new page before any line past the content bottom."""
    for line in lines:
        if cursor.y > cursor.policy.content_bottom:
            break_page(canvas, cursor)
        if line:
            canvas.text(line, x, cursor.y, font, size, color_name=color_name)
        cursor.advance(leading)


def place_title(canvas: ReceiptCanvas, cursor: LayoutCursor, title: str, x: float, font: str, size: float, color_name: str | None = None) -> None:
    if cursor.y > cursor.policy.content_bottom:
        break_page(canvas, cursor)
    canvas.text(title, x, cursor.y, font, size, color_name=color_name)
