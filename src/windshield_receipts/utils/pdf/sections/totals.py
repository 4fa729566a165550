from __future__ import annotations

from typing import List, Tuple

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.formatting import format_currency
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR
from windshield_receipts.utils.pdf.core.layout import LayoutCursor, ensure_room
from windshield_receipts.utils.pdf.core.layout_common import MARGIN_RIGHT, TOTALS_LABEL_X, TOTALS_RULE_X

TOTALS_LINE_HEIGHT = 8


def build_totals_lines(job: Job, subtotal: float) -> List[Tuple[str, str, bool]]:
    """(label, amount, bold) rows; PAID and BALANCE DUE only when positive."""
    lines = [
        ("SUBTOTAL", format_currency(subtotal), False),
        ("TOTAL", format_currency(job.total_due), True),
    ]
    if job.amount_paid > 0:
        lines.append(("PAID", format_currency(job.amount_paid), False))
    if job.balance_due > 0:
        lines.append(("BALANCE DUE", format_currency(job.balance_due), True))
    return lines


def render_totals(canvas: ReceiptCanvas, cursor: LayoutCursor, job: Job, subtotal: float) -> None:
    lines = build_totals_lines(job, subtotal)
    ensure_room(canvas, cursor, TOTALS_LINE_HEIGHT * (len(lines) + 1))
    canvas.rule(TOTALS_RULE_X, cursor.y, MARGIN_RIGHT, cursor.y)
    cursor.advance(TOTALS_LINE_HEIGHT)
    for label, amount, bold in lines:
        font = BOLD if bold else REGULAR
        canvas.text(label, TOTALS_LABEL_X, cursor.y, font, 10)
        canvas.text(amount, MARGIN_RIGHT, cursor.y, font, 10, align="right")
        cursor.advance(TOTALS_LINE_HEIGHT)
    cursor.advance(5)
