from __future__ import annotations

from typing import List

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.formatting import format_date
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR, wrap_text
from windshield_receipts.utils.pdf.core.layout import LayoutCursor, ensure_room
from windshield_receipts.utils.pdf.core.layout_common import MARGIN_LEFT, PAYMENT_NOTICE_WIDTH

CARD_PAYMENT_NOTICE = (
    'CARD PAYMENT NOTICE: Card payments will appear on your bank statement as "Christian Trevino". '
    "Disputed charges that are confirmed as valid may be subject to a $25 processing fee, "
    "in addition to the original service total."
)
NOTICE_SIZE = 8
NOTICE_LEADING = 4


def build_notice_lines() -> List[str]:
    return wrap_text(CARD_PAYMENT_NOTICE, PAYMENT_NOTICE_WIDTH, REGULAR, NOTICE_SIZE)


def render_payment(canvas: ReceiptCanvas, cursor: LayoutCursor, job: Job) -> None:
    notice = build_notice_lines()
    ensure_room(canvas, cursor, 11 + len(notice) * NOTICE_LEADING)
    canvas.text("PAYMENT INFO", MARGIN_LEFT, cursor.y, BOLD, 9)
    cursor.advance(6)
    canvas.text(f"DUE DATE: {format_date(job.invoice_date)}", MARGIN_LEFT, cursor.y, REGULAR, 9)
    cursor.advance(5)
    for idx, line in enumerate(notice):
        canvas.text(line, MARGIN_LEFT, cursor.y + idx * NOTICE_LEADING, REGULAR, NOTICE_SIZE)
    cursor.advance(len(notice) * NOTICE_LEADING + 5)
