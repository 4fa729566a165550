from __future__ import annotations

from windshield_receipts.core.models.job import Job
from windshield_receipts.core.models.variant import ReceiptVariant
from windshield_receipts.utils.formatting import format_date
from windshield_receipts.utils.invoice_number import build_invoice_number
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR
from windshield_receipts.utils.pdf.core.layout import LayoutCursor
from windshield_receipts.utils.pdf.core.layout_common import MARGIN_RIGHT

TITLE = "INVOICE"
TITLE_X = 150


def build_invoice_header_lines(job: Job) -> list[str]:
    return [
        f"Invoice #: {build_invoice_number(job.job_number)}",
        f"Date: {format_date(job.invoice_date)}",
    ]


def render_invoice_header(canvas: ReceiptCanvas, cursor: LayoutCursor, job: Job, variant: ReceiptVariant) -> None:
    y = cursor.y
    canvas.text(TITLE, TITLE_X, y, BOLD, 20, align="center")
    number_line, date_line = build_invoice_header_lines(job)
    canvas.text(number_line, MARGIN_RIGHT, y + 10, REGULAR, 10, align="right")
    canvas.text(date_line, MARGIN_RIGHT, y + 15, REGULAR, 10, align="right")
    canvas.text(variant.label, MARGIN_RIGHT, y + 20, REGULAR, 9, align="right", color_name="muted")
    cursor.advance(25)
