from __future__ import annotations

import logging

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.formatting import format_date
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR
from windshield_receipts.utils.pdf.core.images import IMAGE_ERRORS, prepare_signature
from windshield_receipts.utils.pdf.core.layout import LayoutCursor, ensure_room

LOGGER = logging.getLogger(__name__)

TITLE = "CUSTOMER ACKNOWLEDGMENT"
ACKNOWLEDGMENT = "By signing below, I acknowledge that I have read and agree to the warranty terms stated above."
SIGNATURE_LINE = (20, 100)
DATE_LINE = (120, 180)


def space_needed(with_image: bool) -> float:
    return 55 if with_image else 35


def render_signature(canvas: ReceiptCanvas, cursor: LayoutCursor, job: Job) -> None:
    """
    Acknowledgment sentence plus signature and date lines. A captured signature is
    drawn above the line; if it can't be decoded the blank lines are printed instead.
    """
    ensure_room(canvas, cursor, space_needed(bool(job.signature_image)))

    canvas.text(TITLE, SIGNATURE_LINE[0], cursor.y, BOLD, 9)
    cursor.advance(8)
    canvas.text(ACKNOWLEDGMENT, SIGNATURE_LINE[0], cursor.y, REGULAR, 8)
    cursor.advance(12)

    if job.signature_image:
        try:
            signature = prepare_signature(job.signature_image)
        except IMAGE_ERRORS as exc:
            LOGGER.warning("Signature image for job %s unusable, printing blank line: %s", job.job_number, exc)
        else:
            y = cursor.y
            canvas.rule(SIGNATURE_LINE[0], y + 15, SIGNATURE_LINE[1], y + 15, color_name="signature_rule")
            canvas.image(signature, SIGNATURE_LINE[0], y - 2, SIGNATURE_LINE[1] - SIGNATURE_LINE[0], 18)
            canvas.text("Customer Signature", SIGNATURE_LINE[0], y + 20, REGULAR, 8)
            canvas.text(f"Date: {format_date()}", DATE_LINE[0], y + 10, REGULAR, 8)
            cursor.advance(30)
            return

    y = cursor.y
    canvas.rule(SIGNATURE_LINE[0], y, SIGNATURE_LINE[1], y, color_name="signature_rule")
    canvas.text("Customer Signature", SIGNATURE_LINE[0], y + 5, REGULAR, 8)
    canvas.rule(DATE_LINE[0], y, DATE_LINE[1], y, color_name="signature_rule")
    canvas.text("Date", DATE_LINE[0], y + 5, REGULAR, 8)
    cursor.advance(15)
