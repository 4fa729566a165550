from __future__ import annotations

import logging
from dataclasses import dataclass

from windshield_receipts.core.models.job import Job
from windshield_receipts.core.models.variant import ReceiptVariant
from windshield_receipts.core.services.classifier import classify_job
from windshield_receipts.core.services.company import CompanyInfo, load_company
from windshield_receipts.core.services.job_loader import validate_job
from windshield_receipts.utils.filename import build_receipt_filename
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.images import LogoLoadResult
from windshield_receipts.utils.pdf.core.layout import (
    CALIBRATION_DISCLAIMER,
    CUSTOMER,
    HEADER,
    INVOICE_HEADER,
    LINE_ITEMS,
    PAYMENT_INFO,
    SIGNATURE,
    TOTALS,
    WARRANTY,
    break_if_below,
    section_sequence,
    start_cursor,
)
from windshield_receipts.utils.pdf.core.layout_common import DEFAULT_POLICY, PageBreakPolicy
from windshield_receipts.utils.pdf.sections.calibration import render_calibration_disclaimer
from windshield_receipts.utils.pdf.sections.customer import render_customer
from windshield_receipts.utils.pdf.sections.header import render_header
from windshield_receipts.utils.pdf.sections.invoice_header import render_invoice_header
from windshield_receipts.utils.pdf.sections.items_table import render_items_table
from windshield_receipts.utils.pdf.sections.payment import render_payment
from windshield_receipts.utils.pdf.sections.signature import render_signature
from windshield_receipts.utils.pdf.sections.totals import render_totals
from windshield_receipts.utils.pdf.sections.warranty import warranty_renderer

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedReceipt:
    canvas: ReceiptCanvas
    variant: ReceiptVariant
    subtotal: float
    logo: LogoLoadResult


@dataclass(frozen=True)
class GeneratedReceipt:
    pdf_bytes: bytes
    filename: str
    variant: ReceiptVariant
    page_count: int

    def as_tuple(self) -> tuple[bytes, str]:
        return self.pdf_bytes, self.filename


def render_receipt(
    job: Job,
    company: CompanyInfo | None = None,
    policy: PageBreakPolicy = DEFAULT_POLICY,
    logo: LogoLoadResult | None = None,
) -> RenderedReceipt:
    """
    Lay out every section of the receipt in its fixed order:
    header, invoice header, customer, line items, totals, payment info,
    [calibration disclaimer], warranty, [signature].
    """
    validate_job(job)
    company = company or load_company()
    variant = classify_job(job)
    canvas = ReceiptCanvas()
    cursor = start_cursor(policy)

    subtotal = 0.0
    for section in section_sequence(job, variant):
        if section == HEADER:
            logo = render_header(canvas, cursor, company, logo)
            cursor.advance(-10)
        elif section == INVOICE_HEADER:
            render_invoice_header(canvas, cursor, job, variant)
            cursor.advance(5)
        elif section == CUSTOMER:
            render_customer(canvas, cursor, job)
            cursor.advance(5)
        elif section == LINE_ITEMS:
            subtotal = render_items_table(canvas, cursor, job)
        elif section == TOTALS:
            render_totals(canvas, cursor, job, subtotal)
            cursor.advance(5)
        elif section == PAYMENT_INFO:
            render_payment(canvas, cursor, job)
            break_if_below(canvas, cursor, policy.after_payment)
            cursor.advance(10)
        elif section == CALIBRATION_DISCLAIMER:
            break_if_below(canvas, cursor, policy.before_calibration)
            render_calibration_disclaimer(canvas, cursor)
        elif section == WARRANTY:
            warranty_renderer(variant)(canvas, cursor)
        elif section == SIGNATURE:
            break_if_below(canvas, cursor, policy.before_signature)
            cursor.advance(10)
            render_signature(canvas, cursor, job)

    return RenderedReceipt(canvas=canvas, variant=variant, subtotal=subtotal, logo=logo)


def generate_receipt(
    job: Job,
    company: CompanyInfo | None = None,
    policy: PageBreakPolicy = DEFAULT_POLICY,
    logo: LogoLoadResult | None = None,
) -> GeneratedReceipt:
    """Render the receipt for `job` and return the PDF bytes with the download filename."""
    rendered = render_receipt(job, company=company, policy=policy, logo=logo)
    filename = build_receipt_filename(job)
    pdf_bytes = rendered.canvas.to_pdf_bytes()
    LOGGER.info(
        "Generated %s for job %s (%s, %d page(s))",
        filename,
        job.job_number,
        rendered.variant.value,
        rendered.canvas.page_count,
    )
    return GeneratedReceipt(
        pdf_bytes=pdf_bytes,
        filename=filename,
        variant=rendered.variant,
        page_count=rendered.canvas.page_count,
    )
