from __future__ import annotations

import re

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.formatting import format_date
from windshield_receipts.utils.invoice_number import build_invoice_number

RECEIPT_EXTENSION = ".pdf"

_WHITESPACE = re.compile(r"\s+")


def _customer_slug(job: Job) -> str:
    if job.is_business and job.business_name:
        name = job.business_name
    else:
        name = f"{job.last_name}_{job.first_name}"
    return _WHITESPACE.sub("_", name.strip())


def build_receipt_filename(job: Job) -> str:
    """`Doe_John_Jan_5_2026_0126-1234.pdf`; depends only on the job record."""
    date_part = _WHITESPACE.sub("_", format_date(job.invoice_date)).replace(",", "")
    return f"{_customer_slug(job)}_{date_part}_{build_invoice_number(job.job_number)}{RECEIPT_EXTENSION}"


_PATH_SEPARATORS = re.compile(r"[/\\]")


def to_disk_filename(filename: str) -> str:
    """Receipt filename safe to join onto a directory; `A/C_Auto_Glass_...` -> `A-C_Auto_Glass_...`."""
    return _PATH_SEPARATORS.sub("-", filename)
