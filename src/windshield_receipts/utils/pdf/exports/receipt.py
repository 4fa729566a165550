from __future__ import annotations

import base64
from pathlib import Path

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.filename import to_disk_filename
from windshield_receipts.utils.pdf.renderers.receipt_renderer import generate_receipt


def export_receipt_pdf(target: Path, job: Job, **options) -> Path:
    """
    Write the receipt PDF. `target` may be a directory (the derived filename is used)
    or a full file path. Returns the written path.
    """
    receipt = generate_receipt(job, **options)
    target = Path(target)
    path = target / to_disk_filename(receipt.filename) if target.is_dir() else target
    path.write_bytes(receipt.pdf_bytes)
    return path


def receipt_to_base64(job: Job, **options) -> tuple[str, str]:
    """(base64 PDF, filename) for callers that attach the receipt to an e-mail."""
    receipt = generate_receipt(job, **options)
    return base64.b64encode(receipt.pdf_bytes).decode("ascii"), receipt.filename
