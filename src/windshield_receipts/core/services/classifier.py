from __future__ import annotations

from windshield_receipts.core.models.job import CustomerType, Job, JobType
from windshield_receipts.core.models.variant import ReceiptVariant


def classify_job(job: Job) -> ReceiptVariant:
    """
    Pick the receipt variant. Rules are checked in order, first match wins:
    dealer, fleet, single-part windshield repair, any windshield replacement, other glass.
    """
    if job.customer_type == CustomerType.DEALER:
        return ReceiptVariant.DEALER
    if job.customer_type == CustomerType.FLEET:
        return ReceiptVariant.FLEET

    parts = job.parts
    job_types = {p.job_type for p in parts}
    if JobType.WINDSHIELD_REPAIR in job_types and len(parts) == 1:
        return ReceiptVariant.ROCK_CHIP_REPAIR
    if JobType.WINDSHIELD_REPLACEMENT in job_types:
        return ReceiptVariant.WINDSHIELD_REPLACEMENT
    return ReceiptVariant.OTHER_GLASS_REPLACEMENT


def requires_signature(job: Job, variant: ReceiptVariant) -> bool:
    return not job.is_business and variant is not ReceiptVariant.DEALER


def shows_calibration_disclaimer(job: Job, variant: ReceiptVariant) -> bool:
    return job.has_declined_calibration and variant is ReceiptVariant.WINDSHIELD_REPLACEMENT
