INVOICE_PREFIX = "0126"


def build_invoice_number(job_number: str) -> str:
    """
    Invoice number printed on the receipt: fixed prefix + last 4 characters of the job number.
    """
    return f"{INVOICE_PREFIX}-{str(job_number)[-4:]}"
