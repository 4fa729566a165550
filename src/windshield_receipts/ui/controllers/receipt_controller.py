from __future__ import annotations

import logging
from pathlib import Path
from tkinter import filedialog, messagebox

from windshield_receipts.core.errors import ReceiptError
from windshield_receipts.core.models.job import Job
from windshield_receipts.core.services.job_loader import load_job
from windshield_receipts.ui.components.receipt_preview_dialog import ReceiptPreviewDialog
from windshield_receipts.utils.filename import to_disk_filename
from windshield_receipts.utils.pdf.renderers.receipt_renderer import GeneratedReceipt, generate_receipt

LOGGER = logging.getLogger(__name__)


class ReceiptController:
    """
    Loads a job file, generates its receipt and saves the PDF where the user picks.
    Holds a reference to the main window so it can update the labels.
    """

    def __init__(self, window) -> None:
        self.w = window
        self.job: Job | None = None
        self.receipt: GeneratedReceipt | None = None

    def open_job(self) -> None:
        path = filedialog.askopenfilename(
            filetypes=[("Job JSON", "*.json"), ("All files", "*.*")],
            title="Open job",
        )
        if not path:
            return
        self.load(Path(path))

    def load(self, path: Path) -> bool:
        try:
            job = load_job(path)
            receipt = generate_receipt(job)
        except (ReceiptError, OSError) as exc:
            LOGGER.error("Failed to generate receipt from %s", path, exc_info=True)
            messagebox.showerror("Receipt", f"Failed to generate receipt: {exc}")
            return False
        self.job, self.receipt = job, receipt
        self.w.show_receipt(job, receipt)
        return True

    def preview(self) -> None:
        if self.job is None or self.receipt is None:
            messagebox.showwarning("Receipt", "Open a job first.")
            return
        ReceiptPreviewDialog(self.w, self.job, self.receipt, on_save=self.save_receipt)

    def save_receipt(self) -> bool:
        if self.receipt is None:
            messagebox.showwarning("Receipt", "Open a job first.")
            return False
        path = filedialog.asksaveasfilename(
            defaultextension=".pdf",
            initialfile=to_disk_filename(self.receipt.filename),
            filetypes=[("PDF", "*.pdf")],
            title="Save receipt",
        )
        if not path:
            return False
        try:
            Path(path).write_bytes(self.receipt.pdf_bytes)
        except OSError as exc:
            LOGGER.error("Failed to write receipt to %s", path, exc_info=True)
            messagebox.showerror("Receipt", f"Failed to save receipt: {exc}")
            return False
        LOGGER.info("Saved receipt to %s", path)
        return True
