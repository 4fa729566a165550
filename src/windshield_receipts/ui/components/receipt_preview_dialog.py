import tkinter as tk
import customtkinter as ctk
from tkinter import ttk

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.formatting import format_currency
from windshield_receipts.utils.pdf.renderers.receipt_renderer import GeneratedReceipt
from windshield_receipts.utils.pdf.sections.items_table import build_item_rows
from windshield_receipts.utils.pdf.sections.totals import build_totals_lines


class ReceiptPreviewDialog(ctk.CTkToplevel):
    """Line items and totals of the generated receipt, with a save button."""

    def __init__(self, master: tk.Misc, job: Job, receipt: GeneratedReceipt, on_save):
        super().__init__(master)
        self.title(f"Receipt Preview - {receipt.variant.label}")
        self.transient(master)
        self.grab_set()
        self.geometry("640x460")
        self.minsize(540, 380)

        main = ctk.CTkFrame(self, fg_color="transparent")
        main.pack(fill="both", expand=True, padx=12, pady=12)
        main.columnconfigure(1, weight=1)
        main.rowconfigure(2, weight=1)

        ctk.CTkLabel(main, text="File", font=("Segoe UI", 11, "bold")).grid(row=0, column=0, sticky="w")
        ctk.CTkLabel(main, text=receipt.filename).grid(row=0, column=1, sticky="w")
        ctk.CTkLabel(main, text="Pages", font=("Segoe UI", 11, "bold")).grid(row=1, column=0, sticky="w")
        ctk.CTkLabel(main, text=str(receipt.page_count)).grid(row=1, column=1, sticky="w")

        tree = ttk.Treeview(main, columns=("item", "description", "total"), show="headings", height=10)
        tree.heading("item", text="Item")
        tree.heading("description", text="Description")
        tree.heading("total", text="Total")
        tree.column("item", width=50, anchor="center")
        tree.column("description", width=380)
        tree.column("total", width=110, anchor="e")
        tree.grid(row=2, column=0, columnspan=2, sticky="nsew", pady=(8, 0))

        rows = build_item_rows(job)
        for row in rows:
            tree.insert("", tk.END, values=(row.number, f"{row.vehicle} - {row.label}", format_currency(row.price)))

        summary = ctk.CTkFrame(main, fg_color="transparent")
        summary.grid(row=3, column=0, columnspan=2, sticky="e", pady=(10, 0))
        subtotal = sum(row.price for row in rows)
        for idx, (label, amount, bold) in enumerate(build_totals_lines(job, subtotal)):
            font = ("Segoe UI", 11, "bold") if bold else None
            ctk.CTkLabel(summary, text=f"{label}:", font=font).grid(row=idx, column=0, sticky="e")
            ctk.CTkLabel(summary, text=amount, font=font).grid(row=idx, column=1, sticky="e", padx=(8, 0))

        buttons = ctk.CTkFrame(main, fg_color="transparent")
        buttons.grid(row=4, column=0, columnspan=2, pady=10)

        def save() -> None:
            if on_save():
                self.destroy()

        ctk.CTkButton(buttons, text="Download PDF", command=save).pack(side="left", padx=(0, 6))
        ctk.CTkButton(buttons, text="Close", command=self.destroy).pack(side="left")
