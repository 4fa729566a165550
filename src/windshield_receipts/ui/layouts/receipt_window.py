import customtkinter as ctk

from windshield_receipts.core.models.job import Job
from windshield_receipts.ui.controllers.receipt_controller import ReceiptController
from windshield_receipts.utils.pdf.renderers.receipt_renderer import GeneratedReceipt


class ReceiptWindow(ctk.CTk):
    def __init__(self):
        super().__init__()
        self.title("Windshield Receipts")
        self.geometry("560x300")
        self.minsize(480, 260)
        self.controller = ReceiptController(self)

        main = ctk.CTkFrame(self, fg_color="transparent")
        main.pack(fill="both", expand=True, padx=16, pady=16)
        main.columnconfigure(1, weight=1)

        self._values: dict[str, ctk.CTkLabel] = {}
        for row, (key, label) in enumerate((("job", "Job"), ("customer", "Customer"), ("variant", "Receipt"), ("filename", "File"))):
            ctk.CTkLabel(main, text=label, font=("Segoe UI", 11, "bold")).grid(row=row, column=0, sticky="w", pady=2)
            value = ctk.CTkLabel(main, text="-")
            value.grid(row=row, column=1, sticky="w", padx=(12, 0), pady=2)
            self._values[key] = value

        buttons = ctk.CTkFrame(main, fg_color="transparent")
        buttons.grid(row=4, column=0, columnspan=2, pady=(16, 0))
        ctk.CTkButton(buttons, text="Open job...", command=self.controller.open_job).pack(side="left", padx=(0, 6))
        self.preview_button = ctk.CTkButton(buttons, text="Preview", command=self.controller.preview, state="disabled")
        self.preview_button.pack(side="left", padx=(0, 6))
        self.save_button = ctk.CTkButton(buttons, text="Download PDF", command=self.controller.save_receipt, state="disabled")
        self.save_button.pack(side="left")

    def show_receipt(self, job: Job, receipt: GeneratedReceipt) -> None:
        self._values["job"].configure(text=job.job_number)
        self._values["customer"].configure(text=job.display_name)
        self._values["variant"].configure(text=f"{receipt.variant.label} ({receipt.page_count} page(s))")
        self._values["filename"].configure(text=receipt.filename)
        self.preview_button.configure(state="normal")
        self.save_button.configure(state="normal")
