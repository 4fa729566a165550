import logging
import sys
from pathlib import Path

from windshield_receipts.ui.layouts.receipt_window import ReceiptWindow


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = ReceiptWindow()
    if len(sys.argv) > 1:
        app.after(0, lambda: app.controller.load(Path(sys.argv[1])))
    app.mainloop()


if __name__ == "__main__":
    main()
