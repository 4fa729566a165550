from __future__ import annotations

from typing import Iterable


class ReceiptError(Exception):
    """Base error for receipt generation."""


class InvalidJobError(ReceiptError, ValueError):
    """Job record is missing data the generator dereferences unconditionally."""

    def __init__(self, problems: Iterable[str] | str):
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        super().__init__("Invalid job: " + "; ".join(self.problems))
