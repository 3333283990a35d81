"""Cash-box use cases."""

from app.application.use_cases.cash_box.cash_box_operations import (
    CashBoxService,
    expected_balance,
)

__all__ = ["CashBoxService", "expected_balance"]
