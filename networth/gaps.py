from datetime import date
from typing import List, Optional, Sequence

import pandas as pd

from networth.domain import MonthlyReportRow
from networth.logging_setup import get_logger
from networth.transforms import month_label, month_of, month_range

logger = get_logger(__name__)


def carry_forward(
    previous: Optional[MonthlyReportRow], month: pd.Period, label_format: str = "%b %Y"
) -> MonthlyReportRow:
    """Synthesize the row for a month without transactions."""
    if previous is None:
        return MonthlyReportRow(
            month=month,
            label=month_label(month, label_format),
            assets=0,
            debts=0,
            net_worth=0,
            debt_ratio=0.0,
            account_balances={},
        )
    return MonthlyReportRow(
        month=month,
        label=month_label(month, label_format),
        assets=previous.assets,
        debts=previous.debts,
        net_worth=previous.net_worth,
        debt_ratio=previous.debt_ratio,
        account_balances=dict(previous.account_balances),
    )


def fill_gaps(
    rows: Sequence[MonthlyReportRow],
    to_date: Optional[date] = None,
    label_format: str = "%b %Y",
) -> List[MonthlyReportRow]:
    """Return rows covering every month from the first row through
    ``max(last row month, month of to_date)``.

    Existing rows are kept as they are; missing months repeat the state of
    the month before them.
    """
    if not rows:
        return []

    by_month = {row.month: row for row in rows}
    end = rows[-1].month
    if to_date is not None:
        end = max(end, month_of(to_date))

    filled: List[MonthlyReportRow] = []
    previous: Optional[MonthlyReportRow] = None
    for month in month_range(rows[0].month, end):
        row = by_month.get(month)
        if row is None:
            row = carry_forward(previous, month, label_format)
            logger.debug("filled gap month %s", row.label)
        filled.append(row)
        previous = row
    return filled
