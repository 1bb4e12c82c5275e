"""Slice the monthly rows to the filter window and project per-account series."""

import math
from datetime import date
from typing import Dict, List, Sequence, Tuple

from networth.domain import AccountCatalogs, AccountSeries, Amount, MonthlyReportRow
from networth.functional import safe_month_index
from networth.logging_setup import get_logger
from networth.transforms import month_of

logger = get_logger(__name__)

PALETTE = (
    "#4e79a7", "#f28e2b", "#e15759", "#76b7b2", "#59a14f",
    "#edc948", "#b07aa1", "#ff9da7", "#9c755f", "#bab0ac",
)


def select_range(
    rows: Sequence[MonthlyReportRow], from_date: date, to_date: date
) -> List[MonthlyReportRow]:
    """Rows from the month of ``from_date`` through the month of ``to_date``.

    Net worth is cumulative from the start of history, so a bound that has no
    row falls back to the first (or last) row instead of failing.
    """
    start = safe_month_index(rows, month_of(from_date)).get_or_else(0)
    end = safe_month_index(rows, month_of(to_date)).map(lambda i: i + 1).get_or_else(len(rows))
    logger.debug("selected rows [%d:%d) of %d", start, end, len(rows))
    return list(rows[start:end])


def account_series_index(catalogs: AccountCatalogs) -> Tuple[Dict[str, int], Dict[str, str]]:
    """Assign series indices in first-seen order over on-budget, tracking
    and closed accounts. Display names come from the last catalog that
    lists the account.
    """
    index: Dict[str, int] = {}
    names: Dict[str, str] = {}
    for accounts in catalogs.in_order():
        for account in accounts:
            names[account.id] = account.name
            if account.id not in index:
                index[account.id] = len(index)
    return index, names


def build_account_series(
    rows: Sequence[MonthlyReportRow], catalogs: AccountCatalogs
) -> Tuple[List[AccountSeries], List[AccountSeries]]:
    index, names = account_series_index(catalogs)
    n = len(rows)
    asset_data: Dict[str, List[Amount]] = {account_id: [0] * n for account_id in index}
    debt_data: Dict[str, List[Amount]] = {account_id: [0] * n for account_id in index}

    unknown = set()
    for month, row in enumerate(rows):
        for account_id, balance in row.account_balances.items():
            if account_id not in index:
                unknown.add(account_id)
                continue
            if balance > 0:
                asset_data[account_id][month] = balance
            else:
                debt_data[account_id][month] = balance
    if unknown:
        logger.debug("skipped balances for accounts missing from catalogs: %s", sorted(unknown))

    asset_series: List[AccountSeries] = []
    debt_series: List[AccountSeries] = []
    for account_id, i in index.items():
        color = PALETTE[i % len(PALETTE)]
        asset_series.append(AccountSeries(
            account_id=account_id,
            name=names[account_id],
            kind="asset",
            color=color,
            data=tuple(asset_data[account_id]),
        ))
        debt_series.append(AccountSeries(
            account_id=account_id,
            name=f"{names[account_id]} (Debt)",
            kind="debt",
            color=color,
            data=tuple(debt_data[account_id]),
        ))
    return asset_series, debt_series


def round_axis(y: Amount, add: int) -> Amount:
    """Round ``y`` up to a whole step of its order of magnitude (at least 10),
    then add ``add`` more steps."""
    if y == 0:
        return 0
    scale = 10 ** max(math.floor(math.log10(y)), 1)
    return (math.ceil(y / scale) + add) * scale


def axis_bounds(
    asset_series: Sequence[AccountSeries], debt_series: Sequence[AccountSeries], length: int
) -> Tuple[Amount, Amount]:
    """Shared y-axis bounds for the stacked asset and debt charts."""
    y_max = 0
    y_min = 0
    for month in range(length):
        y_max = max(y_max, sum(s.data[month] for s in asset_series))
        y_min = min(y_min, sum(s.data[month] for s in debt_series))
    return -round_axis(-y_min, 0), round_axis(y_max, 1)
