"""Fold transactions into one cumulative balance row per calendar month."""

import math
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from networth.domain import Amount, MonthlyReportRow, Transaction
from networth.errors import InvalidTransaction
from networth.functional import check_amount_types, validate_transaction
from networth.logging_setup import get_logger
from networth.transforms import month_label, month_of, sort_transactions

logger = get_logger(__name__)


def debt_ratio(assets: Amount, debts: Amount) -> float:
    """Debts as a percentage of assets.

    No assets with outstanding debt gives ``math.inf``; no assets and no debt
    gives ``0.0``.
    """
    if assets == 0:
        return math.inf if debts > 0 else 0.0
    return debts / assets * 100


def summarize_snapshot(snapshot: Dict[str, Amount]) -> Tuple[Amount, Amount]:
    assets = 0
    debts = 0
    for balance in snapshot.values():
        if balance > 0:
            assets += balance
        else:
            debts -= balance
    return assets, debts


def close_month(month: pd.Period, snapshot: Dict[str, Amount], label_format: str) -> MonthlyReportRow:
    assets, debts = summarize_snapshot(snapshot)
    return MonthlyReportRow(
        month=month,
        label=month_label(month, label_format),
        assets=assets,
        debts=debts,
        net_worth=assets - debts,
        debt_ratio=debt_ratio(assets, debts),
        account_balances=dict(snapshot),
    )


def bucketize(
    trans: Iterable[Transaction],
    excluded_account_ids: Iterable[str] = (),
    label_format: str = "%b %Y",
) -> List[MonthlyReportRow]:
    """Return one row per calendar month that has at least one transaction.

    Every transaction is validated before anything is folded; the first
    malformed one raises ``InvalidTransaction``. Transactions on excluded
    accounts still open their month but never touch the balances.
    """
    trans = list(trans)
    for t in trans:
        checked = validate_transaction(t)
        if checked.is_left():
            raise InvalidTransaction(checked.get_error())
    mixed = check_amount_types(trans)
    if mixed.is_left():
        raise InvalidTransaction(mixed.get_error())

    excluded = frozenset(excluded_account_ids)
    snapshot: Dict[str, Amount] = {}
    rows: List[MonthlyReportRow] = []
    open_month: Optional[pd.Period] = None

    for t in sort_transactions(trans):
        month = month_of(t.date)
        if open_month is None:
            open_month = month
        elif month != open_month:
            rows.append(close_month(open_month, snapshot, label_format))
            open_month = month

        if t.account_id in excluded:
            continue
        snapshot[t.account_id] = snapshot.get(t.account_id, 0) + t.amount

    if open_month is not None:
        rows.append(close_month(open_month, snapshot, label_format))

    logger.debug("bucketized %d transactions into %d months", len(trans), len(rows))
    return rows
