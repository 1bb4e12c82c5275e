import json
from datetime import date
from typing import Iterable, List, Tuple

import pandas as pd

from networth.domain import Account, AccountCatalogs, Transaction
from networth.errors import InvalidTransaction


def day_of(value: date) -> date:
    """Calendar day of a date, datetime or Timestamp; any time zone is ignored."""
    return date(value.year, value.month, value.day)


def month_of(value: date) -> pd.Period:
    return pd.Period(year=value.year, month=value.month, freq="M")


def month_label(month: pd.Period, label_format: str = "%b %Y") -> str:
    return month.strftime(label_format)


def month_range(start: pd.Period, end: pd.Period) -> List[pd.Period]:
    """Every calendar month from start to end, both inclusive."""
    if end < start:
        return []
    return list(pd.period_range(start=start, end=end, freq="M"))


def sort_transactions(trans: Iterable[Transaction]) -> List[Transaction]:
    # day precision; sorted() is stable, so same-day transactions keep their input order
    return sorted(trans, key=lambda t: day_of(t.date))


def _parse_date(raw, tx_id: str) -> date:
    try:
        return date.fromisoformat(str(raw)[:10])
    except ValueError as exc:
        raise InvalidTransaction({
            "error": "invalid_date",
            "message": f"Transaction {tx_id or '?'} has an unparseable date {raw!r}",
            "transaction_id": tx_id,
            "date": raw,
        }) from exc


def _transaction_from_row(row: dict) -> Transaction:
    tx_id = str(row.get("id", ""))
    raw_date = row.get("date")
    return Transaction(
        date=_parse_date(raw_date, tx_id) if raw_date is not None else None,
        account_id=row["account_id"],
        amount=row.get("amount"),
        id=tx_id,
        note=row.get("note", ""),
    )


def load_seed(path: str) -> Tuple[Tuple[Transaction, ...], AccountCatalogs]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    accounts = data.get("accounts", {})
    catalogs = AccountCatalogs(
        on_budget=tuple(Account(**a) for a in accounts.get("on_budget", [])),
        tracking=tuple(Account(**a) for a in accounts.get("tracking", [])),
        closed=tuple(Account(**a) for a in accounts.get("closed", [])),
    )
    transactions = tuple(_transaction_from_row(t) for t in data["transactions"])

    return transactions, catalogs
