from datetime import date, datetime
from decimal import Decimal

import pandas as pd

from networth.domain import Transaction
from networth.functional import (
    Left,
    Nothing,
    Right,
    Some,
    check_amount_types,
    pipe,
    safe_month_index,
    validate_transaction,
)
from networth.gaps import carry_forward


def test_maybe_map_and_default():
    assert Some(2).map(lambda i: i + 1).get_or_else(0) == 3
    assert Nothing().map(lambda i: i + 1).get_or_else(7) == 7
    assert not Some(0).is_none() and Nothing().is_none()


def test_either_bind_short_circuits_on_left():
    calls = []

    def step(x):
        calls.append(x)
        return Right(x * 2)

    assert Right(2).bind(step) == Right(4)
    assert Left("boom").bind(step) == Left("boom")
    assert calls == [2]


def test_validate_transaction_accepts_dates_and_datetimes():
    for value in (date(2024, 1, 1), datetime(2024, 1, 1, 12), pd.Timestamp("2024-01-01")):
        t = Transaction(date=value, account_id="a1", amount=5)
        assert validate_transaction(t) == Right(t)


def test_validate_transaction_reports_first_problem():
    t = Transaction(date=None, account_id="a1", amount=None, id="t7")
    result = validate_transaction(t)

    assert result.is_left()
    error = result.get_error()
    assert error["error"] == "missing_date"
    assert "t7" in error["message"]


def test_validate_transaction_rejects_bool_amount():
    t = Transaction(date=date(2024, 1, 1), account_id="a1", amount=True)
    assert validate_transaction(t).get_error()["error"] == "invalid_amount"


def test_safe_month_index():
    rows = [carry_forward(None, pd.Period(m, freq="M")) for m in ("2024-01", "2024-02")]
    assert safe_month_index(rows, pd.Period("2024-02", freq="M")) == Some(1)
    assert safe_month_index(rows, pd.Period("2025-02", freq="M")).is_none()


def test_pipe():
    assert pipe(3, lambda x: x + 1, lambda x: x * 2) == 8


def test_validate_transaction_treats_nat_as_missing_date():
    t = Transaction(date=pd.NaT, account_id="a1", amount=5, id="t3")
    assert validate_transaction(t).get_error()["error"] == "missing_date"


def test_check_amount_types():
    ints_and_floats = [
        Transaction(date(2024, 1, 1), "a1", 1),
        Transaction(date(2024, 1, 1), "a1", 1.5),
    ]
    assert check_amount_types(ints_and_floats) == Right(ints_and_floats)

    mixed = ints_and_floats + [Transaction(date(2024, 1, 2), "a1", Decimal("2"), id="d1")]
    error = check_amount_types(mixed).get_error()
    assert error["error"] == "mixed_amount_types"
    assert "d1" in error["message"]
