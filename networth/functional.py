import math
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Callable, Generic, Sequence, TypeVar

import pandas as pd

from networth.domain import MonthlyReportRow, Transaction

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Maybe(Generic[T], ABC):

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def is_none(self) -> bool:
        pass


class Some(Maybe[T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        return Some(f(self._value))

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_none(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Some) and self._value == other._value


class Nothing(Maybe[T]):

    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        return Nothing()

    def get_or_else(self, default: T) -> T:
        return default

    def is_none(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Nothing()"

    def __eq__(self, other) -> bool:
        return isinstance(other, Nothing)


class Either(Generic[E, T], ABC):

    @abstractmethod
    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        pass

    @abstractmethod
    def is_left(self) -> bool:
        pass

    @abstractmethod
    def get_error(self) -> E:
        pass


class Right(Either[E, T]):

    def __init__(self, value: T):
        self._value = value

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return f(self._value)

    def is_left(self) -> bool:
        return False

    def get_error(self) -> E:
        raise ValueError("Cannot get error from Right")

    def __repr__(self) -> str:
        return f"Right({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self._value == other._value


class Left(Either[E, T]):

    def __init__(self, error: E):
        self._error = error

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return self

    def is_left(self) -> bool:
        return True

    def get_error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Left({self._error!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self._error == other._error


def _check_date(t: Transaction) -> Either[dict, Transaction]:
    value = getattr(t, "date", None)
    # NaT is what pandas coerces unparseable dates to
    if value is None or value is pd.NaT:
        return Left({
            "error": "missing_date",
            "message": f"Transaction {t.id or '?'} on account {t.account_id} has no date",
            "transaction_id": t.id,
        })
    # datetime and pandas Timestamp are date subclasses
    if not isinstance(value, date):
        return Left({
            "error": "invalid_date",
            "message": f"Transaction {t.id or '?'} has a non-date value {value!r}",
            "transaction_id": t.id,
            "date": value,
        })
    return Right(t)


def _is_finite(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def _check_amount(t: Transaction) -> Either[dict, Transaction]:
    value = getattr(t, "amount", None)
    if value is None:
        return Left({
            "error": "missing_amount",
            "message": f"Transaction {t.id or '?'} on account {t.account_id} has no amount",
            "transaction_id": t.id,
        })
    numeric = isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
    if not numeric or not _is_finite(value):
        return Left({
            "error": "invalid_amount",
            "message": f"Transaction {t.id or '?'} has a non-numeric or non-finite amount {value!r}",
            "transaction_id": t.id,
            "amount": value,
        })
    return Right(t)


def validate_transaction(t: Transaction) -> Either[dict, Transaction]:
    return Right(t).bind(_check_date).bind(_check_amount)


def check_amount_types(trans: Sequence[Transaction]) -> Either[dict, Sequence[Transaction]]:
    """Decimal and float amounts cannot be summed together; ints mix with either."""
    first_decimal = next((t for t in trans if isinstance(t.amount, Decimal)), None)
    first_float = next((t for t in trans if isinstance(t.amount, float)), None)
    if first_decimal is not None and first_float is not None:
        return Left({
            "error": "mixed_amount_types",
            "message": (
                f"Transaction {first_decimal.id or '?'} has a Decimal amount but "
                f"transaction {first_float.id or '?'} has a float amount"
            ),
            "transaction_id": first_float.id,
        })
    return Right(trans)


def safe_month_index(rows: Sequence[MonthlyReportRow], month: pd.Period) -> Maybe[int]:
    for i, row in enumerate(rows):
        if row.month == month:
            return Some(i)
    return Nothing()


def pipe(x, *funcs):
    """Pipe a value through a series of functions.

    pipe(x, f, g, h) == h(g(f(x)))
    """
    res = x
    for f in funcs:
        res = f(res)
    return res
