import math
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd

Amount = Union[int, float, Decimal]


@dataclass(frozen=True)
class Account:
    id: str
    name: str


@dataclass(frozen=True)
class AccountCatalogs:
    on_budget: Tuple[Account, ...] = ()
    tracking: Tuple[Account, ...] = ()
    closed: Tuple[Account, ...] = ()

    def in_order(self) -> Tuple[Tuple[Account, ...], ...]:
        # series order: on-budget, tracking, closed
        return (self.on_budget, self.tracking, self.closed)


@dataclass(frozen=True)
class Transaction:
    date: date        # day precision, datetime also accepted
    account_id: str
    amount: Amount    # + for inflow, - for outflow
    id: str = ""
    note: str = ""


@dataclass(frozen=True)
class DateFilter:
    from_date: date
    to_date: date


@dataclass(frozen=True)
class ReportFilters:
    date_filter: DateFilter
    excluded_account_ids: frozenset = frozenset()


@dataclass(frozen=True)
class ReportOptions:
    inverse_debt: bool = False
    split_by_account: bool = False
    label_format: str = "%b %Y"


@dataclass(frozen=True)
class MonthlyReportRow:
    month: pd.Period
    label: str
    assets: Amount
    debts: Amount
    net_worth: Amount
    debt_ratio: float
    account_balances: Dict[str, Amount] = field(default_factory=dict)


@dataclass(frozen=True)
class AccountSeries:
    account_id: str
    name: str
    kind: str     # "asset" or "debt"
    color: str
    data: Tuple[Amount, ...]


@dataclass(frozen=True)
class ReportSummary:
    label: str = ""
    assets: Amount = 0
    debts: Amount = 0
    debt_ratio: float = 0
    net_worth: Amount = 0


@dataclass(frozen=True)
class NetWorthReport:
    labels: Tuple[str, ...]
    assets: Tuple[Amount, ...]
    debts: Tuple[Amount, ...]
    net_worths: Tuple[Amount, ...]
    debt_ratios: Tuple[float, ...]
    asset_series: Tuple[AccountSeries, ...]
    debt_series: Tuple[AccountSeries, ...]
    summary: ReportSummary = ReportSummary()
    options: ReportOptions = ReportOptions()
    axis_bounds: Optional[Tuple[Amount, Amount]] = None

    def debt_values(self) -> List[Amount]:
        """Debts as they should be drawn; negated when debt is flipped."""
        if self.options.inverse_debt:
            return [-d for d in self.debts]
        return list(self.debts)

    def to_dict(self) -> dict:
        return {
            "labels": list(self.labels),
            "assets": list(self.assets),
            "debts": list(self.debts),
            "netWorths": list(self.net_worths),
            "debtRatios": [_json_ratio(r) for r in self.debt_ratios],
            "assetSeriesByAccount": [_series_dict(s) for s in self.asset_series],
            "debtSeriesByAccount": [_series_dict(s) for s in self.debt_series],
            "summary": {
                "label": self.summary.label,
                "assets": self.summary.assets,
                "debts": self.summary.debts,
                "debtRatio": _json_ratio(self.summary.debt_ratio),
                "netWorth": self.summary.net_worth,
            },
            "axisBounds": list(self.axis_bounds) if self.axis_bounds else None,
        }


def _series_dict(s: AccountSeries) -> dict:
    return {"id": s.account_id, "name": s.name, "color": s.color, "data": list(s.data)}


def _json_ratio(ratio: float):
    # strict JSON has no Infinity token
    return "Infinity" if ratio == math.inf else ratio
