"""Net-worth time series: monthly assets, debts and per-account balances."""

from networth.domain import (
    Account,
    AccountCatalogs,
    AccountSeries,
    DateFilter,
    MonthlyReportRow,
    NetWorthReport,
    ReportFilters,
    ReportOptions,
    ReportSummary,
    Transaction,
)
from networth.errors import InvalidTransaction, NetWorthError
from networth.services import NetWorthService, compute_report

__all__ = [
    "Account",
    "AccountCatalogs",
    "AccountSeries",
    "DateFilter",
    "InvalidTransaction",
    "MonthlyReportRow",
    "NetWorthError",
    "NetWorthReport",
    "NetWorthService",
    "ReportFilters",
    "ReportOptions",
    "ReportSummary",
    "Transaction",
    "compute_report",
]
