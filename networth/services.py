from typing import Callable, Iterable, Optional, Sequence

from networth.bucketize import bucketize
from networth.domain import (
    AccountCatalogs,
    MonthlyReportRow,
    NetWorthReport,
    ReportFilters,
    ReportOptions,
    ReportSummary,
    Transaction,
)
from networth.errors import InvalidTransaction
from networth.events import FILTERS_CHANGED, OPTIONS_CHANGED, TRANSACTIONS_CHANGED, Event, EventBus
from networth.functional import pipe
from networth.gaps import fill_gaps
from networth.logging_setup import get_logger
from networth.series import axis_bounds, build_account_series, select_range

logger = get_logger(__name__)


def _summary(row: Optional[MonthlyReportRow]) -> ReportSummary:
    if row is None:
        return ReportSummary()
    return ReportSummary(
        label=row.label,
        assets=row.assets,
        debts=row.debts,
        debt_ratio=row.debt_ratio,
        net_worth=row.net_worth,
    )


def monthly_rows(
    transactions: Iterable[Transaction],
    filters: ReportFilters,
    options: ReportOptions,
) -> list:
    """Bucketize then gap-fill: every month of history up to the filter end."""
    return pipe(
        transactions,
        lambda trans: bucketize(trans, filters.excluded_account_ids, options.label_format),
        lambda rows: fill_gaps(rows, filters.date_filter.to_date, options.label_format),
    )


def compute_report(
    transactions: Iterable[Transaction],
    catalogs: AccountCatalogs,
    filters: ReportFilters,
    options: Optional[ReportOptions] = None,
) -> NetWorthReport:
    """Build the net-worth payload for the filter window.

    Pure over its inputs; account ordering is recomputed from ``catalogs`` on
    every call. Raises ``InvalidTransaction`` for a malformed transaction.
    """
    options = options or ReportOptions()
    rows = monthly_rows(transactions, filters, options)
    selected = select_range(rows, filters.date_filter.from_date, filters.date_filter.to_date)
    asset_series, debt_series = build_account_series(selected, catalogs)

    bounds = None
    if options.split_by_account:
        bounds = axis_bounds(asset_series, debt_series, len(selected))

    logger.debug("net worth report: %d months of history, %d shown", len(rows), len(selected))
    return NetWorthReport(
        labels=tuple(r.label for r in selected),
        assets=tuple(r.assets for r in selected),
        debts=tuple(r.debts for r in selected),
        net_worths=tuple(r.net_worth for r in selected),
        debt_ratios=tuple(r.debt_ratio for r in selected),
        asset_series=tuple(asset_series),
        debt_series=tuple(debt_series),
        summary=_summary(rows[-1] if rows else None),
        options=options,
        axis_bounds=bounds,
    )


class NetWorthService:
    """Facade that pulls data from injected collaborators and recomputes the
    report whenever filters, options or transactions change.

    get_transactions: () -> Sequence[Transaction]
    get_account_catalogs: () -> AccountCatalogs
    """

    def __init__(
        self,
        get_transactions: Callable[[], Sequence[Transaction]],
        get_account_catalogs: Callable[[], AccountCatalogs],
        filters: ReportFilters,
        options: Optional[ReportOptions] = None,
    ):
        self.get_transactions = get_transactions
        self.get_account_catalogs = get_account_catalogs
        self.filters = filters
        self.options = options or ReportOptions()
        self.current: Optional[NetWorthReport] = None

    def report(self) -> NetWorthReport:
        try:
            self.current = compute_report(
                self.get_transactions(), self.get_account_catalogs(), self.filters, self.options
            )
        except InvalidTransaction as exc:
            logger.warning("net worth report aborted: %s", exc, extra={"error": exc.error})
            raise
        return self.current

    def on_filters_changed(self, event: Event, payload: dict) -> dict:
        self.filters = payload["filters"]
        return {"report": self.report()}

    def on_options_changed(self, event: Event, payload: dict) -> dict:
        self.options = payload["options"]
        return {"report": self.report()}

    def on_transactions_changed(self, event: Event, payload: dict) -> dict:
        return {"report": self.report()}

    def bind(self, bus: EventBus) -> None:
        bus.subscribe(FILTERS_CHANGED, self.on_filters_changed)
        bus.subscribe(OPTIONS_CHANGED, self.on_options_changed)
        bus.subscribe(TRANSACTIONS_CHANGED, self.on_transactions_changed)

    def unbind(self, bus: EventBus) -> None:
        bus.unsubscribe(FILTERS_CHANGED, self.on_filters_changed)
        bus.unsubscribe(OPTIONS_CHANGED, self.on_options_changed)
        bus.unsubscribe(TRANSACTIONS_CHANGED, self.on_transactions_changed)
