from typing import Sequence

import pandas as pd

from networth.domain import AccountSeries, NetWorthReport


def report_to_frame(report: NetWorthReport) -> pd.DataFrame:
    """One row per month, indexed by label. Debts follow the Flip Debt option."""
    df = pd.DataFrame(
        {
            "assets": list(report.assets),
            "debts": report.debt_values(),
            "net_worth": list(report.net_worths),
            "debt_ratio": list(report.debt_ratios),
        },
        index=pd.Index(list(report.labels), name="label"),
    )
    return df


def series_to_frame(series: Sequence[AccountSeries], labels: Sequence[str]) -> pd.DataFrame:
    """Pivot account series into one column per series name."""
    return pd.DataFrame(
        {s.name: list(s.data) for s in series},
        index=pd.Index(list(labels), name="label"),
        columns=[s.name for s in series],
    )
