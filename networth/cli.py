"""Command-line entry point: compute a net-worth report from a JSON seed."""

import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from networth.config import Settings
from networth.domain import DateFilter, ReportFilters, ReportOptions
from networth.errors import InvalidTransaction
from networth.frames import report_to_frame
from networth.logging_setup import configure_logging
from networth.services import compute_report
from networth.transforms import load_seed

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Monthly assets, debts and net worth from a transaction seed file.",
)


def _parse_day(value: Optional[str], option: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint=option)


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


@app.command("report")
def report_cmd(
    seed: Optional[Path] = typer.Argument(None, help="Seed JSON (defaults to NETWORTH_SEED_PATH)."),
    from_date: Optional[str] = typer.Option(None, "--from", help="First month shown, YYYY-MM-DD."),
    to_date: Optional[str] = typer.Option(None, "--to", help="Last month shown, YYYY-MM-DD."),
    exclude: List[str] = typer.Option([], "--exclude", help="Account id to leave out; repeatable."),
    inverse_debt: Optional[bool] = typer.Option(None, "--inverse-debt/--no-inverse-debt"),
    split_by_account: Optional[bool] = typer.Option(None, "--split-by-account/--no-split-by-account"),
    output: str = typer.Option("json", "--format", help="json or table."),
) -> None:
    settings = Settings()
    path = seed or settings.SEED_PATH
    start = _parse_day(from_date, "--from")
    end = _parse_day(to_date, "--to")

    try:
        transactions, catalogs = load_seed(str(path))
    except FileNotFoundError:
        print(f"Error: seed file not found: {path}", file=sys.stderr)
        raise typer.Exit(1)
    except InvalidTransaction as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise typer.Exit(1)

    # without explicit bounds the whole history is shown
    days = [t.date for t in transactions if isinstance(t.date, date)]
    start = start or (min(days) if days else date.today())
    end = end or (max(days) if days else date.today())

    defaults = settings.report_options()
    options = ReportOptions(
        inverse_debt=defaults.inverse_debt if inverse_debt is None else inverse_debt,
        split_by_account=defaults.split_by_account if split_by_account is None else split_by_account,
        label_format=defaults.label_format,
    )
    filters = ReportFilters(
        date_filter=DateFilter(from_date=start, to_date=end),
        excluded_account_ids=frozenset(exclude),
    )

    try:
        report = compute_report(transactions, catalogs, filters, options)
    except InvalidTransaction as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise typer.Exit(1)

    if output == "table":
        typer.echo(report_to_frame(report).to_string())
    else:
        typer.echo(json.dumps(report.to_dict(), indent=2, default=str, allow_nan=False))


if __name__ == "__main__":  # pragma: no cover
    app()
