"""Runtime settings for the net-worth report, read from the environment."""

import os
from pathlib import Path

from dotenv import load_dotenv

from networth.domain import ReportOptions

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Settings shared by the CLI and embedding applications.

    The "Flip Debt" and "Split By Account" toggles live here as plain values
    and reach the series builder through ``report_options``.
    """

    DEFAULT_LABEL_FORMAT = "%b %Y"
    DEFAULT_SEED_PATH = "data/seed.json"

    def __init__(self) -> None:
        self.LABEL_FORMAT = os.getenv("NETWORTH_LABEL_FORMAT", self.DEFAULT_LABEL_FORMAT)
        self.INVERSE_DEBT = _env_bool("NETWORTH_INVERSE_DEBT", default=False)
        self.SPLIT_BY_ACCOUNT = _env_bool("NETWORTH_SPLIT_BY_ACCOUNT", default=False)
        self.SEED_PATH = Path(os.getenv("NETWORTH_SEED_PATH", self.DEFAULT_SEED_PATH)).expanduser()
        self.LOG_LEVEL = os.getenv("NETWORTH_LOG_LEVEL", "INFO")

    def report_options(self) -> ReportOptions:
        return ReportOptions(
            inverse_debt=self.INVERSE_DEBT,
            split_by_account=self.SPLIT_BY_ACCOUNT,
            label_format=self.LABEL_FORMAT,
        )
