import io
import logging

from networth import logging_setup
from networth.config import Settings
from networth.domain import ReportOptions


def test_settings_defaults(monkeypatch):
    for name in ("NETWORTH_LABEL_FORMAT", "NETWORTH_INVERSE_DEBT", "NETWORTH_SPLIT_BY_ACCOUNT", "NETWORTH_SEED_PATH"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()

    assert settings.report_options() == ReportOptions()
    assert str(settings.SEED_PATH).endswith("seed.json")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("NETWORTH_LABEL_FORMAT", "%Y-%m")
    monkeypatch.setenv("NETWORTH_INVERSE_DEBT", "Yes")
    monkeypatch.setenv("NETWORTH_SPLIT_BY_ACCOUNT", "0")

    assert Settings().report_options() == ReportOptions(
        inverse_debt=True, split_by_account=False, label_format="%Y-%m"
    )


def test_parse_level(monkeypatch):
    monkeypatch.setenv("NETWORTH_LOG_LEVEL", "debug")
    assert logging_setup._parse_level(None) == logging.DEBUG
    assert logging_setup._parse_level("warning") == logging.WARNING
    assert logging_setup._parse_level("15") == 15
    assert logging_setup._parse_level("nonsense") == logging.INFO


def test_configure_logging_once(monkeypatch):
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    logger = logging.getLogger("networth")
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "level", logger.level)
    monkeypatch.setattr(logger, "propagate", logger.propagate)
    stream = io.StringIO()

    logging_setup.configure_logging("DEBUG", stream=stream)
    logging_setup.configure_logging("ERROR", stream=io.StringIO())
    logging_setup.get_logger("networth.tests").debug("hello %s", "there")

    assert len(logger.handlers) == 1
    assert "hello there" in stream.getvalue()
