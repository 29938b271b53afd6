import logging

import pytest

from fars.etl.accidents import summarize_years
from fars.plotting import plot_summary
from fars.utils.logging import resolve_level, setup_logging


def test_plot_summary_writes_png(fars_dir, tmp_path):
    summary = summarize_years([2013, 2014], data_dir=fars_dir)
    path = plot_summary(summary, tmp_path / "monthly.png")
    assert path.exists()
    assert path.read_bytes()[:4] == b"\x89PNG"


def test_plot_summary_requires_years(tmp_path):
    empty = summarize_years([9999], data_dir=tmp_path)
    with pytest.raises(ValueError):
        plot_summary(empty, tmp_path / "empty.png")


def test_resolve_level(monkeypatch):
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    monkeypatch.setenv("FARS_LOG_LEVEL", "warning")
    assert resolve_level() == logging.WARNING
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "fars.log"
    logger = setup_logging("fars.test", log_file=str(log_file), level="INFO")
    logger.info("hello")
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    assert "fars.test: hello" in log_file.read_text()
