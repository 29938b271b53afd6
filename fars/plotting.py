"""Static charts of monthly accident summaries."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from .etl.accidents import MONTH_COLUMN

LOGGER = logging.getLogger(__name__)

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def plot_summary(summary: pd.DataFrame, path: str | Path) -> Path:
    """Save a line chart with one line per year of ``summary`` to ``path``."""
    years = [c for c in summary.columns if c != MONTH_COLUMN]
    if not years:
        raise ValueError("Summary has no year columns to plot")

    fig, ax = plt.subplots(figsize=(8, 4))
    for year in years:
        counts = summary[year].astype("float64")
        ax.plot(summary[MONTH_COLUMN], counts, "-o", label=str(year))

    ax.set_xticks(range(1, 13))
    ax.set_xticklabels(MONTH_LABELS)
    ax.set_xlabel("Month")
    ax.set_ylabel("Accidents")
    ax.legend(title="Year")
    fig.tight_layout()

    path = Path(path)
    fig.savefig(path)
    plt.close(fig)
    LOGGER.info("Saved %s", path)
    return path
