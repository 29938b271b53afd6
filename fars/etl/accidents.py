"""Load yearly FARS accident files and count accidents per month."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from ..settings import data_dir as default_data_dir

LOGGER = logging.getLogger(__name__)

FILENAME_TEMPLATE = "accident_%d.csv.bz2"
MONTH_COLUMN = "MONTH"
YEAR_COLUMN = "year"

# Values above these thresholds are FARS codes for an unknown position.
LONGITUD_MISSING_ABOVE = 900
LATITUDE_MISSING_ABOVE = 90


def normalize_year(year) -> int:
    """Truncate ``year`` toward zero, so ``2013.9`` becomes ``2013``."""
    return int(year)


def make_filename(year) -> str:
    """Return the accident file name for ``year``, e.g. ``accident_2013.csv.bz2``."""
    return FILENAME_TEMPLATE % normalize_year(year)


build_filename = make_filename


def resolve_path(filename: str | Path, data_dir: str | Path | None = None) -> Path:
    path = Path(filename)
    if path.is_absolute():
        return path
    base = Path(data_dir) if data_dir is not None else default_data_dir()
    return base / path


def load_dataset(filename: str | Path, data_dir: str | Path | None = None) -> pd.DataFrame:
    """Read one FARS accident file into a DataFrame.

    Parameters
    ----------
    filename:
        File name such as ``accident_2013.csv.bz2``. Relative names are looked
        up in ``data_dir`` or, when omitted, :func:`fars.settings.data_dir`.
    data_dir:
        Optional directory overriding the configured one.

    Returns
    -------
    pd.DataFrame
        One row per data line, columns named by the header. Compression is
        inferred from the extension.
    """

    path = resolve_path(filename, data_dir)
    if not path.exists():
        msg = f"file '{filename}' does not exist"
        LOGGER.error(msg, extra={"path": str(path)})
        raise FileNotFoundError(msg)

    LOGGER.info("reading %s", path)
    return pd.read_csv(path, low_memory=False)


@dataclass(frozen=True, eq=False)
class YearLoad:
    """Outcome of loading one requested year.

    ``table`` holds the ``MONTH``/``year`` projection when the load worked;
    otherwise it is ``None`` and ``error`` says why.
    """

    year: object
    table: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.table is not None


def project_year(year, data_dir: str | Path | None = None) -> pd.DataFrame:
    """Load ``year`` and reduce it to ``MONTH`` and ``year`` columns."""
    token = normalize_year(year)
    data = load_dataset(make_filename(token), data_dir)
    projected = data.assign(**{YEAR_COLUMN: token})
    return projected.loc[:, [MONTH_COLUMN, YEAR_COLUMN]]


def load_years(years: Iterable, data_dir: str | Path | None = None) -> list[YearLoad]:
    """Project every year in ``years``, keeping input order.

    A year that cannot be loaded is logged as a warning and recorded as a
    failed :class:`YearLoad`; the remaining years are still processed.
    """
    results = []
    for year in years:
        try:
            table = project_year(year, data_dir)
        except Exception as exc:
            LOGGER.warning("invalid year: %s", year, extra={"year": str(year), "reason": str(exc)})
            results.append(YearLoad(year=year, error=str(exc)))
        else:
            results.append(YearLoad(year=year, table=table))
    return results


def project_years(years: Iterable, data_dir: str | Path | None = None) -> list[Optional[pd.DataFrame]]:
    """Return one projected table per year, ``None`` where loading failed."""
    return [result.table for result in load_years(years, data_dir)]


def summarize_years(years: Iterable, data_dir: str | Path | None = None) -> pd.DataFrame:
    """Count accidents per month for each year.

    Returns
    -------
    pd.DataFrame
        A ``MONTH`` column followed by one column per successfully loaded
        year. Months without accidents in a year are ``<NA>``, not zero.
    """
    loaded = [result for result in load_years(years, data_dir) if result.ok]
    if not loaded:
        LOGGER.warning("No years loaded; returning empty summary")
        return pd.DataFrame({MONTH_COLUMN: pd.Series(dtype="int64")})

    # a header-only file still loads, so its year keeps an (empty) column
    loaded_years = sorted({normalize_year(result.year) for result in loaded})
    combined = pd.concat([result.table for result in loaded], ignore_index=True)
    counts = combined.groupby([YEAR_COLUMN, MONTH_COLUMN]).size()
    if counts.empty:
        table = pd.DataFrame(
            index=pd.Index([], name=MONTH_COLUMN, dtype="int64"),
            columns=loaded_years,
            dtype="Int64",
        )
    else:
        table = (
            counts.unstack(YEAR_COLUMN)
            .reindex(columns=loaded_years)
            .astype("Int64")
            .sort_index()
        )
    summary = table.reset_index()
    summary.columns.name = None

    LOGGER.info(
        "Summarised %d accidents into %d months across %d years",
        len(combined),
        len(summary),
        len(summary.columns) - 1,
    )
    return summary


def sanitize_coordinates(data: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with FARS "unknown position" codes replaced by ``NaN``."""
    clean = data.copy()
    clean["LONGITUD"] = clean["LONGITUD"].where(clean["LONGITUD"] <= LONGITUD_MISSING_ABOVE)
    clean["LATITUDE"] = clean["LATITUDE"].where(clean["LATITUDE"] <= LATITUDE_MISSING_ABOVE)
    return clean
