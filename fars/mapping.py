"""Interactive maps of FARS accidents for one state and year."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import folium
import geopandas as gpd
import pandas as pd

from .etl.accidents import load_dataset, make_filename, normalize_year, sanitize_coordinates
from .settings import maps_dir

LOGGER = logging.getLogger(__name__)

MARKER_RADIUS = 2
MARKER_COLOR = "#B44040"


class InvalidStateError(ValueError):
    """Raised when a state code does not occur in the loaded year."""


def select_state(data: pd.DataFrame, code: int) -> pd.DataFrame:
    """Return the rows of ``data`` recorded in state ``code``.

    Raises
    ------
    InvalidStateError
        If ``code`` is not one of the ``STATE`` codes present in ``data``.
    """
    if code not in set(data["STATE"].dropna().unique()):
        msg = f"invalid STATE number: {code}"
        LOGGER.error(msg)
        raise InvalidStateError(msg)
    return data.loc[data["STATE"] == code]


def coordinate_extent(located: pd.DataFrame) -> Optional[tuple[float, float, float, float]]:
    """Return ``(lon_min, lat_min, lon_max, lat_max)`` of sanitised coordinates.

    Each axis skips its own missing values, so a row with an unknown
    latitude still widens the longitude range. ``None`` when either axis has
    no known value at all.
    """
    lon = located["LONGITUD"].dropna()
    lat = located["LATITUDE"].dropna()
    if lon.empty or lat.empty:
        return None
    return float(lon.min()), float(lat.min()), float(lon.max()), float(lat.max())


def accident_points(located: pd.DataFrame) -> gpd.GeoDataFrame:
    """Return sanitised accidents with both coordinates known as WGS84 points."""
    complete = located.dropna(subset=["LONGITUD", "LATITUDE"])
    return gpd.GeoDataFrame(
        geometry=gpd.points_from_xy(complete["LONGITUD"], complete["LATITUDE"]),
        crs=4326,
    )


def build_state_map(located: pd.DataFrame) -> folium.Map:
    """Draw one marker per located accident on a base map fitted to their extent."""
    extent = coordinate_extent(located)
    if extent is None:
        raise ValueError("No known coordinates to fit the map to")
    lon_min, lat_min, lon_max, lat_max = extent

    fmap = folium.Map(location=[(lat_min + lat_max) / 2, (lon_min + lon_max) / 2])
    points = accident_points(located)
    if not points.empty:
        folium.GeoJson(
            points,
            name="accidents",
            marker=folium.CircleMarker(
                radius=MARKER_RADIUS,
                color=MARKER_COLOR,
                fill=True,
                fill_opacity=0.8,
                weight=0,
            ),
        ).add_to(fmap)
    fmap.fit_bounds([[lat_min, lon_min], [lat_max, lon_max]])
    return fmap


def render_state_map(state, year, data_dir: str | Path | None = None,
                     output: str | Path | None = None) -> None:
    """Write an HTML map of every accident in ``state`` during ``year``.

    A missing accident file or an unknown state code raises. A state with
    nothing to draw only logs ``no accidents to plot`` and writes no file.
    """
    data = load_dataset(make_filename(year), data_dir)
    code = int(state)
    accidents = select_state(data, code)
    if accidents.empty:
        LOGGER.info("no accidents to plot", extra={"state": code})
        return None

    located = sanitize_coordinates(accidents)
    if coordinate_extent(located) is None:
        LOGGER.info("no accidents to plot", extra={"state": code, "unlocated": len(accidents)})
        return None

    if output is None:
        output = maps_dir() / f"accidents_{code}_{normalize_year(year)}.html"
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    build_state_map(located).save(str(output))
    LOGGER.info(
        "Map of %d accidents written to %s",
        len(accidents),
        output,
        extra={"state": code},
    )
    return None
