import matplotlib
import pandas as pd
import pytest

matplotlib.use("Agg")


def write_year(directory, year, frame):
    path = directory / f"accident_{year}.csv.bz2"
    frame.to_csv(path, index=False)
    return path


def accidents_2013() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "STATE": [1, 1, 1, 2, 2, 6, 48],
            "ST_CASE": [10001, 10002, 10003, 20001, 20002, 60001, 480001],
            "MONTH": [1, 3, 3, 3, 12, 1, 7],
            "LATITUDE": [32.1, 33.5, 99.99, 61.2, 64.8, 36.7, 99.99],
            "LONGITUD": [-86.3, -87.1, 999.99, -149.9, -147.7, -119.8, 999.99],
        }
    )


def accidents_2014() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "STATE": [1, 2],
            "ST_CASE": [10001, 20001],
            "MONTH": [3, 5],
            "LATITUDE": [32.4, 61.1],
            "LONGITUD": [-86.0, -150.0],
        }
    )


@pytest.fixture
def fars_dir(tmp_path):
    write_year(tmp_path, 2013, accidents_2013())
    write_year(tmp_path, 2014, accidents_2014())
    return tmp_path


@pytest.fixture
def accidents():
    return accidents_2013()
