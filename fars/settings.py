from pathlib import Path
import os


def data_dir() -> Path:
    """Return the directory holding ``accident_<year>.csv.bz2`` files.

    ``$FARS_DATA_DIR`` wins if set, otherwise the current working directory.
    """
    return Path(os.getenv("FARS_DATA_DIR", "."))


def maps_dir() -> Path:
    """Return the output directory for rendered maps (``$FARS_MAPS_DIR``)."""
    return Path(os.getenv("FARS_MAPS_DIR", "maps"))
