__all__ = [
    "build_filename",
    "make_filename",
    "load_dataset",
    "load_years",
    "project_years",
    "summarize_years",
    "render_state_map",
    "InvalidStateError",
]
__version__ = "0.1.0"

from .etl.accidents import (
    build_filename,
    load_dataset,
    load_years,
    make_filename,
    project_years,
    summarize_years,
)
from .mapping import InvalidStateError, render_state_map
