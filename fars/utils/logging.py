import logging
import os
from typing import Optional, Union

# Third-party loggers that flood INFO output while drawing charts and maps.
NOISY_LOGGERS = ("matplotlib", "PIL", "fiona", "pyogrio")


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Return a numeric level from ``level`` or ``$FARS_LOG_LEVEL`` (default INFO)."""
    if level is None:
        level = os.getenv("FARS_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        numeric = logging.getLevelName(level.strip().upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level '{level}'")
        return numeric
    return level


def setup_logging(name: str = "fars", log_file: Optional[str] = None,
                  level: Union[int, str, None] = None) -> logging.Logger:
    """Route every FARS log record through one root configuration.

    Scripts call this once at start-up. Records go to stderr and, when
    ``log_file`` is given, are also appended to that file. Any handlers a
    previous call installed are replaced. ``level`` may be a number or a
    name such as ``"debug"``; left as ``None`` it comes from
    ``$FARS_LOG_LEVEL`` and defaults to INFO. The loggers in
    :data:`NOISY_LOGGERS` never drop below WARNING, so chart and map
    rendering does not bury the pipeline messages.

    Returns the logger called ``name``.
    """

    numeric = resolve_level(level)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=numeric, format=fmt, handlers=handlers, force=True)
    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(numeric, logging.WARNING))
    return logging.getLogger(name)
