from __future__ import annotations

import logging

from rich.logging import RichHandler

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int = 0) -> None:
    level = _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=verbosity > 1, markup=False)],
        force=True,
    )
