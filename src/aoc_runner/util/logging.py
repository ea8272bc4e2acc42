from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT = "aoc_runner"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    logger = logging.getLogger(_ROOT)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    if logger.handlers:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
