from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class LogConfig:
    level: str = "WARNING"
    no_color: bool = False

    def resolved_level(self) -> int:
        level = logging.getLevelName(self.level.upper())
        return level if isinstance(level, int) else logging.WARNING

    def use_color(self) -> bool:
        if self.no_color or os.getenv("NO_COLOR") is not None:
            return False
        return sys.stderr.isatty()


def _make_handler(cfg: LogConfig) -> logging.Handler:
    if cfg.use_color():
        # Menus own stdout; logs stay on stderr.
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    return handler


def setup_logging(cfg: LogConfig) -> None:
    """Route all fmark logging to one stderr handler at the configured level."""
    level = cfg.resolved_level()
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = _make_handler(cfg)
    handler.setLevel(level)
    root.setLevel(level)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
