from __future__ import annotations

import os
import shlex
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

from .log import get_logger
from .plain_text import template_text

log = get_logger(__name__)

SUPPORTED_MENU_PROGRAMS = ("bemenu", "dmenu", "rofi", "fzf")
DEFAULT_BOOKMARK_FILE_NAME = ".bookmarks"
DEFAULT_MENU_ROWS = 20
DEFAULT_OPTS_ENV = "BM_DEFAULT_OPTS"


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None else v


@dataclass
class Settings:
    # Programs
    menu_program: str = "bemenu"
    browser: str = "firefox"

    # Bookmark file ("" => $HOME/.bookmarks)
    bookmark_file_path: str = ""

    # Menu
    menu_rows: int = DEFAULT_MENU_ROWS

    # Logging / UX
    log_level: str = "WARNING"
    no_color: bool = False

    @staticmethod
    def from_env() -> "Settings":
        s = Settings()
        s.menu_program = _env_str("BM_MENU_PROGRAM", s.menu_program)
        s.browser = _env_str("BM_BROWSER", s.browser)
        s.bookmark_file_path = _env_str("BM_FILE_PATH", s.bookmark_file_path)
        s.menu_rows = clamp_menu_rows(_env_int("BM_MENU_ROWS", s.menu_rows))

        s.log_level = _env_str("BM_LOG_LEVEL", s.log_level)
        s.no_color = _env_bool("BM_NO_COLOR", s.no_color)
        return s

    @staticmethod
    def from_file(path: Path) -> "Settings":
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        s = Settings.from_env()
        for k, v in data.items():
            if hasattr(s, k):
                setattr(s, k, v)
        s.menu_rows = clamp_menu_rows(s.menu_rows)
        return s


def load_settings(config_path: Optional[str]) -> Settings:
    if config_path:
        return Settings.from_file(Path(config_path))
    return Settings.from_env()


def default_options() -> List[str]:
    """Command-line options stored in ``BM_DEFAULT_OPTS``."""
    return shlex.split(os.getenv(DEFAULT_OPTS_ENV, ""))


def clamp_menu_rows(value) -> int:
    try:
        rows = int(value)
    except (TypeError, ValueError):
        return DEFAULT_MENU_ROWS
    return min(max(rows, 1), 255)


def find_program(name: str) -> str:
    if shutil.which(name) is None:
        raise ValueError(f"Program ({name}) was not found in the PATH.")
    return name


def check_menu_program(name: str) -> str:
    if name not in SUPPORTED_MENU_PROGRAMS:
        raise ValueError(f"Unsupported menu program: {name}")
    return find_program(name)


def resolve_bookmark_file(path: str) -> Path:
    """Locate the bookmark file, creating the default one from a template.

    A custom path must already exist; the default ``$HOME/.bookmarks`` is
    created on first use.
    """
    if path:
        custom = Path(path).expanduser()
        if not custom.exists():
            raise ValueError(f"File not found: {custom}")
        return custom

    home = os.getenv("HOME")
    if not home:
        raise ValueError("Failed to get HOME environment variable.")
    default = Path(home) / DEFAULT_BOOKMARK_FILE_NAME
    if not default.exists():
        default.write_text(template_text(), encoding="utf-8")
        log.info("Created bookmark file from template: %s", default)
    return default
