from __future__ import annotations

import argparse
from typing import List, Optional

import yaml

from . import __version__
from .config import (
    DEFAULT_OPTS_ENV,
    SUPPORTED_MENU_PROGRAMS,
    Settings,
    check_menu_program,
    clamp_menu_rows,
    default_options,
    find_program,
    load_settings,
    resolve_bookmark_file,
)
from .line_codec import ADD_BOOKMARK, add_bookmark_line, decode_line, has_segment_delimiters
from .log import LogConfig, get_logger, setup_logging
from .menu import Menu, open_in_browser
from .model import Bookmark
from .parsed_file import ParsedFile
from .plain_text import PlainText, read_text

log = get_logger(__name__)

OPTION_GOTO = "goto"
OPTION_MODIFY = "modify"
OPTION_REMOVE = "remove"
OPTION_CANCEL = "cancel"
OPTIONS = "\n".join((OPTION_GOTO, OPTION_MODIFY, OPTION_REMOVE, OPTION_CANCEL))

PROMPT_TITLE = "title"
PROMPT_CATEGORY = "category"
PROMPT_URL = "url"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fmark",
        description="Search and edit a plain-text bookmark file through a dmenu-style picker.",
        epilog=f"{DEFAULT_OPTS_ENV} may hold default options, e.g. '--menu bemenu --rows 20'.",
    )
    p.add_argument("-V", "--version", action="version", version=f"fmark {__version__}")
    p.add_argument("--config", default=None, help="YAML config file (optional). Env vars override defaults.")
    p.add_argument(
        "-m",
        "--menu",
        default=None,
        choices=SUPPORTED_MENU_PROGRAMS,
        help="Menu program to use (default: bemenu).",
    )
    p.add_argument("-b", "--browser", default=None, help="Browser to open bookmarks with (default: firefox).")
    p.add_argument("-p", "--path", default=None, help="Bookmark file (default: $HOME/.bookmarks).")
    p.add_argument("-r", "--rows", default=None, help="Number of rows shown by the menu (1-255, default: 20).")
    p.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING/ERROR (overrides env/config).")
    p.add_argument("--no-color", action="store_true", default=None, help="Disable colored logging.")
    return p


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = _build_parser()
    # Real arguments are parsed on top of the stored defaults so they win.
    ns = p.parse_args(default_options())
    return p.parse_args(argv, namespace=ns)


def _apply_args(cfg: Settings, args: argparse.Namespace) -> Settings:
    if args.menu:
        cfg.menu_program = args.menu
    if args.browser:
        cfg.browser = args.browser
    if args.path:
        cfg.bookmark_file_path = args.path
    if args.rows is not None:
        cfg.menu_rows = clamp_menu_rows(args.rows)
    if args.log_level:
        cfg.log_level = args.log_level
    if args.no_color:
        cfg.no_color = True
    return cfg


def main(argv: List[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        cfg = _apply_args(load_settings(args.config), args)
    except (OSError, yaml.YAMLError) as e:
        setup_logging(LogConfig())
        log.error("Failed to load config %s: %s", args.config, e)
        return 2
    setup_logging(LogConfig(level=cfg.log_level, no_color=cfg.no_color))

    try:
        menu = Menu(check_menu_program(cfg.menu_program), cfg.menu_rows)
        browser = find_program(cfg.browser)
        path = resolve_bookmark_file(cfg.bookmark_file_path)
        index = ParsedFile.parse(read_text(path))
    except (ValueError, OSError) as e:
        log.error("%s", e)
        return 2

    cache = PlainText()
    rc = 0
    try:
        run_session(menu, index, cache, browser)
    except RuntimeError as e:
        log.error("%s", e)
        rc = 2

    try:
        cache.flush(path, index)
    except OSError as e:
        log.error("Failed to write bookmark file %s: %s", path, e)
        return 2
    return rc


def run_session(menu: Menu, index: ParsedFile, cache: PlainText, browser: str) -> None:
    """Show the bookmark list until the user opens a bookmark or cancels."""
    while True:
        listing = add_bookmark_line(index.longest_title, index.longest_category) + "\n"
        listing += cache.render_bookmarks(index)
        line = menu.choose(listing, None, "bookmarks")
        if not line:
            return

        bookmark = decode_line(line)
        if bookmark is None:
            if ADD_BOOKMARK not in line:
                return
            new = _prompt_bookmark(menu, index, cache, None)
            if new is not None:
                index.upsert(new)
            continue

        # Listed titles may be truncated; edit what is actually stored.
        bookmark = index.get(bookmark.url) or bookmark
        option = menu.choose(OPTIONS, None, "options")
        if option == OPTION_GOTO:
            open_in_browser(browser, bookmark.url)
            return
        if option == OPTION_MODIFY:
            new = _prompt_bookmark(menu, index, cache, bookmark)
            if new is not None:
                index.upsert(new, bookmark)
        elif option == OPTION_REMOVE:
            answer = menu.choose(None, None, f"Remove {bookmark.title}? (yes/no)")
            if answer.lower() == "yes":
                index.remove(bookmark.url)


def _prompt_bookmark(
    menu: Menu,
    index: ParsedFile,
    cache: PlainText,
    current: Optional[Bookmark],
) -> Optional[Bookmark]:
    title = menu.choose(current.title if current else None, None, PROMPT_TITLE).strip()
    if not title:
        return None

    categories = cache.render_categories(index)
    category = menu.choose(categories, current.category if current else None, PROMPT_CATEGORY).strip()
    if not category:
        return None

    url = menu.choose(current.url if current else None, None, PROMPT_URL).strip()
    if not url:
        return None

    new = Bookmark(title=title, category=category, url=url)
    if any(has_segment_delimiters(v) for v in (new.title, new.category, new.url)):
        log.warning("Bookmark fields cannot contain '{' or '}': %s", new)
        return None
    return new

