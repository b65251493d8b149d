from __future__ import annotations

import subprocess
from typing import List, Optional

from .config import SUPPORTED_MENU_PROGRAMS
from .log import get_logger

log = get_logger(__name__)

CURRENT_MARKER = " <-- current"


class Menu:
    """dmenu-style picker run as a child process.

    Items go to the program's stdin, the chosen (or typed) line comes back on
    stdout. An empty answer means the user cancelled.
    """

    def __init__(self, program: str, rows: int) -> None:
        if program not in SUPPORTED_MENU_PROGRAMS:
            raise ValueError(f"Unsupported menu program: {program}")
        self.program = program
        self.rows = rows

    def command(self, prompt: str) -> List[str]:
        rows = str(self.rows)
        if self.program == "fzf":
            return ["fzf", "-i", "--print-query", "--prompt", f"{prompt}> "]
        if self.program == "rofi":
            return ["rofi", "-dmenu", "-i", "-l", rows, "-p", prompt]
        return [self.program, "-i", "-l", rows, "-p", prompt]

    def choose(self, items: Optional[str], default: Optional[str], prompt: str) -> str:
        if items is not None and default:
            items = _mark_current(items, default)

        output = self._run(self.command(prompt), items or "")

        if self.program == "fzf":
            # --print-query puts the typed query first, the selection (if any) last.
            lines = [ln for ln in output.splitlines() if ln.strip()]
            output = lines[-1] if lines else ""
        if default:
            output = output.replace(default + CURRENT_MARKER, default)
        return output.strip()

    def _run(self, cmd: List[str], stdin_text: str) -> str:
        log.debug("Running menu: %s", cmd)
        try:
            proc = subprocess.run(
                cmd,
                input=stdin_text.encode("utf-8"),
                stdout=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            raise RuntimeError(f"Failed to execute command: {cmd[0]}") from e
        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RuntimeError("Invalid UTF-8 sequence in menu output") from e


def _mark_current(items: str, default: str) -> str:
    """Tag the item equal to ``default``; items merely containing it stay as they are."""
    lines = items.split("\n")
    return "\n".join(ln + CURRENT_MARKER if ln == default else ln for ln in lines)


def open_in_browser(browser: str, url: str) -> None:
    try:
        subprocess.Popen([browser, url], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        raise RuntimeError(f"Failed to open browser: {e}") from e
    log.info("Opened %s in %s", url, browser)
