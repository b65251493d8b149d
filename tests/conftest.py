import sys
from pathlib import Path

import pytest

# Allow `import fmark` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _block_menu_and_browser_processes(monkeypatch):
    """Tests must never spawn a real menu or browser."""

    def _blocked(*_args, **_kwargs):
        raise AssertionError("subprocess spawned during tests")

    import fmark.menu as menu

    monkeypatch.setattr(menu.subprocess, "run", _blocked)
    monkeypatch.setattr(menu.subprocess, "Popen", _blocked)
