from __future__ import annotations

import logging
import sys
from pathlib import Path


def _ensure_repo_root_on_path() -> None:
    """Ensure the repository root (parent of this package) is on ``sys.path``.

    Running ``python session_timer/__main__.py`` directly leaves the package
    undiscoverable; inserting its parent directory lets the imports resolve.
    """
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


try:
    # python -m session_timer
    from .demo import run  # type: ignore[attr-defined]
except ImportError:
    # executed as a script
    _ensure_repo_root_on_path()
    from session_timer.demo import run  # type: ignore[attr-defined]


def main() -> int:
    """Entry point for running the demonstration scenarios."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
