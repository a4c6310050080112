"""Run binstage from a checkout without installing it: `python -m main build NAME`."""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import app  # noqa: PLC0415

    app(prog_name="binstage")


if __name__ == "__main__":
    main()
