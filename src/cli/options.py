"""Options and settings loading shared by the commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from core.config import AppSettings

ProjectDirOption = Annotated[
    Path,
    typer.Option(
        "--project-dir",
        "-C",
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Project directory holding Cargo.toml and build/.",
    ),
]


def load_settings() -> AppSettings:
    """Read `AppSettings`, reporting bad environment values as usage errors."""

    try:
        return AppSettings()
    except ValidationError as exc:
        messages = "; ".join(
            f"BINSTAGE_{'_'.join(str(part) for part in err['loc']).upper()}: {err['msg']}"
            for err in exc.errors()
        )
        raise typer.BadParameter(messages, param_hint="environment") from exc
