"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from adapters.cargo import CargoToolchain
from cli.options import ProjectDirOption, load_settings
from cli.ui_components import build_doctor_table, print_banner
from core.config import get_user_env_file
from core.domain.profile import Profile
from core.layout import ArtifactLayout

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run(
    project_dir: ProjectDirOption = Path("."),
    no_banner: Annotated[bool, typer.Option("--no-banner", help="Skip the banner.")] = False,
) -> None:
    """Check the toolchain and the project layout, and show what `build` would use."""

    settings = load_settings()
    toolchain = CargoToolchain(project_dir, settings)
    layout = ArtifactLayout.for_platform(project_dir)

    if not no_banner:
        print_banner(_console)

    table = build_doctor_table()

    version = toolchain.version()
    if version:
        table.add_row("Toolchain", "OK", version)
    else:
        table.add_row("Toolchain", "FAIL", f"{toolchain.program!r} not runnable (set BINSTAGE_CARGO)")

    manifest = project_dir / "Cargo.toml"
    table.add_row("Cargo.toml", "OK" if manifest.is_file() else "MISSING", str(manifest))

    table.add_row(
        "Output root",
        "OK" if layout.output_root.is_dir() else "ABSENT",
        str(layout.output_root),
    )
    for profile in Profile:
        directory = layout.output_root / profile.directory
        table.add_row(f"{profile.label()} dir", "OK" if directory.is_dir() else "ABSENT", str(directory))

    table.add_row("Executable suffix", "OK", layout.suffix or "(none)")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    _console.print(table)

    if not version:
        raise typer.Exit(code=1)
