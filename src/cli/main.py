"""Typer application: `binstage build` and `binstage doctor`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.cargo import CargoToolchain
from adapters.json_exporter import export_receipt_json
from cli import doctor
from cli.options import ProjectDirOption, load_settings
from cli.ui_components import confirmation_line
from core.domain.models import BuildRequest
from core.errors import BuildFailedError, ToolchainUnavailableError
from core.layout import ArtifactLayout
from core.log import configure_logging
from core.services.stage_pipeline import build_and_stage

APP_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Build a single binary with cargo and stage it under build/<name>/.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"binstage {APP_VERSION}", highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """binstage: build one binary, stage one artifact."""


@app.command()
def build(
    name: Annotated[str, typer.Argument(help="Binary target to build.")],
    release: Annotated[bool, typer.Option("--release", "-r", help="Build in release mode.")] = False,
    project_dir: ProjectDirOption = Path("."),
    receipt: Annotated[
        Optional[Path],
        typer.Option("--receipt", help="Also write a JSON receipt of the staged artifact."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging.")] = False,
) -> None:
    """Build NAME and copy the executable to build/NAME/."""

    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        request = BuildRequest(binary_name=name, release=release)
    except ValidationError as exc:
        messages = "; ".join(err["msg"] for err in exc.errors())
        raise typer.BadParameter(messages, param_hint="NAME") from exc

    toolchain = CargoToolchain(project_dir, settings)
    layout = ArtifactLayout.for_platform(project_dir)

    try:
        result = build_and_stage(request, toolchain=toolchain, layout=layout)
    except BuildFailedError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=exc.returncode) from exc
    except ToolchainUnavailableError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=exc.exit_code) from exc

    if receipt is not None:
        export_receipt_json(receipt=result, output_path=receipt)
        logger.info("Receipt written to %s", receipt)

    _console.print(confirmation_line(result), soft_wrap=True)


def run() -> None:
    app()
