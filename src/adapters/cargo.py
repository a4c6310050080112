"""Cargo toolchain adapter.

Runs `cargo build --bin <name> [--release]` in the project directory. The
toolchain's own output is not captured; it streams straight to the terminal.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from core.config import AppSettings
from core.domain.profile import Profile
from core.errors import ToolchainNotExecutableError, ToolchainNotFoundError
from core.interfaces.toolchain import Toolchain

logger = logging.getLogger(__name__)


class CargoToolchain(Toolchain):
    """Builds a single binary target with cargo."""

    def __init__(self, project_dir: Path, settings: AppSettings | None = None) -> None:
        self._project_dir = Path(project_dir)
        self._program = (settings or AppSettings()).cargo

    @property
    def program(self) -> str:
        return self._program

    def command(self, binary_name: str, profile: Profile) -> list[str]:
        return [self._program, "build", "--bin", binary_name, *profile.build_flags()]

    def build(self, binary_name: str, profile: Profile) -> int:
        cmd = self.command(binary_name, profile)
        logger.debug("Running: %s in %s", " ".join(cmd), self._project_dir)
        try:
            result = subprocess.run(cmd, cwd=self._project_dir, check=False)
        except FileNotFoundError as exc:
            raise ToolchainNotFoundError(self._program) from exc
        except PermissionError as exc:
            raise ToolchainNotExecutableError(self._program) from exc
        logger.debug("Toolchain exited with %s", result.returncode)
        return result.returncode

    def version(self) -> str | None:
        """First line of `<cargo> --version`, or None when it cannot be run."""

        try:
            result = subprocess.run(
                [self._program, "--version"],
                cwd=self._project_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("Toolchain version probe failed: %s", exc)
            return None
        if result.returncode != 0:
            return None
        lines = result.stdout.strip().splitlines()
        return lines[0].strip() if lines else None
