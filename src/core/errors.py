"""Domain exceptions raised by the build pipeline."""

from __future__ import annotations


class BinstageError(Exception):
    """Base class for errors the CLI knows how to report."""


class BuildFailedError(BinstageError):
    """The toolchain exited with a non-zero status."""

    def __init__(self, returncode: int, command: list[str] | None = None) -> None:
        self.returncode = returncode
        self.command = list(command or [])
        super().__init__(f"Build failed with exit code {returncode}")


class ToolchainUnavailableError(BinstageError):
    """The toolchain process could not be started, so there is no exit code."""

    exit_code = 1
    reason = "cannot be started"

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"Toolchain executable {self.reason}: {program}")


class ToolchainNotFoundError(ToolchainUnavailableError):
    exit_code = 127
    reason = "not found"


class ToolchainNotExecutableError(ToolchainUnavailableError):
    exit_code = 126
    reason = "not executable"
