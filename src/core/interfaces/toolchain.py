"""Toolchain contract.

The build runner only needs two things from a toolchain: the argv it would
run, and the exit code of actually running it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.profile import Profile


@runtime_checkable
class Toolchain(Protocol):
    """Minimal contract for a compiler toolchain.

    Rules:
    - `build` blocks until the external process exits.
    - The returned exit code is authoritative; it is never reinterpreted.
    """

    def command(self, binary_name: str, profile: Profile) -> list[str]:
        ...

    def build(self, binary_name: str, profile: Profile) -> int:
        """Build `binary_name` in `profile` and return the process exit code."""

        ...
