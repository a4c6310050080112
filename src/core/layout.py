"""Output layout convention.

    build/<profile>/<name><ext>   intermediate artifact written by the toolchain
    build/<name>/<name><ext>      staged artifact

Only the project directory the layout is anchored at can change.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from core.domain.profile import Profile

OUTPUT_ROOT = "build"

_WINDOWS_PLATFORMS = ("win32", "cygwin")


def executable_suffix(platform: str | None = None) -> str:
    """Executable file extension for `platform` (defaults to the running one)."""

    platform = sys.platform if platform is None else platform
    return ".exe" if platform.startswith(_WINDOWS_PLATFORMS) else ""


@dataclass(frozen=True)
class ArtifactLayout:
    project_dir: Path
    suffix: str = ""

    @classmethod
    def for_platform(cls, project_dir: Path, platform: str | None = None) -> "ArtifactLayout":
        return cls(project_dir=Path(project_dir), suffix=executable_suffix(platform))

    @property
    def output_root(self) -> Path:
        return self.project_dir / OUTPUT_ROOT

    def artifact_name(self, binary_name: str) -> str:
        return f"{binary_name}{self.suffix}"

    def source_path(self, binary_name: str, profile: Profile) -> Path:
        return self.output_root / profile.directory / self.artifact_name(binary_name)

    def destination_dir(self, binary_name: str) -> Path:
        return self.output_root / binary_name

    def destination_path(self, binary_name: str) -> Path:
        return self.destination_dir(binary_name) / self.artifact_name(binary_name)
