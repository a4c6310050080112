"""
Shared pytest fixtures for binstage tests.

The real toolchain is never spawned: `FakeToolchain` implements the
`Toolchain` protocol and, on a successful "build", writes the artifact where
cargo would have put it.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from core.domain.profile import Profile
from core.layout import ArtifactLayout


class FakeToolchain:
    """Records builds and drops a fake executable into build/<profile>/."""

    def __init__(
        self,
        layout: ArtifactLayout,
        returncode: int = 0,
        payload: bytes = b"\x7fELF fake binary",
        write_artifact: bool = True,
    ) -> None:
        self.layout = layout
        self.returncode = returncode
        self.payload = payload
        self.write_artifact = write_artifact
        self.calls: list[tuple[str, Profile]] = []

    def command(self, binary_name: str, profile: Profile) -> list[str]:
        return ["cargo", "build", "--bin", binary_name, *profile.build_flags()]

    def build(self, binary_name: str, profile: Profile) -> int:
        self.calls.append((binary_name, profile))
        if self.returncode == 0 and self.write_artifact:
            source = self.layout.source_path(binary_name, profile)
            source.parent.mkdir(parents=True, exist_ok=True)
            source.write_bytes(self.payload)
        return self.returncode


@pytest.fixture
def windows_layout(tmp_path: Path) -> ArtifactLayout:
    """Layout anchored at tmp_path with the Windows `.exe` suffix."""
    return ArtifactLayout.for_platform(tmp_path, "win32")


@pytest.fixture
def fake_toolchain(windows_layout: ArtifactLayout) -> FakeToolchain:
    return FakeToolchain(windows_layout)


@pytest.fixture
def toolchain_factory():
    """The FakeToolchain class, for tests that need a custom setup."""
    return FakeToolchain
