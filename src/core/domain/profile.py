"""Build profiles.

A profile selects both the toolchain flag and the intermediate directory the
toolchain writes the artifact to.
"""

from __future__ import annotations

from enum import Enum


class Profile(str, Enum):
    """Build configuration mode."""

    DEBUG = "debug"
    RELEASE = "release"

    @classmethod
    def from_bool(cls, release: bool) -> "Profile":
        """Derive a profile from the `--release` switch."""

        return cls.RELEASE if release else cls.DEBUG

    @property
    def directory(self) -> str:
        """Name of the intermediate artifact directory under the output root."""

        return self.value

    def build_flags(self) -> list[str]:
        return ["--release"] if self is Profile.RELEASE else []

    def label(self) -> str:
        return "Release" if self is Profile.RELEASE else "Debug"
