"""Domain models (Pydantic v2).

These models describe *what* a build invocation and its outcome are, not how
the toolchain or the filesystem are driven.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.profile import Profile


class BuildRequest(BaseModel):
    """Parameters of a single build-and-stage invocation."""

    model_config = ConfigDict(frozen=True)

    binary_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Name of the binary target (also the artifact file stem).",
    )
    release: bool = Field(
        default=False,
        description="Build in release mode instead of debug.",
    )

    @field_validator("binary_name")
    @classmethod
    def _plain_name(cls, value: str) -> str:
        if value != value.strip():
            raise ValueError("binary name must not have surrounding whitespace")
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError("binary name must be a plain name, not a path")
        return value

    @property
    def profile(self) -> Profile:
        return Profile.from_bool(self.release)


class StageReceipt(BaseModel):
    """Record of one successfully staged artifact."""

    binary_name: str = Field(..., min_length=1)
    profile: Profile
    command: list[str] = Field(
        default_factory=list,
        description="Argv the toolchain was invoked with.",
    )
    source: str = Field(..., description="Intermediate artifact path.")
    destination: str = Field(..., description="Final staged artifact path.")
    size_bytes: int = Field(..., ge=0)
    sha256: str = Field(..., min_length=64, max_length=64)
    staged_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Moment the artifact was staged (UTC).",
    )
