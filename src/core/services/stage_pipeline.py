"""Build-and-stage orchestration.

The CLI delegates the whole flow here so it stays free of side-effects other
than printing. The sequence is strictly linear with one early exit:

1. run the toolchain for the requested binary and profile
2. stop with `BuildFailedError` on a non-zero exit (nothing touched on disk)
3. copy the intermediate artifact into `build/<name>/`
"""

from __future__ import annotations

import logging

from adapters.artifact_store import file_sha256, stage_artifact
from core.domain.models import BuildRequest, StageReceipt
from core.errors import BuildFailedError
from core.interfaces.toolchain import Toolchain
from core.layout import ArtifactLayout

logger = logging.getLogger(__name__)


def build_and_stage(
    request: BuildRequest,
    *,
    toolchain: Toolchain,
    layout: ArtifactLayout,
) -> StageReceipt:
    """Build `request.binary_name` and stage the resulting executable."""

    name = request.binary_name
    profile = request.profile
    command = toolchain.command(name, profile)
    logger.info("Building %s (%s)", name, profile.label())

    returncode = toolchain.build(name, profile)
    if returncode != 0:
        raise BuildFailedError(returncode, command)

    source = layout.source_path(name, profile)
    destination = stage_artifact(source=source, destination=layout.destination_path(name))
    logger.info("Staged %s", destination)

    return StageReceipt(
        binary_name=name,
        profile=profile,
        command=command,
        source=str(source),
        destination=str(destination),
        size_bytes=destination.stat().st_size,
        sha256=file_sha256(destination),
    )
