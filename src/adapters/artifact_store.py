"""Staging of built artifacts on the local filesystem."""

from __future__ import annotations

import hashlib
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

_CHUNK = 1024 * 1024


def stage_artifact(*, source: Path, destination: Path) -> Path:
    """Copy `source` to `destination`, replacing whatever is there.

    The destination directory is created when missing. File mode bits are
    copied along with the content so staged executables stay executable.
    A source that already is the destination is left alone. Errors (missing
    source, permissions) propagate unchanged.
    """

    destination.parent.mkdir(parents=True, exist_ok=True)
    # build/debug/debug: the toolchain already wrote the artifact in place.
    if source.resolve() == destination.resolve():
        logger.debug("%s is already staged", destination)
        return destination
    logger.debug("Copying %s -> %s", source, destination)
    shutil.copy2(source, destination)
    return destination


def file_sha256(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK), b""):
            digest.update(chunk)
    return digest.hexdigest()
