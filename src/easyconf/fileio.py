from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .errors import ConfigNotFoundError, ConfigReadError, ConfigWriteError

logger = logging.getLogger(__name__)


def read_text(path: str | Path) -> str:
    """Return the whole UTF-8 content of *path*."""
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(f"File {str(path)!r} does not exist")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(f"Could not read {str(path)!r}: {exc}") from exc


def write_text(path: str | Path, text: str) -> None:
    """Replace the content of *path* with *text*.

    The content goes to a sibling ``.tmp`` file which then replaces the
    target, so readers never observe a partial file.  An existing target
    must be writable and keeps its permission bits.
    """
    path = Path(path)
    exists = path.exists()
    if exists and not os.access(path, os.W_OK):
        raise ConfigWriteError(f"File {str(path)!r} is not writable")

    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8") as fh:
            fh.write(text)
        if exists:
            shutil.copymode(path, tmp)
        tmp.replace(path)
    except OSError as exc:
        try:
            tmp.unlink(missing_ok=True)
        except OSError as cleanup_exc:  # pragma: no cover - best effort
            logger.warning("Failed to remove temp file %s: %s", tmp, cleanup_exc)
        raise ConfigWriteError(f"Could not write {str(path)!r}: {exc}") from exc
