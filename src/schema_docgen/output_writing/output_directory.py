"""Output directory preparation."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

_LOGGER = logging.getLogger(__name__)


class OutputDirectoryError(Exception):
    """Raised when the output directory cannot be safely prepared."""


def prepare_output_directory(
    directory: Path | str,
    *,
    clean: bool = True,
    protected: Sequence[Path | str] = (),
) -> Path:
    """Create the output directory, pruning previous contents when `clean` is set.

    Args:
      directory: Destination for generated documentation.
      clean: Remove the directory before recreating it.
      protected: Paths (schema sources) that must never be removed.

    Returns:
      The resolved output directory.

    Raises:
      OutputDirectoryError: If the path is not a directory or pruning it is unsafe.
    """
    target = Path(directory).resolve()
    if target.exists() and not target.is_dir():
        raise OutputDirectoryError(f"Output path is not a directory: {target}")

    if clean and target.exists():
        _ensure_prunable(target, protected)
        _LOGGER.debug("Pruning output directory %s", target)
        shutil.rmtree(target)

    target.mkdir(parents=True, exist_ok=True)
    return target


def _ensure_prunable(target: Path, protected: Sequence[Path | str]) -> None:
    if target == Path(target.anchor):
        raise OutputDirectoryError(f"Refusing to prune filesystem root: {target}")
    if target == Path.cwd().resolve():
        raise OutputDirectoryError(f"Refusing to prune the working directory: {target}")
    for raw_path in protected:
        protected_path = Path(raw_path).resolve()
        if protected_path == target or target in protected_path.parents:
            raise OutputDirectoryError(
                f"Refusing to prune {target}: it contains schema source {protected_path}"
            )
