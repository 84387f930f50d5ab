"""Lookup of files that still import a deleted or renamed unit."""
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def find_import_files(path: Path | str) -> list[Path]:
    """Return files importing ``path``.

    Not implemented yet: always returns an empty list.
    """
    logger.debug(f"Reference lookup requested for {path}")
    return []
