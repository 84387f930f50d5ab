"""Path rules deciding which filesystem events trigger regeneration."""
import os
import re
from pathlib import Path

from ..exports import AGGREGATOR_NAME, ASSETS_DIR_NAME, SOURCE_SUFFIX

COPY_MARKER = "copy"

_sep = re.escape(os.sep)
COMPONENT_INDEX_PATTERN = re.compile(
    f"{ASSETS_DIR_NAME}{_sep}component(s)?{_sep}[a-zA-Z]*{_sep}index{re.escape(SOURCE_SUFFIX)}"
)


def is_editor_copy(path: str) -> bool:
    """Editors and file managers create '<name> copy.ts' style duplicates."""
    return COPY_MARKER in path


def should_regenerate(path: str) -> bool:
    """Source units and component entries count; images, styles and shared.ts do not."""
    if path.endswith(SOURCE_SUFFIX) and Path(path).name != AGGREGATOR_NAME:
        return True
    return COMPONENT_INDEX_PATTERN.search(path) is not None


def assets_root_of(path: str | Path) -> Path | None:
    """Nearest ancestor directory named ``assets``."""
    for parent in Path(path).parents:
        if parent.name == ASSETS_DIR_NAME:
            return parent
    return None
