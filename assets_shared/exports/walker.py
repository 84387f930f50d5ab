"""Recursive collection of export units below an assets root."""
import logging
from pathlib import Path

from .contracts import (
    AGGREGATOR_NAME,
    COMPONENT_ENTRY,
    COMPONENT_MARKER,
    SOURCE_SUFFIX,
    ExportUnit,
)
from .naming import derive_export_name

logger = logging.getLogger(__name__)


def _is_real_dir(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()


class TreeWalker:
    """Walks one assets root and returns the units its aggregator exports."""

    def walk(self, root: Path | str) -> list[ExportUnit]:
        """Collect units under root. The root's own aggregator is skipped."""
        root = Path(root)
        entries = [p for p in sorted(root.iterdir()) if p.name != AGGREGATOR_NAME]
        units: list[ExportUnit] = []
        self._collect(root, entries, units)
        logger.debug(f"Collected {len(units)} units under {root}")
        return units

    def _collect(self, parent: Path, entries: list[Path], units: list[ExportUnit]) -> None:
        for entry in entries:
            if _is_real_dir(entry):
                if COMPONENT_MARKER in entry.name.lower():
                    units.extend(self._component_units(entry))
                else:
                    self._collect(entry, sorted(entry.iterdir()), units)
            elif entry.name.endswith(SOURCE_SUFFIX):
                units.append(ExportUnit(entry, derive_export_name(parent, entry.name)))

    def _component_units(self, components_dir: Path) -> list[ExportUnit]:
        """components/<Name>/index.ts only, one level deep."""
        units: list[ExportUnit] = []
        for component in sorted(components_dir.iterdir()):
            if not _is_real_dir(component):
                continue
            entry = component / COMPONENT_ENTRY
            if entry.exists():
                units.append(ExportUnit(entry, derive_export_name(component, COMPONENT_ENTRY)))
        return units
