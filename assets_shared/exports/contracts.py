"""Data contracts and naming conventions for aggregator generation."""
from dataclasses import dataclass
from pathlib import Path

ASSETS_DIR_NAME = "assets"
SOURCE_SUFFIX = ".ts"
AGGREGATOR_NAME = f"shared{SOURCE_SUFFIX}"
COMPONENT_MARKER = "component"
COMPONENT_ENTRY = f"index{SOURCE_SUFFIX}"
VIEWS_DIR = Path("src") / "views"


@dataclass(frozen=True)
class ExportUnit:
    """One module re-exported from an aggregator file."""
    path: Path
    name: str
