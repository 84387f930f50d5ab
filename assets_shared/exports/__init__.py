"""Discovery, walking and rendering of aggregator exports."""
from .content import module_specifier, synthesize_content
from .contracts import (
    AGGREGATOR_NAME,
    ASSETS_DIR_NAME,
    SOURCE_SUFFIX,
    ExportUnit,
)
from .locator import AssetsLocator
from .naming import derive_export_name
from .walker import TreeWalker

__all__ = [
    "AGGREGATOR_NAME",
    "ASSETS_DIR_NAME",
    "SOURCE_SUFFIX",
    "AssetsLocator",
    "ExportUnit",
    "TreeWalker",
    "derive_export_name",
    "module_specifier",
    "synthesize_content",
]
