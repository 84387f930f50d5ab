from importlib.metadata import version

from .config import SharedConfig
from .exports import AssetsLocator, ExportUnit, TreeWalker, derive_export_name, synthesize_content
from .generation import GenerationOrchestrator, GenerationResult, LintOutcome, LintStatus
from .plugin import SharedPlugin, vite_plugin_shared
from .watch import WatchCoordinator, WatchSubscription

__version__ = version("assets-shared")

__all__ = [
    "AssetsLocator",
    "ExportUnit",
    "GenerationOrchestrator",
    "GenerationResult",
    "LintOutcome",
    "LintStatus",
    "SharedConfig",
    "SharedPlugin",
    "TreeWalker",
    "WatchCoordinator",
    "WatchSubscription",
    "derive_export_name",
    "synthesize_content",
    "vite_plugin_shared",
]
