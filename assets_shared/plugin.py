"""Bundler plugin object: the dev server's build-start hook enters the watcher."""
from pathlib import Path

from .config import SharedConfig
from .watch import WatchCoordinator


class SharedPlugin:
    name = "vite-plugin-shared"
    apply = "serve"

    def __init__(self, coordinator: WatchCoordinator) -> None:
        self.coordinator = coordinator

    def build_start(self) -> None:
        self.coordinator.watch()


def vite_plugin_shared(
    project_path: Path | str | None = None,
    options: SharedConfig | None = None,
) -> SharedPlugin:
    project_path = Path(project_path) if project_path is not None else Path.cwd()
    return SharedPlugin(WatchCoordinator(project_path, config=options))
