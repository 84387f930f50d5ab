from pathlib import Path

from assets_shared.config import SharedConfig
from assets_shared.generation import GenerationOrchestrator
from assets_shared.plugin import SharedPlugin, vite_plugin_shared
from assets_shared.watch import WatchCoordinator, WatchSubscription


class TestSharedPlugin:
    def test_identity(self, project: Path) -> None:
        plugin = vite_plugin_shared(project, SharedConfig(show_deleted=True))
        assert plugin.name == "vite-plugin-shared"
        assert plugin.apply == "serve"
        assert plugin.coordinator.config.show_deleted is True
        assert plugin.coordinator.project_path == project

    def test_build_start_enters_watch(self, project, lint_runner, reporter, stub_observer) -> None:
        (project / "src" / "views" / "a" / "assets").mkdir(parents=True)
        coordinator = WatchCoordinator(
            project,
            orchestrator=GenerationOrchestrator(project, lint_runner=lint_runner),
            reporter=reporter,
            subscription_factory=lambda roots: WatchSubscription(roots, observer=stub_observer),
        )
        plugin = SharedPlugin(coordinator)

        plugin.build_start()
        plugin.build_start()

        assert coordinator.subscription is not None
        assert stub_observer.scheduled == [str(project / "src" / "views" / "a" / "assets")]
