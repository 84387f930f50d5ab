"""Keeps aggregator files current while the dev server runs."""
import logging
from collections.abc import Callable
from pathlib import Path

from ..config import SharedConfig
from ..generation import GenerationOrchestrator, GenerationResult
from ..output import ConsoleReporter
from ..references import find_import_files
from .filters import assets_root_of, is_editor_copy, should_regenerate
from .subscription import WatchEventKind, WatchSubscription

logger = logging.getLogger(__name__)


class WatchCoordinator:
    """Owns the process's watch subscription and its ready flag.

    States: no subscription -> subscribed, not ready -> ready. The initial
    sweep triggers one full regeneration; afterwards each relevant add or
    remove regenerates only the assets root containing the file.
    """

    def __init__(
        self,
        project_path: Path | str,
        config: SharedConfig | None = None,
        orchestrator: GenerationOrchestrator | None = None,
        reporter: ConsoleReporter | None = None,
        subscription_factory: Callable[[list[Path]], WatchSubscription] | None = None,
    ) -> None:
        self.project_path = Path(project_path).resolve()
        self.config = config or SharedConfig.load(self.project_path)
        self.orchestrator = orchestrator or GenerationOrchestrator(self.project_path)
        self.reporter = reporter or ConsoleReporter()
        self._subscription_factory = subscription_factory or WatchSubscription
        self.subscription: WatchSubscription | None = None
        self.ready = False

    def watch(self) -> WatchSubscription:
        """Subscribe once over the roots known now. Later calls reuse it."""
        if self.subscription is not None:
            return self.subscription

        roots = self.orchestrator.locator.locate()
        subscription = self._subscription_factory(roots)
        subscription.on(WatchEventKind.ADD, self.on_add)
        subscription.on(WatchEventKind.UNLINK, self.on_unlink)
        subscription.on(WatchEventKind.DIR_UNLINK, self.on_unlink_dir)
        subscription.on(WatchEventKind.ERROR, self.on_error)
        subscription.on(WatchEventKind.READY, self.on_ready)
        self.subscription = subscription
        subscription.start()
        return subscription

    def serve_forever(self) -> None:
        subscription = self.watch()
        try:
            subscription.serve_forever()
        except KeyboardInterrupt:
            logger.info("Stopping watcher")
        finally:
            subscription.stop()

    def on_ready(self) -> None:
        if self.ready:
            return
        self.reporter.watch_started()
        self.reporter.generation(self.orchestrator.run())
        self.ready = True

    def on_add(self, path: str) -> None:
        if is_editor_copy(path):
            return
        if self.ready:
            self.regenerate_for(path)

    def on_unlink(self, path: str) -> None:
        self.regenerate_for(path)
        if self.config.show_deleted:
            find_import_files(path)

    def on_unlink_dir(self, path: str) -> None:
        """Every unit below a removed folder is gone; refresh its assets root."""
        root = assets_root_of(path)
        if root is None:
            return
        logger.debug(f"{path} removed, regenerating {root}")
        self.reporter.generation(self.orchestrator.run([root]))

    def on_error(self, error: BaseException | None) -> None:
        logger.error(f"Watch error: {error}")
        self.reporter.watch_error(error or "unknown")

    def regenerate_for(self, path: str) -> GenerationResult | None:
        """Regenerate the single assets root holding path, if path matters."""
        if not should_regenerate(path):
            return None
        root = assets_root_of(path)
        if root is None:
            return None

        logger.debug(f"{path} changed, regenerating {root}")
        result = self.orchestrator.run([root])
        self.reporter.generation(result)
        return result
