"""Filesystem event source over watchdog observers.

Observer threads only enqueue events. Callbacks run on whichever thread calls
``pump``/``serve_forever``, so handlers never overlap.
"""
import logging
import os
import queue
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

logger = logging.getLogger(__name__)


class WatchEventKind(Enum):
    ADD = "add"
    UNLINK = "unlink"
    DIR_UNLINK = "unlink_dir"
    ERROR = "error"
    READY = "ready"


@dataclass
class WatchEvent:
    kind: WatchEventKind
    path: str | None = None
    error: BaseException | None = None


def create_observer(use_polling: bool) -> BaseObserver:
    """Create a watchdog observer, polling for filesystems without native events."""
    if use_polling:
        from watchdog.observers.polling import PollingObserver

        logger.info("Using polling observer for filesystem events")
        return PollingObserver()
    return Observer()


class QueueingEventHandler(FileSystemEventHandler):
    """Translates watchdog file events into add/unlink events on a queue."""

    def __init__(self, events: queue.Queue) -> None:
        super().__init__()
        self.events = events

    def _put(self, kind: WatchEventKind, path: str | bytes) -> None:
        self.events.put(WatchEvent(kind, os.fsdecode(path)))

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._put(WatchEventKind.ADD, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        # A folder moved out of the tree arrives as one directory delete
        kind = WatchEventKind.DIR_UNLINK if event.is_directory else WatchEventKind.UNLINK
        self._put(kind, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        # A rename is an unlink of the old name plus an add of the new one
        if not event.is_directory:
            self._put(WatchEventKind.UNLINK, event.src_path)
            self._put(WatchEventKind.ADD, event.dest_path)


class WatchSubscription:
    """One recursive watch over a fixed set of roots."""

    def __init__(
        self,
        roots: list[Path],
        observer: BaseObserver | None = None,
        use_polling: bool = False,
    ) -> None:
        self.roots = list(roots)
        self.events: queue.Queue[WatchEvent] = queue.Queue()
        self.handler = QueueingEventHandler(self.events)
        self._observer = observer if observer is not None else create_observer(use_polling)
        self._callbacks: dict[WatchEventKind, list[Callable]] = {kind: [] for kind in WatchEventKind}
        self._running = False

    def on(self, kind: WatchEventKind, callback: Callable) -> "WatchSubscription":
        self._callbacks[kind].append(callback)
        return self

    def start(self) -> None:
        """Start observing. READY is queued once every root is scheduled."""
        self._observer.start()
        for root in self.roots:
            try:
                self._observer.schedule(self.handler, str(root), recursive=True)
            except OSError as e:
                self.events.put(WatchEvent(WatchEventKind.ERROR, str(root), e))
        self._running = True
        self.events.put(WatchEvent(WatchEventKind.READY))
        logger.info(f"Watching {len(self.roots)} assets folder(s)")

    def pump(self, timeout: float | None = None) -> bool:
        """Dispatch one queued event. False when none arrived within timeout."""
        try:
            event = self.events.get(timeout=timeout)
        except queue.Empty:
            return False
        self.dispatch(event)
        return True

    def dispatch(self, event: WatchEvent) -> None:
        for callback in self._callbacks[event.kind]:
            if event.kind == WatchEventKind.READY:
                callback()
            elif event.kind == WatchEventKind.ERROR:
                callback(event.error)
            else:
                try:
                    callback(event.path)
                except OSError as e:
                    self.dispatch(WatchEvent(WatchEventKind.ERROR, event.path, e))

    def serve_forever(self, poll_interval: float = 1.0) -> None:
        while self._running:
            self.pump(timeout=poll_interval)

    def stop(self) -> None:
        self._running = False
        self._observer.stop()
        if self._observer.is_alive():
            self._observer.join()
