"""File watching and incremental regeneration."""

from .coordinator import WatchCoordinator
from .filters import assets_root_of, is_editor_copy, should_regenerate
from .subscription import (
    QueueingEventHandler,
    WatchEvent,
    WatchEventKind,
    WatchSubscription,
    create_observer,
)

__all__ = [
    "QueueingEventHandler",
    "WatchCoordinator",
    "WatchEvent",
    "WatchEventKind",
    "WatchSubscription",
    "assets_root_of",
    "create_observer",
    "is_editor_copy",
    "should_regenerate",
]
