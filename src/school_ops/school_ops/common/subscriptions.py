"""Snapshot subscriptions.

A store pushes the *full* current snapshot to every subscriber; consumers
always recompute from the latest snapshot instead of patching prior state.
"""
from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

Unsubscribe = Callable[[], None]

logger = logging.getLogger(__name__)


class SnapshotFeed(Generic[T]):
    """Fan-out of full snapshots to registered callbacks."""

    def __init__(self, loader: Callable[[], Sequence[T]]):
        self._loader = loader
        self._callbacks: dict[int, Callable[[list[T]], None]] = {}
        self._next_token = 0

    def subscribe(self, on_update: Callable[[list[T]], None]) -> Unsubscribe:
        """Register a callback, deliver the current snapshot, return the unsubscribe handle."""
        snapshot = list(self._loader())
        token = self._next_token
        self._next_token += 1
        self._callbacks[token] = on_update
        try:
            on_update(snapshot)
        except Exception:
            self._callbacks.pop(token, None)
            raise

        def unsubscribe() -> None:
            self._callbacks.pop(token, None)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def publish(self, snapshot: Optional[Sequence[T]] = None) -> None:
        if not self._callbacks:
            return
        items = list(self._loader() if snapshot is None else snapshot)
        for callback in list(self._callbacks.values()):
            callback(list(items))


class KeyedSnapshotFeed(Generic[T]):
    """One SnapshotFeed per partition key (e.g. one per calendar day)."""

    def __init__(self, loader: Callable[[str], Sequence[T]]):
        self._loader = loader
        self._feeds: dict[str, SnapshotFeed[T]] = {}

    def subscribe(self, key: str, on_update: Callable[[list[T]], None]) -> Unsubscribe:
        feed = self._feeds.get(key)
        if feed is None:
            feed = SnapshotFeed(lambda: self._loader(key))
            self._feeds[key] = feed
        try:
            inner = feed.subscribe(on_update)
        except Exception:
            if feed.subscriber_count == 0:
                self._feeds.pop(key, None)
            raise

        def unsubscribe() -> None:
            inner()
            current = self._feeds.get(key)
            if current is not None and current.subscriber_count == 0:
                del self._feeds[key]

        return unsubscribe

    def publish(self, key: str) -> None:
        feed = self._feeds.get(key)
        if feed is not None:
            logger.debug("publishing snapshot for %s to %d subscriber(s)", key, feed.subscriber_count)
            feed.publish()

    def keys(self) -> list[str]:
        return list(self._feeds)
