"""
NotifyProp Notifier - Per-owner change broadcasting
===================================================

A `ChangeNotifier` holds the subscriber list of exactly one owner and
broadcasts "property X changed" to it. There is no process-wide registry:
two owners never share subscribers.

Subscribers
-----------

A subscriber is any callable taking `(source, name)`:

```python
def on_change(source, name):
    print(f"{type(source).__name__}.{name} changed")

notifier.subscribe(on_change)
notifier.notify_one("title")   # prints "Track.title changed"
```

Dispatch is synchronous, on the caller's thread, in registration order.
Exceptions raised by a subscriber propagate to whoever triggered the
notification, and the subscribers after it are not called for that event.

Mutating the subscriber list during dispatch
--------------------------------------------

By default dispatch iterates over a snapshot of the subscriber list, so a
subscriber may subscribe or unsubscribe (itself or others) while being
notified; the change takes effect from the next notification. With
`snapshot_subscribers=False` the live list is iterated and any mutation
during dispatch raises `RuntimeError`.

Single vs batch
---------------

- `notify_one(name)` validates according to the owner's `ValidationMode` and
  raises on bad names.
- `notify_many(names)` never raises for a name: blank entries, and unknown
  entries in STRICT mode, are skipped. With no names it notifies every
  registered property in registry order. It returns the names it notified.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .config import NotifierConfig, resolve_config
from .errors import InvalidPropertyName, UnknownPropertyError, is_blank
from .registry import PropertyRegistry

logger = logging.getLogger(__name__)

Subscriber = Callable[[Any, str], Any]


@dataclass(frozen=True, slots=True)
class PropertyChanged:
    """A single dispatched change: which owner, which property."""

    source: Any
    name: str


class ChangeNotifier:
    """Subscriber list plus single and batch notification for one owner."""

    def __init__(
        self,
        source: Any,
        registry: Optional[PropertyRegistry] = None,
        config: Optional[NotifierConfig] = None,
    ) -> None:
        self._source = source
        self._registry = registry if registry is not None else PropertyRegistry(source)
        self._config = resolve_config(config)
        self._subscribers: List[Subscriber] = []
        self._lock = threading.RLock()
        self._version = 0

    @property
    def source(self) -> Any:
        return self._source

    @property
    def registry(self) -> PropertyRegistry:
        return self._registry

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        with self._lock:
            return tuple(self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> Subscriber:
        """
        Register `subscriber` and return it, so this works as a decorator.

        Registering the same callable twice makes it fire twice per change.
        """
        if not callable(subscriber):
            raise TypeError(f"Subscriber must be callable, got {subscriber!r}")
        with self._lock:
            self._subscribers.append(subscriber)
            self._version += 1
        return subscriber

    def unsubscribe(self, subscriber: Subscriber) -> bool:
        """Remove one registration of `subscriber`. Returns False if absent."""
        with self._lock:
            try:
                self._subscribers.remove(subscriber)
            except ValueError:
                return False
            self._version += 1
            return True

    def clear(self) -> None:
        with self._lock:
            self._subscribers.clear()
            self._version += 1

    def __len__(self) -> int:
        return len(self._subscribers)

    def check_name(self, name: Any) -> bool:
        """
        Validate `name` for a single-property operation.

        Returns False when the operation should be skipped (a blank name in
        LENIENT mode) and raises when the mode forbids the name.
        """
        mode = self._config.mode
        if is_blank(name):
            if mode.checks_blank:
                raise InvalidPropertyName(name)
            return False
        if mode.checks_registry and not self._registry.exists(name):
            raise UnknownPropertyError(
                name, self._registry.owner_type, self._registry.names
            )
        return True

    def notify_one(self, name: str) -> Optional[PropertyChanged]:
        """Tell every subscriber that `name` changed. Returns the event sent."""
        if not self.check_name(name):
            return None
        return self._dispatch(name)

    def notify_many(self, names: Optional[Iterable[str]] = None) -> Tuple[str, ...]:
        """
        Notify several properties in the order given.

        A single string is one name, not a sequence of characters.
        With no names (None or empty) every registered property is notified in
        registry order. Blank names, and names unknown to the registry in
        STRICT mode, are skipped rather than raised.
        """
        if isinstance(names, str):
            names = (names,)
        requested = list(names) if names is not None else []
        if not requested:
            requested = list(self._registry.names)

        strict = self._config.mode.checks_registry
        notified = []
        for name in requested:
            if is_blank(name):
                logger.debug("Skipping blank property name %r", name)
                continue
            if strict and not self._registry.exists(name):
                logger.debug(
                    "Skipping unknown property %r on %s",
                    name,
                    self._registry.owner_type.__name__,
                )
                continue
            self._dispatch(name)
            notified.append(name)
        return tuple(notified)

    def _dispatch(self, name: str) -> PropertyChanged:
        event = PropertyChanged(self._source, name)
        if self._config.snapshot_subscribers:
            with self._lock:
                targets = tuple(self._subscribers)
            for subscriber in targets:
                subscriber(event.source, event.name)
        else:
            version = self._version
            for subscriber in self._subscribers:
                subscriber(event.source, event.name)
                if self._version != version:
                    raise RuntimeError("subscriber list changed during dispatch")
        logger.debug("Dispatched %r to %d subscribers", name, len(self._subscribers))
        return event

    def __repr__(self) -> str:
        return (
            f"ChangeNotifier({type(self._source).__name__}, "
            f"subscribers={len(self._subscribers)})"
        )
