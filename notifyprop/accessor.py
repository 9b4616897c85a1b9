"""
NotifyProp Accessor - Guarded reads and writes of observable properties
=======================================================================

`GuardedAccessor` is the helper an owner creates for itself and delegates to.
It owns the owner's `PropertyRegistry` and `ChangeNotifier`, and turns a
property write into one guarded step:

1. validate the property name (per `ValidationMode`),
2. compare old and new value with the configured equality,
3. if they differ: store, notify, then run the optional callback.

```python
from notifyprop import GuardedAccessor

class Track:
    def __init__(self, title=""):
        self.changes = GuardedAccessor(self)
        self._title = title

    @property
    def title(self):
        return self._title

    @title.setter
    def title(self, value):
        self.changes.set("_title", value)

track = Track()
track.changes.subscribe(lambda source, name: print(name, "changed"))
track.title = "Intro"   # prints "title changed"
track.title = "Intro"   # equal value, nothing happens
```

Backing fields are addressed by attribute name (`"_title"` above). When the
property name is omitted it is taken from the calling function, which is the
property setter in the usual case.

Thread safety
-------------

Nothing here serialises concurrent writers. Owners shared between threads
need their own discipline, such as a lock held around every `set`.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from .caller import caller_name
from .config import NotifierConfig, resolve_config
from .notifier import ChangeNotifier, PropertyChanged, Subscriber
from .registry import PropertyRegistry

logger = logging.getLogger(__name__)

_MISSING = object()


class GuardedAccessor:
    """Per-owner registry, notifier and guarded setter in one object."""

    __slots__ = ("_owner", "_config", "_registry", "_notifier")

    def __init__(
        self,
        owner: Any,
        config: Optional[NotifierConfig] = None,
        *,
        names: Optional[Iterable[str]] = None,
        **overrides: Any,
    ) -> None:
        self._owner = owner
        self._config = resolve_config(config, **overrides)
        self._registry = PropertyRegistry(owner, names)
        self._notifier = ChangeNotifier(owner, self._registry, self._config)

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def config(self) -> NotifierConfig:
        return self._config

    @property
    def registry(self) -> PropertyRegistry:
        return self._registry

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    # ------------------------------------------------------------------
    # Guarded access
    # ------------------------------------------------------------------

    def set(
        self,
        field: str,
        value: Any,
        name: Optional[str] = None,
        callback: Optional[Callable[..., Any]] = None,
        *,
        pass_name: bool = False,
        default: Any = _MISSING,
    ) -> bool:
        """
        Write `value` to the owner's backing attribute `field` if it changed.

        Args:
            field: Name of the backing attribute on the owner, e.g. "_title".
            value: The new value.
            name: Property to notify. Defaults to the calling function's name.
            callback: Run after notification, and only when the value changed.
            pass_name: Call `callback(name)` instead of `callback()`.
            default: What the field counts as holding while the owner has no
                such attribute. Without it the first write always goes through.

        Returns:
            True if the field was written, False if the value was equal (or
            the name was blank in LENIENT mode).

        Raises:
            InvalidPropertyName: Blank name, unless LENIENT.
            UnknownPropertyError: Name not registered, STRICT only.
        """
        if name is None:
            name = caller_name()
        if not self._notifier.check_name(name):
            return False

        current = getattr(self._owner, field, default)
        if current is not _MISSING and self._config.equality(current, value):
            logger.debug("Suppressed write to %r: value unchanged", name)
            return False

        setattr(self._owner, field, value)
        self._notifier.notify_one(name)
        if callback is not None:
            if pass_name:
                callback(name)
            else:
                callback()
        return True

    def get(self, name: Optional[str] = None, default: Any = None) -> Any:
        """
        Read a property by name through the registry's cached getter.

        Prefer plain attribute access; this exists for generic callers that
        only know the name. Returns `default` for unregistered names (when
        the mode allows them) and for getters raising AttributeError.
        """
        if name is None:
            name = caller_name()
        if not self._notifier.check_name(name):
            return default
        getter = self._registry.getter(name)
        if getter is None:
            return default
        try:
            return getter(self._owner)
        except AttributeError:
            return default

    # ------------------------------------------------------------------
    # Delegation
    # ------------------------------------------------------------------

    def exists(self, name: str) -> bool:
        return self._registry.exists(name)

    def notify(self, name: Optional[str] = None) -> Optional[PropertyChanged]:
        """Notify a single property; the name defaults to the caller's."""
        if name is None:
            name = caller_name()
        return self._notifier.notify_one(name)

    def notify_many(self, names: Optional[Iterable[str]] = None) -> Tuple[str, ...]:
        return self._notifier.notify_many(names)

    def subscribe(self, subscriber: Subscriber) -> Subscriber:
        return self._notifier.subscribe(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> bool:
        return self._notifier.unsubscribe(subscriber)

    def __repr__(self) -> str:
        return (
            f"GuardedAccessor({type(self._owner).__name__}, "
            f"mode={self._config.mode.value}, properties={len(self._registry)})"
        )
