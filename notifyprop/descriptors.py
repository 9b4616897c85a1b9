"""
NotifyProp Descriptors - Declarative observable properties
==========================================================

`observable_property` declares a public property whose writes go through the
owner's `GuardedAccessor`, so the equality gate, notification and callback
come for free:

```python
from notifyprop import GuardedAccessor, observable_property

class Track:
    title = observable_property("")
    rating = observable_property(0, on_change=lambda track: track.save())

    def __init__(self):
        self.changes = GuardedAccessor(self)
```

The value lives in the backing attribute `_<name>` on the instance. The first
read before any write stores a copy of `default` there (or the result of
`default_factory()`), so mutable defaults are never shared between
instances. The descriptor is picked up by the registry like any `property`.
"""

import copy
from typing import Any, Callable, Generic, Optional, Type, TypeVar, overload

T = TypeVar("T")

_UNSET = object()


class observable_property(Generic[T]):
    """Descriptor for a property backed by `_<name>` and guarded by the owner."""

    __observable_property__ = True

    def __init__(
        self,
        default: Optional[T] = None,
        *,
        default_factory: Optional[Callable[[], T]] = None,
        on_change: Optional[Callable[[Any], Any]] = None,
        accessor: str = "changes",
        doc: Optional[str] = None,
    ) -> None:
        if default is not None and default_factory is not None:
            raise TypeError("cannot specify both default and default_factory")
        self.default = default
        self.default_factory = default_factory
        self.on_change = on_change
        self.accessor = accessor
        self.name: Optional[str] = None
        self.field: Optional[str] = None
        self.__doc__ = doc

    def __set_name__(self, owner: Type, name: str) -> None:
        self.name = name
        self.field = f"_{name}"

    @overload
    def __get__(self, instance: None, owner: Type) -> "observable_property[T]": ...

    @overload
    def __get__(self, instance: object, owner: Type) -> T: ...

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        value = getattr(instance, self.field, _UNSET)
        if value is _UNSET:
            # Each instance gets its own default, stored so in-place changes stick.
            value = self._new_default()
            setattr(instance, self.field, value)
        return value

    def _new_default(self) -> Optional[T]:
        if self.default_factory is not None:
            return self.default_factory()
        return copy.copy(self.default)

    def __set__(self, instance: object, value: T) -> None:
        guard = getattr(instance, self.accessor, None)
        if guard is None:
            raise AttributeError(
                f"{type(instance).__name__} has no {self.accessor!r} accessor; "
                f"create a GuardedAccessor before assigning {self.name!r}"
            )
        callback = None
        if self.on_change is not None:
            callback = lambda: self.on_change(instance)  # noqa: E731
        default = self.default
        if self.default_factory is not None and not hasattr(instance, self.field):
            default = self.default_factory()
        guard.set(self.field, value, self.name, callback, default=default)

    def __repr__(self) -> str:
        return f"observable_property({self.name!r}, default={self.default!r})"
