"""
NotifyProp Registry - Which property names an owner exposes
===========================================================

A `PropertyRegistry` is the single authority on whether a name is a legitimate
property of its owner. It is captured once, when the owner builds its
accessor, and never changes afterwards.

Introspection
-------------

`declared_properties(cls)` walks the class MRO and collects every *public*
name bound to a `property` or to a descriptor that marks itself observable
(`observable_property`). Each name maps to a typed getter built with
`operator.attrgetter`, so reading a property by name never repeats the
introspection.

The result is cached per class in a `WeakKeyDictionary`: a class is inspected
on first use only, however many instances get built, and the cache entry goes
away with the class.

Lookups
-------

Names are kept sorted, and `exists()` runs a binary search over them:

```python
registry = PropertyRegistry(track)
registry.names            # ('album', 'artist', 'title')
registry.exists("title")  # True
registry.exists("Title")  # False, matching is case-sensitive
```
"""

import logging
import threading
import weakref
from bisect import bisect_left
from operator import attrgetter
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple, Type

from .errors import is_blank

logger = logging.getLogger(__name__)

Getter = Callable[[Any], Any]

_cache: "weakref.WeakKeyDictionary[type, Mapping[str, Getter]]" = (
    weakref.WeakKeyDictionary()
)
_cache_lock = threading.Lock()


def _is_declared_property(attr: Any) -> bool:
    return isinstance(attr, property) or getattr(attr, "__observable_property__", False)


def declared_properties(cls: Type) -> Mapping[str, Getter]:
    """
    Map each public property name declared on `cls` to a getter.

    Subclass definitions shadow base-class ones, so a name bound to a plain
    attribute in a subclass hides a property of the same name further up.
    """
    with _cache_lock:
        cached = _cache.get(cls)
    if cached is not None:
        return cached

    found: Dict[str, Getter] = {}
    seen = set()
    for klass in cls.__mro__:
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if name.startswith("_") or not _is_declared_property(attr):
                continue
            found[name] = attrgetter(name)

    mapping = MappingProxyType(dict(sorted(found.items())))
    with _cache_lock:
        _cache[cls] = mapping
    logger.debug("Introspected %d properties on %s", len(mapping), cls.__qualname__)
    return mapping


def clear_cache() -> None:
    """Forget all introspection results. Classes patched at runtime need this."""
    with _cache_lock:
        _cache.clear()


class PropertyRegistry:
    """
    Immutable, sorted set of property names for one owner.

    `names` may also be passed explicitly, bypassing introspection; duplicates
    and blank or non-string entries are dropped.
    """

    __slots__ = ("_owner_type", "_names", "_getters")

    def __init__(self, owner: Any, names: Optional[Any] = None) -> None:
        self._owner_type = type(owner)
        getters = declared_properties(self._owner_type)
        if names is None:
            self._names: Tuple[str, ...] = tuple(getters)
            self._getters: Mapping[str, Getter] = getters
        else:
            unique = {n for n in names if not is_blank(n)}
            # Zero or one names are already sorted.
            self._names = tuple(sorted(unique)) if len(unique) > 1 else tuple(unique)
            self._getters = MappingProxyType(
                {n: getters.get(n) or attrgetter(n) for n in self._names}
            )

    @property
    def owner_type(self) -> Type:
        return self._owner_type

    @property
    def names(self) -> Tuple[str, ...]:
        """All property names, sorted."""
        return self._names

    def index(self, name: str) -> int:
        """Position of `name` in `names`, or -1 when absent."""
        if not self._names or not isinstance(name, str):
            return -1
        i = bisect_left(self._names, name)
        if i < len(self._names) and self._names[i] == name:
            return i
        return -1

    def exists(self, name: str) -> bool:
        """Return True if `name` is exactly one of the owner's property names."""
        return self.index(name) >= 0

    def getter(self, name: str) -> Optional[Getter]:
        """Cached getter for `name`, or None when the name is not registered."""
        if not self.exists(name):
            return None
        return self._getters[name]

    def __contains__(self, name: object) -> bool:
        return self.exists(name)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"PropertyRegistry({self._owner_type.__name__}: {list(self._names)})"
