"""
NotifyProp Errors - Exceptions raised by validated property operations
======================================================================

Two things can go wrong when a property is addressed by name:

- **InvalidPropertyName**: the name is missing, empty or whitespace only.
- **UnknownPropertyError**: the name is well formed but the owner does not
  declare a public property with that name.

Both derive from `NotifyPropError`, and from the matching builtin
(`ValueError` / `LookupError`) so callers can catch them either way.

A `False` return from `GuardedAccessor.set` is never an error: it only means
the new value equalled the old one.
"""

import difflib
from typing import Iterable, Optional, Type


class NotifyPropError(Exception):
    """Base class for all notifyprop errors."""

    pass


class InvalidPropertyName(NotifyPropError, ValueError):
    """Raised when a property name is required but blank or not a string."""

    def __init__(self, name: object = None) -> None:
        self.name = name
        super().__init__(f"Property name must be a non-blank string, got {name!r}")


class UnknownPropertyError(NotifyPropError, LookupError):
    """Raised when a name is not in the owner's property registry."""

    def __init__(
        self,
        name: str,
        owner_type: Optional[Type] = None,
        known: Iterable[str] = (),
    ) -> None:
        self.name = name
        self.owner_type = owner_type
        owner = owner_type.__name__ if owner_type is not None else "object"
        message = f"{owner} has no property {name!r}"
        close = difflib.get_close_matches(name, list(known), n=3)
        if close:
            message += f" (did you mean {', '.join(repr(c) for c in close)}?)"
        super().__init__(message)


def is_blank(name: object) -> bool:
    """True for None, non-strings, and empty or whitespace-only strings."""
    return not isinstance(name, str) or not name.strip()
