"""
NotifyProp Configuration - Per-owner behaviour switches
=======================================================

The library runs in-process and has no files or environment variables to read.
Everything configurable lives in a frozen `NotifierConfig`, chosen when an
owner builds its `GuardedAccessor`:

```python
from notifyprop import GuardedAccessor, ValidationMode

class Track:
    def __init__(self):
        self.changes = GuardedAccessor(self, mode=ValidationMode.LENIENT)
```

Validation modes
----------------

**LENIENT**: nothing raises. Blank names are ignored and unknown names are
accepted as notification names.

**VALIDATING**: blank names raise `InvalidPropertyName`; names are not checked
against the registry.

**STRICT**: blank names raise `InvalidPropertyName` and names missing from the
registry raise `UnknownPropertyError`. This is the default.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Optional

from .equality import values_equal


class ValidationMode(Enum):
    """How strictly property names are checked."""

    LENIENT = "lenient"
    VALIDATING = "validating"
    STRICT = "strict"

    @property
    def checks_blank(self) -> bool:
        return self is not ValidationMode.LENIENT

    @property
    def checks_registry(self) -> bool:
        return self is ValidationMode.STRICT


@dataclass(frozen=True)
class NotifierConfig:
    """Immutable settings shared by an owner's registry, notifier and accessor."""

    mode: ValidationMode = ValidationMode.STRICT
    equality: Callable[[Any, Any], bool] = field(default=values_equal)
    # Dispatch over a copy of the subscriber list.
    snapshot_subscribers: bool = True

    def with_overrides(self, **overrides: Any) -> "NotifierConfig":
        """Return a copy with the given fields replaced."""
        if not overrides:
            return self
        mode = overrides.get("mode")
        if isinstance(mode, str):
            overrides["mode"] = ValidationMode(mode)
        return replace(self, **overrides)


DEFAULT_CONFIG = NotifierConfig()


def resolve_config(
    config: Optional[NotifierConfig] = None, **overrides: Any
) -> NotifierConfig:
    """Combine an optional base config with keyword overrides."""
    base = config if config is not None else DEFAULT_CONFIG
    return base.with_overrides(**overrides)
