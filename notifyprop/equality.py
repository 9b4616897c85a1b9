"""
NotifyProp Equality - Canonical equality for the change gate
============================================================

`values_equal` decides whether a write is a real change. It follows Python's
`==` with two adjustments:

- numpy arrays compare with `numpy.array_equal` instead of elementwise `==`,
  whose truth value is ambiguous.
- a comparison whose result has no single truth value (an elementwise `==`
  returning an array) counts as "different". Exceptions raised by `__eq__`
  itself propagate to the writer.
"""

from typing import Any

import numpy as np


def values_equal(a: Any, b: Any) -> bool:
    """Return True when `a` and `b` are the same value."""
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        if type(a) != type(b):
            return False
        return bool(np.array_equal(a, b))
    result = a == b
    try:
        return bool(result)
    except ValueError:
        # Elementwise results such as arrays have no single truth value.
        return False


def identical(a: Any, b: Any) -> bool:
    """Identity comparison, for owners that treat every new object as a change."""
    return a is b
