"""
Caller-name inference.

Property setters usually notify about themselves, so the property name can be
taken from the name of the function that called into the accessor:

```python
@title.setter
def title(self, value):
    self.changes.set("_title", value)  # notifies "title"
```
"""

import sys
from typing import Optional


def caller_name(depth: int = 2) -> Optional[str]:
    """
    Return the function name `depth` frames above this call.

    depth=1 is the function calling `caller_name`, depth=2 is its caller.
    Module-level code reports "<module>", which callers treat as blank.
    """
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return None
    name = frame.f_code.co_name
    if name.startswith("<"):
        return None
    return name
