"""
NotifyProp - Observable, validated properties for plain Python objects

An owner creates one `GuardedAccessor` for itself; property setters write
through it, subscribers hear about real changes by property name.
"""

from .accessor import GuardedAccessor
from .config import DEFAULT_CONFIG, NotifierConfig, ValidationMode
from .descriptors import observable_property
from .equality import identical, values_equal
from .errors import InvalidPropertyName, NotifyPropError, UnknownPropertyError
from .notifier import ChangeNotifier, PropertyChanged, Subscriber
from .registry import PropertyRegistry, declared_properties

__all__ = [
    # Core
    "GuardedAccessor",
    "PropertyRegistry",
    "ChangeNotifier",
    "PropertyChanged",
    "Subscriber",
    "declared_properties",
    # Declarative properties
    "observable_property",
    # Configuration
    "NotifierConfig",
    "ValidationMode",
    "DEFAULT_CONFIG",
    "values_equal",
    "identical",
    # Exceptions
    "NotifyPropError",
    "InvalidPropertyName",
    "UnknownPropertyError",
]
