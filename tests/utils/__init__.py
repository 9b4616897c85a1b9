"""
Test utilities for notifyprop.

Sample owner classes and a subscriber that records what it hears.
"""

from .models import Counter, Playlist, Track
from .recorder import EventRecorder, is_collected

__all__ = [
    "Counter",
    "EventRecorder",
    "Playlist",
    "Track",
    "is_collected",
]
