"""
Shared pytest fixtures and configuration for notifyprop tests.
"""

import pytest

from notifyprop import ValidationMode
from notifyprop.registry import clear_cache

from tests.utils import EventRecorder, Playlist, Track


@pytest.fixture(autouse=True)
def reset_registry_cache():
    """Drop cached introspection results so classes defined in tests start clean."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def recorder():
    """Provide a fresh subscriber that records every notification."""
    return EventRecorder()


@pytest.fixture
def track(recorder):
    """A strict Track with the recorder already subscribed."""
    track = Track(title="Intro", artist="The xx", album="xx")
    track.changes.subscribe(recorder)
    return track


@pytest.fixture(params=list(ValidationMode), ids=lambda m: m.value)
def any_mode(request):
    """Run a test once per validation mode."""
    return request.param


@pytest.fixture
def playlist(recorder):
    """A strict Playlist with the recorder already subscribed."""
    playlist = Playlist()
    playlist.changes.subscribe(recorder)
    return playlist
