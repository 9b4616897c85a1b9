"""Unit tests for the observable_property descriptor."""

import pytest

from notifyprop import GuardedAccessor, observable_property

from tests.utils import EventRecorder, Playlist


@pytest.mark.unit
@pytest.mark.descriptors
def test_class_access_returns_descriptor():
    """Accessing the attribute on the class yields the descriptor itself"""
    assert isinstance(Playlist.name, observable_property)
    assert Playlist.name.name == "name"
    assert Playlist.name.field == "_name"


@pytest.mark.unit
@pytest.mark.descriptors
def test_reads_default_before_first_write(playlist):
    """Unwritten properties read as their default"""
    assert playlist.name == "Untitled"
    assert playlist.shuffle is False


@pytest.mark.unit
@pytest.mark.descriptors
def test_write_stores_in_backing_field_and_notifies(playlist, recorder):
    """Assignment stores in _<name> and notifies under <name>"""
    playlist.name = "Road Trip"

    assert playlist.name == "Road Trip"
    assert playlist._name == "Road Trip"
    assert recorder.events == [(playlist, "name")]


@pytest.mark.unit
@pytest.mark.descriptors
def test_writing_default_is_not_a_change(playlist, recorder):
    """Assigning the default to an unwritten property notifies nothing"""
    playlist.shuffle = False

    assert recorder.events == []
    assert "_shuffle" not in vars(playlist)


@pytest.mark.unit
@pytest.mark.descriptors
def test_repeated_write_notifies_once(playlist, recorder):
    """Only the first of two equal writes notifies"""
    playlist.shuffle = True
    playlist.shuffle = True

    assert recorder.names == ["shuffle"]


@pytest.mark.unit
@pytest.mark.descriptors
def test_on_change_receives_owner_after_real_change(playlist):
    """on_change runs with the owner, once per real change"""
    playlist.volume = 80
    playlist.volume = 80
    playlist.volume = 50

    assert playlist.volume_log == [80, 50]


@pytest.mark.unit
@pytest.mark.descriptors
def test_missing_accessor_raises_attribute_error():
    """Writing before the owner created its accessor fails clearly"""

    class Bare:
        level = observable_property(0)

    with pytest.raises(AttributeError, match="'changes' accessor"):
        Bare().level = 3


@pytest.mark.unit
@pytest.mark.descriptors
def test_custom_accessor_attribute():
    """The accessor can live under any attribute name"""

    class Mixer:
        gain = observable_property(0.0, accessor="_props")

        def __init__(self):
            self._props = GuardedAccessor(self)

    mixer = Mixer()
    recorder = EventRecorder()
    mixer._props.subscribe(recorder)

    mixer.gain = 0.5

    assert recorder.names == ["gain"]


@pytest.mark.unit
@pytest.mark.descriptors
def test_descriptor_doc_and_repr():
    """doc= becomes the descriptor docstring"""

    class Radio:
        station = observable_property("FM4", doc="Current station.")

    assert Radio.station.__doc__ == "Current station."
    assert repr(Radio.station) == "observable_property('station', default='FM4')"


@pytest.mark.unit
@pytest.mark.descriptors
def test_instances_keep_independent_values():
    """Values live on instances, not on the shared descriptor"""
    first, second = Playlist(), Playlist()

    first.name = "Mine"

    assert second.name == "Untitled"


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.descriptors
def test_mutable_default_is_not_shared_between_instances():
    """In-place changes to one instance's default stay with that instance"""

    class Basket:
        items = observable_property([])

        def __init__(self):
            self.changes = GuardedAccessor(self)

    first, second = Basket(), Basket()

    first.items.append("apple")

    assert first.items == ["apple"]
    assert second.items == []
    assert Basket.items.default == []


@pytest.mark.unit
@pytest.mark.descriptors
def test_default_factory_builds_fresh_value_per_instance():
    """default_factory is called once per instance"""

    class Basket:
        tags = observable_property(default_factory=dict)

        def __init__(self):
            self.changes = GuardedAccessor(self)

    first, second = Basket(), Basket()
    first.tags["colour"] = "red"

    assert second.tags == {}
    assert first.tags is first.tags


@pytest.mark.unit
@pytest.mark.descriptors
def test_writing_factory_default_is_not_a_change():
    """An unwritten property compares against a fresh factory value"""

    class Basket:
        items = observable_property(default_factory=list)

        def __init__(self):
            self.changes = GuardedAccessor(self)

    basket = Basket()
    recorder = EventRecorder()
    basket.changes.subscribe(recorder)

    basket.items = []
    basket.items = ["pear"]

    assert recorder.names == ["items"]


@pytest.mark.unit
@pytest.mark.descriptors
def test_default_and_default_factory_are_exclusive():
    """Giving both a default and a factory is rejected"""
    with pytest.raises(TypeError):
        observable_property([], default_factory=list)
