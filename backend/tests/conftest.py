import pytest

from roomfit.models.room import PlacedObject, Room


@pytest.fixture
def room():
    """20 x 14 ft room, 10 ft ceiling."""
    return Room(width=20, depth=14, height=10)


@pytest.fixture
def make():
    """Factory for PlacedObjects with 1 x 1 ft defaults."""
    def _make(id, kind="custom", cx=10.0, cy=7.0, w=1.0, d=1.0, **kwargs):
        return PlacedObject(id=id, kind=kind, cx=cx, cy=cy, w=w, d=d, **kwargs)
    return _make


@pytest.fixture
def chair(make):
    def _chair(id, cx, cy, **kwargs):
        kwargs.setdefault("w", 1.6)
        kwargs.setdefault("d", 1.6)
        return make(id, "chair", cx, cy, **kwargs)
    return _chair


@pytest.fixture
def table(make):
    def _table(id, cx, cy, **kwargs):
        kwargs.setdefault("w", 7.0)
        kwargs.setdefault("d", 3.0)
        return make(id, "table", cx, cy, **kwargs)
    return _table
