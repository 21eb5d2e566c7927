import pytest

from tearcloth.pointer import PointerState
from tearcloth.tunables import Tunables


@pytest.fixture
def tunables():
    return Tunables.defaults()


@pytest.fixture
def calm(tunables):
    """Slider defaults without gravity, so particles at rest stay put."""
    return tunables._replace(gravity=0.0)


@pytest.fixture
def far_pointer():
    pointer = PointerState()
    pointer.update_position(5000.0, 5000.0)
    pointer.end_frame()
    return pointer
