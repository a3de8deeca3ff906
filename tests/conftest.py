import pytest

from border_shimmer.models.color import Color
from border_shimmer.models.domain import AnimationConfig, AnimationContext
from border_shimmer.sinks.virtual_sink import VirtualSink
from border_shimmer.utils.colors import rotate_half


@pytest.fixture
def red():
    return Color.from_hex("#FF0000FF")


@pytest.fixture
def blue():
    return Color.from_hex("#0000FFFF")


@pytest.fixture
def make_context():
    """
    Build an AnimationContext; inactive defaults to the active track rotated by half.
    """
    def _make(active, inactive=None, secs=1.0, fps=2.0, width=5.0, **glow):
        active = tuple(active)
        inactive = tuple(inactive) if inactive is not None else tuple(rotate_half(active))
        config = AnimationConfig(secs=secs, fps=fps, width=width, **glow)
        return AnimationContext(active=active, inactive=inactive, config=config)

    return _make


@pytest.fixture
def virtual_sink():
    return VirtualSink()


@pytest.fixture
def recorded_sleeps():
    """Fake asyncio.sleep that records requested delays and returns immediately"""
    delays = []

    async def _sleep(delay):
        delays.append(delay)

    _sleep.delays = delays
    return _sleep
