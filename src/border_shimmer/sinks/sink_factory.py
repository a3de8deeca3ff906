# sink_factory.py

from border_shimmer.models.enums import SinkType
from border_shimmer.sinks.sink_interface import IFrameSink
from border_shimmer.sinks.borders_sink import BordersCommandSink
from border_shimmer.sinks.virtual_sink import VirtualSink


def create_sink(
    *,
    sink_type: SinkType,
    command: str = "borders",
) -> IFrameSink:
    """
    Dry runs log each frame and keep only the latest one.
    """
    if sink_type == SinkType.VIRTUAL:
        return VirtualSink(echo=True, history=1)

    return BordersCommandSink(command=command)
