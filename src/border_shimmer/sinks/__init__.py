"""
Frame sinks - render targets for border frames
"""

from .sink_interface import IFrameSink
from .borders_sink import BordersCommandSink, DEFAULT_COMMAND
from .virtual_sink import VirtualSink
from .sink_factory import create_sink

__all__ = ['IFrameSink', 'BordersCommandSink', 'DEFAULT_COMMAND', 'VirtualSink', 'create_sink']
