# sinks/sink_interface.py
"""
IFrameSink Protocol
===================
Render target for border frames.
Minimal contract for anything that can display a BorderFrame.
"""

from __future__ import annotations
from typing import Protocol

from border_shimmer.models.frame import BorderFrame


class IFrameSink(Protocol):
    """
    Protocol defining the frame sink interface.

    render() must not return until the frame has been handed off
    (for the command sink: until the process has exited). Failures are
    raised as SinkInvocationError; the caller decides whether they are fatal.
    """

    async def render(self, frame: BorderFrame) -> None:
        """Display one frame."""
        ...
