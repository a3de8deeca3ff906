"""
Frame timing engine
"""

from .frame_driver import FrameDriver

__all__ = ['FrameDriver']
