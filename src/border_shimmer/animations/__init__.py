"""
Border animations
"""

from .base import BaseAnimation
from .cyclic import CyclicAnimator

__all__ = ['BaseAnimation', 'CyclicAnimator']
