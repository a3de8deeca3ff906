"""
border-shimmer - pulse window border colors through a color cycle
"""

__version__ = "0.1.0"
