"""
Watermark visibility decision logic.

Pure functions only: no I/O and no state between calls.
"""

from .visibility import resolve

__all__ = ["resolve"]
