"""
Utils Package

Contains utility modules shared by the key layer.
"""

from .logger import KeyLogger

__all__ = [
    "KeyLogger",
]
