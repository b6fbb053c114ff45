"""
Utility modules for the random context provider.

This package contains the random value generator and small text helpers
used by the route handlers.
"""

from .random_values import RandomValueGenerator
from .text import to_title_case

__all__ = ["RandomValueGenerator", "to_title_case"]
