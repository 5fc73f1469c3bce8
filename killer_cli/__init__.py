"""
Command-line interface for killer cage combinations

Prints the minimum/maximum sum of a cage and every digit combination
that adds up to a given total.
"""

from killer_core import __version__

__all__ = ["__version__"]
