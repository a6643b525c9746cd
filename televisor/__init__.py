"""Televisor - simple TV set simulator.

Core concept: a TV set owns a bounded list of channels found by a channel
search on first power-on, and navigates them with next, previous and
direct-tune operations that wrap and clamp instead of failing.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
