"""
Command bridge backend for a desktop application.

Exposes a fixed set of named commands that a web-rendered frontend invokes
over a local HTTP boundary.
"""

__version__ = "0.1.0"
