"""
Command registry mapping command names to handler instances.
"""

from .command_registry import CommandRegistry

__all__ = ["CommandRegistry"]
