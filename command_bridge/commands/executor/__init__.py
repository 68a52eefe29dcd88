"""
Command executor for dispatching invocations with error handling,
logging, and metrics collection.
"""

from .command_executor import CommandExecutor

__all__ = ["CommandExecutor"]
