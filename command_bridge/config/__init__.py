"""
Configuration for the command bridge.
"""

from .settings import BridgeSettings

__all__ = ["BridgeSettings"]
