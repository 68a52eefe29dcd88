"""
Command pattern implementation for the command bridge.

This module provides the registry, executor and handler infrastructure
that sits behind the HTTP boundary, keeping the endpoints free of
business logic.
"""
