"""
Core components for Love CLI.

This module provides the Love API client and its error types.
"""

__all__ = ["client"]
