"""
Utilities package for Love CLI.

This package contains shared helpers such as logging setup.
"""

__all__ = ["logging_setup"]
