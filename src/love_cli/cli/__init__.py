"""
CLI interface package for Love CLI.

This package contains the Typer application and its commands.
"""

__all__ = ["app"]
