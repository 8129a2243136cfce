"""
Configuration package for Love CLI.

This package contains settings management and .env file loading.
"""

__all__ = ["settings", "env_loader"]
