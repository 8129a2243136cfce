"""
Love CLI - A client library and command-line tool for the Yelp Love API.

This package lets you send love to your coworkers, browse the love they
have sent and received, and look up usernames from the command line or
from Python code.
"""

__version__ = "0.1.0"
__author__ = "Love CLI Team"
__license__ = "Apache-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "love-cli"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

# Re-export commonly used items
__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
