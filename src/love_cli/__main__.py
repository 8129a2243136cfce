"""
Entry point for running Love CLI as a module.

This allows users to run the CLI using:
    python -m love_cli [command] [options]
"""

from love_cli.cli.app import main

if __name__ == "__main__":
    main()
