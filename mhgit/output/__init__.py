# MHGIT Output Module
# Rich console output for the command line interface

from mhgit.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
