"""
cli - Command Line Interface for Bulk Renaming Tool
"""

from .cli_entry import main, run

__all__ = ["main", "run"]
