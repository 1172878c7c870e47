"""
gui - PySide6 List Editor for Bulk Renaming Tool
"""

from .gui_entry import edit_in_window

__all__ = ["edit_in_window"]
