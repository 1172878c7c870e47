"""
gui_entry.py - GUI Entry

Runs the PySide6 list editor as an edit-session launcher
"""

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QDialog
from PySide6.QtCore import Qt

from .gui_editor import ListEditorDialog


def _application() -> QApplication:
    app = QApplication.instance()
    if app is not None:
        return app

    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Bulk Rename Tool")
    app.setStyle("Fusion")
    return app


def edit_in_window(path: Path) -> int:
    """
    Edit the scratch file in a window and wait for it to close

    Args:
        path: Scratch file

    Returns:
        0 if the edits were applied, 1 if the window was cancelled
    """
    _application()

    dialog = ListEditorDialog(path)
    if dialog.exec() == QDialog.DialogCode.Accepted:
        return 0
    return 1
