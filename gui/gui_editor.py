"""
gui_editor.py - List Editor Window

Plain-text editor for the scratch file: one filename per line, with a line
counter that turns red while the count differs from the original list.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPlainTextEdit, QPushButton
)
from PySide6.QtGui import QFontDatabase

from core.edit_session import ENCODING, ENCODING_ERRORS


def _count_lines(text: str) -> int:
    if not text:
        return 0
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return len(lines)


class ListEditorDialog(QDialog):
    """Edit the list of filenames in a window"""

    def __init__(self, path: Path, parent=None):
        super().__init__(parent)
        self.path = Path(path)

        with open(self.path, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            self.original_text = f.read()
        self.expected_lines = _count_lines(self.original_text)

        self._init_ui()
        self._update_line_count()

    def _init_ui(self):
        self.setWindowTitle(f"Bulk Rename - {self.expected_lines} files")
        self.resize(700, 500)

        layout = QVBoxLayout(self)

        hint = QLabel("Edit the names, one per line. Start a line with the delete character to remove that file.")
        hint.setWordWrap(True)
        layout.addWidget(hint)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.text_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.text_edit.setPlainText(self.original_text)
        self.text_edit.textChanged.connect(self._update_line_count)
        layout.addWidget(self.text_edit, 1)

        bottom_layout = QHBoxLayout()

        self.count_label = QLabel("")
        bottom_layout.addWidget(self.count_label, 1)

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        bottom_layout.addWidget(self.cancel_btn)

        self.save_btn = QPushButton("Apply")
        self.save_btn.setDefault(True)
        self.save_btn.clicked.connect(self.accept)
        self.save_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.save_btn)

        layout.addLayout(bottom_layout)

    def _update_line_count(self):
        count = _count_lines(self.text_edit.toPlainText())
        self.count_label.setText(f"Lines: {count} / {self.expected_lines}")
        if count == self.expected_lines:
            self.count_label.setStyleSheet("")
        else:
            self.count_label.setStyleSheet("QLabel { color: #d32f2f; font-weight: bold; }")

    def edited_text(self) -> str:
        """Current text, always ending with a newline"""
        text = self.text_edit.toPlainText()
        if text and not text.endswith("\n"):
            text += "\n"
        return text

    def save(self, path: Optional[Path] = None) -> None:
        """Write the edited text back to the scratch file"""
        with open(path or self.path, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as f:
            f.write(self.edited_text())

    def accept(self):
        self.save()
        super().accept()
