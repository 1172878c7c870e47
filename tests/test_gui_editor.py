"""
Tests for the PySide6 list editor (skipped when PySide6 is missing)
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PySide6.QtWidgets")

from gui.gui_editor import ListEditorDialog  # noqa: E402
from gui.gui_entry import _application  # noqa: E402

pytestmark = pytest.mark.gui


@pytest.fixture
def qapp():
    return _application()


def test_loads_scratch_file(qapp, tmp_path):
    path = tmp_path / "list.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    dialog = ListEditorDialog(path)
    assert dialog.expected_lines == 2
    assert dialog.text_edit.toPlainText() == "a\nb\n"
    assert dialog.count_label.text() == "Lines: 2 / 2"


def test_accept_writes_back(qapp, tmp_path):
    path = tmp_path / "list.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    dialog = ListEditorDialog(path)
    dialog.text_edit.setPlainText("x\n#")
    dialog.accept()
    assert path.read_text(encoding="utf-8") == "x\n#\n"


def test_line_count_mismatch_is_flagged(qapp, tmp_path):
    path = tmp_path / "list.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    dialog = ListEditorDialog(path)
    dialog.text_edit.setPlainText("only-one\n")
    assert dialog.count_label.text() == "Lines: 1 / 2"
    assert "color" in dialog.count_label.styleSheet()


def test_reject_leaves_file(qapp, tmp_path):
    path = tmp_path / "list.txt"
    path.write_text("a\n", encoding="utf-8")
    dialog = ListEditorDialog(path)
    dialog.text_edit.setPlainText("changed\n")
    dialog.reject()
    assert path.read_text(encoding="utf-8") == "a\n"
