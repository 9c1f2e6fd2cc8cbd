"""Main window for revealing paths in the file manager."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from fileexplorer import FileExplorerError, open_path
from fileexplorer.models import APP_TITLE, SettingsStore

LOGGER = logging.getLogger(__name__)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, initial_path: str = "") -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(640, 420)

        self.base_dir = Path(sys.argv[0]).resolve().parent
        self.store = SettingsStore(self.base_dir)

        self.apply_light_style()

        # ----- Path row -----
        self.path_edit = QtWidgets.QLineEdit(initial_path)
        self.path_edit.setPlaceholderText("File or folder path")
        self.path_edit.returnPressed.connect(self.reveal_current)

        file_btn = QtWidgets.QPushButton("File…")
        file_btn.clicked.connect(self._browse_file)
        dir_btn = QtWidgets.QPushButton("Folder…")
        dir_btn.clicked.connect(self._browse_dir)

        path_row = QtWidgets.QHBoxLayout()
        path_row.addWidget(self.path_edit, 1)
        path_row.addWidget(file_btn)
        path_row.addWidget(dir_btn)

        # ----- Actions -----
        self.select_chk = QtWidgets.QCheckBox("Select file")
        self.select_chk.setChecked(self.store.settings.select_file)
        self.select_chk.toggled.connect(self.store.set_select_file)

        reveal_btn = QtWidgets.QPushButton("Show in file manager")
        reveal_btn.setDefault(True)
        reveal_btn.clicked.connect(self.reveal_current)

        action_row = QtWidgets.QHBoxLayout()
        action_row.addWidget(self.select_chk)
        action_row.addStretch(1)
        action_row.addWidget(reveal_btn)

        # ----- Recent -----
        self.recent_list = QtWidgets.QListWidget()
        self.recent_list.itemDoubleClicked.connect(self.on_recent_activated)
        self.recent_list.setContextMenuPolicy(QtCore.Qt.CustomContextMenu)
        self.recent_list.customContextMenuRequested.connect(self.on_recent_menu)

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.addLayout(path_row)
        layout.addLayout(action_row)
        layout.addWidget(QtWidgets.QLabel("Recent"))
        layout.addWidget(self.recent_list, 1)
        self.setCentralWidget(central)

        self.setAcceptDrops(True)
        self.refresh_recent()

    def apply_light_style(self) -> None:
        QtWidgets.QApplication.setStyle("Fusion")
        QtWidgets.QApplication.instance().setPalette(QtWidgets.QApplication.style().standardPalette())
        self.setStyleSheet(
            """
            QLineEdit { padding: 8px; border-radius: 10px; }
            QCheckBox { padding: 4px; }
            QPushButton { padding: 6px 12px; border-radius: 8px; }
            """
        )

    def _browse_file(self) -> None:
        file_path, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Choose a file", "", "All (*.*)")
        if file_path:
            self.path_edit.setText(file_path)

    def _browse_dir(self) -> None:
        directory = QtWidgets.QFileDialog.getExistingDirectory(self, "Choose a folder")
        if directory:
            self.path_edit.setText(directory)

    def dragEnterEvent(self, ev: QtGui.QDragEnterEvent) -> None:
        if ev.mimeData().hasUrls():
            ev.acceptProposedAction()
        else:
            super().dragEnterEvent(ev)

    def dropEvent(self, ev: QtGui.QDropEvent) -> None:
        for u in ev.mimeData().urls():
            p = u.toLocalFile()
            if p:
                self.path_edit.setText(p)
                break
        ev.acceptProposedAction()

    def refresh_recent(self) -> None:
        self.recent_list.clear()
        for path in self.store.recent:
            self.recent_list.addItem(path)

    def reveal(self, path: str) -> bool:
        path = path.strip()
        if not path:
            return False
        try:
            open_path(path, select_file=self.select_chk.isChecked())
        except FileExplorerError as exc:
            LOGGER.exception("Failed to reveal %s", path)
            QtWidgets.QMessageBox.warning(self, APP_TITLE, str(exc))
            return False
        self.store.remember(path)
        self.refresh_recent()
        return True

    def reveal_current(self) -> None:
        self.reveal(self.path_edit.text())

    def on_recent_activated(self, item: QtWidgets.QListWidgetItem) -> None:
        self.path_edit.setText(item.text())
        self.reveal(item.text())

    def on_recent_menu(self, pos: QtCore.QPoint) -> None:
        item: Optional[QtWidgets.QListWidgetItem] = self.recent_list.itemAt(pos)
        if not item:
            return
        menu = QtWidgets.QMenu(self)
        menu.addAction("Show", lambda: self.on_recent_activated(item))
        menu.addAction("Remove from list", lambda: self._forget(item.text()))
        menu.exec(self.recent_list.mapToGlobal(pos))

    def _forget(self, path: str) -> None:
        if self.store.forget(path):
            self.refresh_recent()
