# offline_translator/ui/history_window.py

import logging
from typing import List

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QListWidget, QListWidgetItem,
    QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from offline_translator.domain.interfaces import IHistoryStore
from offline_translator.domain.models import HistoryRecord
from offline_translator.infrastructure.system_utils import set_clipboard_text

logger = logging.getLogger(__name__)


class HistoryWindow(QMainWindow):
    """
    Window listing saved translations, newest first, with per-row delete and
    a confirmed "Clear History".
    """

    def __init__(self, history_store: IHistoryStore, parent: QWidget = None):
        super().__init__(parent)
        self.history_store = history_store
        self._records: List[HistoryRecord] = []

        self.setWindowTitle("Translation History")
        self.setGeometry(200, 200, 520, 480)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        self.history_list = QListWidget()
        self.history_list.setSelectionMode(QAbstractItemView.SingleSelection)
        self.history_list.setWordWrap(True)
        layout.addWidget(self.history_list)

        buttons_layout = QHBoxLayout()
        self.copy_button = QPushButton("Copy Translation")
        self.delete_button = QPushButton("Delete")
        self.clear_button = QPushButton("Clear History")
        buttons_layout.addWidget(self.copy_button)
        buttons_layout.addWidget(self.delete_button)
        buttons_layout.addStretch()
        buttons_layout.addWidget(self.clear_button)
        layout.addLayout(buttons_layout)

        self.copy_button.clicked.connect(self._on_copy_button_clicked)
        self.delete_button.clicked.connect(self._on_delete_button_clicked)
        self.clear_button.clicked.connect(self._on_clear_button_clicked)
        self.history_list.itemSelectionChanged.connect(self._update_buttons)

        self.refresh()

    def refresh(self):
        """Reloads the list from the store."""
        try:
            self._records = self.history_store.list_all()
        except Exception:
            logger.exception("UI Layer (HistoryWindow): could not load history.")
            self._records = []

        self.history_list.clear()
        if not self._records:
            placeholder = QListWidgetItem("No history yet")
            placeholder.setFlags(Qt.ItemFlag.NoItemFlags)
            self.history_list.addItem(placeholder)
        for record in self._records:
            item = QListWidgetItem(
                f"{record.source_text}\n{record.translated_text}\n"
                f"{record.source_language} → {record.target_language} · "
                f"{record.created_at:%Y-%m-%d %H:%M}"
            )
            item.setData(Qt.ItemDataRole.UserRole, record.id)
            self.history_list.addItem(item)
        logger.debug("UI Layer (HistoryWindow): %d items.", len(self._records))
        self._update_buttons()

    def _selected_record(self):
        items = self.history_list.selectedItems()
        if not items:
            return None
        record_id = items[0].data(Qt.ItemDataRole.UserRole)
        return next((r for r in self._records if r.id == record_id), None)

    @Slot()
    def _update_buttons(self):
        has_selection = self._selected_record() is not None
        self.copy_button.setEnabled(has_selection)
        self.delete_button.setEnabled(has_selection)
        self.clear_button.setEnabled(bool(self._records))

    @Slot()
    def _on_copy_button_clicked(self):
        record = self._selected_record()
        if record is not None:
            set_clipboard_text(record.translated_text)

    @Slot()
    def _on_delete_button_clicked(self):
        record = self._selected_record()
        if record is None:
            return
        try:
            self.history_store.delete(record.id)
        except Exception as e:
            logger.exception("UI Layer (HistoryWindow): could not delete record %s", record.id)
            QMessageBox.warning(self, "History", f"Could not delete the entry: {e}")
        self.refresh()

    @Slot()
    def _on_clear_button_clicked(self):
        answer = QMessageBox.question(
            self,
            "Clear History",
            "Clear all translation history?\n\nThis action cannot be undone.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Cancel,
        )
        if answer != QMessageBox.StandardButton.Yes:
            return
        try:
            deleted = self.history_store.delete_all()
            logger.info("UI Layer (HistoryWindow): cleared %d records.", deleted)
        except Exception as e:
            logger.exception("UI Layer (HistoryWindow): could not clear history.")
            QMessageBox.warning(self, "History", f"Could not clear history: {e}")
        self.refresh()
