# offline_translator/ui/main_window.py

import asyncio
import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, QSignalBlocker, Signal, Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QComboBox, QHBoxLayout, QLabel, QMainWindow, QPushButton,
    QStatusBar, QTextEdit, QVBoxLayout, QWidget
)

from offline_translator.application import session
from offline_translator.application.session import PaneState
from offline_translator.application.translator_service import TranslationOrchestrator
from offline_translator.config import Settings
from offline_translator.domain.errors import TranslateError
from offline_translator.domain.interfaces import IHistoryStore
from offline_translator.domain.language_catalog import AUTO_LABEL
from offline_translator.domain.models import Side, TranslationResult
from offline_translator.infrastructure.system_utils import get_clipboard_text, set_clipboard_text

from .about_dialog import AboutDialog
from .history_window import HistoryWindow

logger = logging.getLogger(__name__)


# --- Emitter used to hand results from the worker thread to the UI thread ---
class TranslationResultEmitter(QObject):
    """Carries translation results and errors from worker threads to the main UI thread."""
    # (TranslationResult, Side that receives the text)
    translation_finished = Signal(object, object)
    # (message, Side that receives the message)
    error_occurred = Signal(str, object)
    task_started = Signal(str)
    task_finished = Signal()


class MainWindow(QMainWindow):
    """
    Main window: two editable panes with a language picker each.
    Whichever pane was edited last is translated into the other one.
    """

    def __init__(self, orchestrator: TranslationOrchestrator, settings: Settings,
                 history_store: Optional[IHistoryStore] = None):
        super().__init__()

        if not isinstance(orchestrator, TranslationOrchestrator):
            raise TypeError("orchestrator must be an instance of TranslationOrchestrator")

        self.orchestrator = orchestrator
        self.settings = settings
        self.history_store = history_store
        self._history_window: Optional[HistoryWindow] = None
        self._pending_tasks = 0

        self.setWindowTitle(settings.app_name)
        self.setGeometry(100, 100, 760, 360)

        self.statusBar = QStatusBar()
        self.setStatusBar(self.statusBar)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        # Language pickers and swap button
        controls_layout = QHBoxLayout()
        self.left_lang_combo = QComboBox()
        self.right_lang_combo = QComboBox()
        self.swap_button = QPushButton("Swap")
        controls_layout.addWidget(QLabel("From:"))
        controls_layout.addWidget(self.left_lang_combo)
        controls_layout.addWidget(self.swap_button)
        controls_layout.addWidget(QLabel("To:"))
        controls_layout.addWidget(self.right_lang_combo)
        main_layout.addLayout(controls_layout)

        # Text panes
        panes_layout = QHBoxLayout()
        self.left_text_edit = QTextEdit()
        self.left_text_edit.setAcceptRichText(False)
        self.left_text_edit.setPlaceholderText(
            f"Type or paste text and press {settings.translate_shortcut} to translate")
        self.right_text_edit = QTextEdit()
        self.right_text_edit.setAcceptRichText(False)
        self.right_text_edit.setPlaceholderText("Translation")
        panes_layout.addWidget(self.left_text_edit)
        panes_layout.addWidget(self.right_text_edit)
        main_layout.addLayout(panes_layout)

        # Actions
        buttons_layout = QHBoxLayout()
        self.paste_button = QPushButton("Paste")
        self.copy_button = QPushButton("Copy Translation")
        self.translate_button = QPushButton("Translate")
        self.translate_button.setShortcut(QKeySequence(settings.translate_shortcut))
        self.translate_button.setToolTip(f"Translate ({settings.translate_shortcut})")
        buttons_layout.addWidget(self.paste_button)
        buttons_layout.addWidget(self.copy_button)
        buttons_layout.addStretch()
        buttons_layout.addWidget(self.translate_button)
        main_layout.addLayout(buttons_layout)

        self._build_menu()

        self._edits = {Side.LEFT: self.left_text_edit, Side.RIGHT: self.right_text_edit}
        self._combos = {Side.LEFT: self.left_lang_combo, Side.RIGHT: self.right_lang_combo}

        self.load_languages()
        self._state = PaneState(
            left_language=self.left_lang_combo.currentText(),
            right_language=self.right_lang_combo.currentText(),
        )

        # Signals
        self.left_text_edit.textChanged.connect(lambda: self._on_text_edited(Side.LEFT))
        self.right_text_edit.textChanged.connect(lambda: self._on_text_edited(Side.RIGHT))
        self.left_lang_combo.currentTextChanged.connect(lambda text: self._on_language_selected(Side.LEFT, text))
        self.right_lang_combo.currentTextChanged.connect(lambda text: self._on_language_selected(Side.RIGHT, text))
        self.swap_button.clicked.connect(self.on_swap_button_clicked)
        self.translate_button.clicked.connect(self.on_translate_button_clicked)
        self.copy_button.clicked.connect(self.on_copy_button_clicked)
        self.paste_button.clicked.connect(self.on_paste_button_clicked)

        self._translation_result_emitter = TranslationResultEmitter()
        self._translation_result_emitter.translation_finished.connect(self._on_translation_task_finished)
        self._translation_result_emitter.error_occurred.connect(self._on_translation_task_error)
        self._translation_result_emitter.task_started.connect(self._on_translation_task_started)
        self._translation_result_emitter.task_finished.connect(self._on_translation_task_completed)

        self._refresh_controls()
        if self.orchestrator.platform_available:
            self.statusBar.showMessage("Ready.")
        else:
            self.statusBar.showMessage("Offline translation engine not available. Install language packages.")

    def _build_menu(self):
        menu = self.menuBar().addMenu("&Translator")

        history_action = QAction("&History...", self)
        history_action.setShortcut(QKeySequence("Ctrl+Y"))
        history_action.setEnabled(self.history_store is not None)
        history_action.triggered.connect(self.show_history)
        menu.addAction(history_action)

        about_action = QAction(f"&About {self.settings.app_name}", self)
        about_action.triggered.connect(self.show_about)
        menu.addAction(about_action)

        menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        menu.addAction(quit_action)

    def load_languages(self):
        """Fills both pickers with "Auto" followed by the catalog languages."""
        names = [AUTO_LABEL] + [lang.name for lang in self.orchestrator.supported_languages()]
        for combo in (self.left_lang_combo, self.right_lang_combo):
            combo.clear()
            combo.addItems(names)

        self._select_language(self.left_lang_combo, self.settings.default_source_language)
        self._select_language(self.right_lang_combo, self.settings.default_target_language)

    def _select_language(self, combo: QComboBox, selector: str):
        index = combo.findText(selector)
        if index == -1:
            # Accept aliases such as "en" in the settings
            try:
                index = combo.findText(self.orchestrator.catalog.resolve(selector).name)
            except TranslateError:
                logger.warning("UI Layer: unknown default language '%s'", selector)
        if index != -1:
            combo.setCurrentIndex(index)

    # --- Pane state ---

    def _on_text_edited(self, side: Side):
        new_state = session.apply_edit(self._state, side, self._edits[side].toPlainText())
        other = side.other
        if new_state.text(other) != self._state.text(other):
            self._set_pane_text(other, new_state.text(other))
        self._state = new_state
        self._refresh_controls()

    def _on_language_selected(self, side: Side, text: str):
        self._state = session.select_language(self._state, side, text)

    def _set_pane_text(self, side: Side, text: str):
        # Programmatic updates are not user edits
        with QSignalBlocker(self._edits[side]):
            self._edits[side].setPlainText(text)

    def _apply_state(self, state: PaneState):
        for side in (Side.LEFT, Side.RIGHT):
            self._set_pane_text(side, state.text(side))
            with QSignalBlocker(self._combos[side]):
                self._combos[side].setCurrentText(state.language(side) or AUTO_LABEL)
        self._state = state
        self._refresh_controls()

    def _refresh_controls(self):
        self.translate_button.setEnabled(session.can_translate(self._state))
        self.copy_button.setEnabled(bool(self._state.text(self._state.last_edited.other).strip()))

    # --- Slots ---

    @Slot()
    def on_swap_button_clicked(self):
        self._apply_state(session.swap(self._state))

    @Slot()
    def on_copy_button_clicked(self):
        text = self._state.text(self._state.last_edited.other)
        if set_clipboard_text(text):
            self.statusBar.showMessage("Translation copied to clipboard.", 3000)
        else:
            self.statusBar.showMessage("Could not access the clipboard.", 3000)

    @Slot()
    def on_paste_button_clicked(self):
        text = get_clipboard_text()
        if not text:
            self.statusBar.showMessage("Clipboard is empty.", 3000)
            return
        # Pasting goes through textChanged like typing does
        self.left_text_edit.setPlainText(text)

    @Slot()
    def on_translate_button_clicked(self):
        if not session.can_translate(self._state):
            self.statusBar.showMessage("Please enter text to translate.", 3000)
            return

        plan = session.plan_translation(self._state)
        self._translation_result_emitter.task_started.emit("Translating...")
        self._start_translation_task(plan)

    def show_history(self):
        if self.history_store is None:
            return
        if self._history_window is None:
            self._history_window = HistoryWindow(self.history_store, self)
        self._history_window.refresh()
        self._history_window.show()
        self._history_window.raise_()
        self._history_window.activateWindow()

    def show_about(self):
        AboutDialog(self.settings, self).exec()

    # --- Worker thread ---

    def _translation_task_function(self, plan: session.TranslationPlan):
        """
        Runs in a worker thread: drives the translation coroutine to completion
        and hands the outcome to the UI thread through the emitter.
        """
        try:
            result = asyncio.run(
                self.orchestrator.translate(plan.text, plan.source_selector, plan.target_selector)
            )
            self._translation_result_emitter.translation_finished.emit(result, plan.output_side)
        except TranslateError as e:
            logger.info("UI Layer: translation failed: %s", e)
            self._translation_result_emitter.error_occurred.emit(str(e), plan.output_side)
        except Exception as e:
            logger.exception("UI Layer: unexpected error during translation")
            self._translation_result_emitter.error_occurred.emit(f"Unexpected error: {e}", plan.output_side)
        finally:
            self._translation_result_emitter.task_finished.emit()

    def _start_translation_task(self, plan: session.TranslationPlan):
        # Overlapping requests are allowed; the last one to finish wins the output pane
        thread = threading.Thread(target=self._translation_task_function, args=(plan,), daemon=True)
        thread.start()

    @Slot(str)
    def _on_translation_task_started(self, message: str):
        self._pending_tasks += 1
        self.statusBar.showMessage(message, 0)

    @Slot()
    def _on_translation_task_completed(self):
        self._pending_tasks = max(0, self._pending_tasks - 1)
        if self._pending_tasks == 0 and self.statusBar.currentMessage() == "Translating...":
            self.statusBar.showMessage("Ready.", 3000)

    @Slot(object, object)
    def _on_translation_task_finished(self, result: TranslationResult, output_side: Side):
        self._set_pane_text(output_side, result.translated_text)
        self._state = self._state._replace(
            **{f"{output_side.value}_text": result.translated_text})
        self._refresh_controls()

        if result.detected:
            self.statusBar.showMessage(f"Detected language: {result.source_language.name}", 5000)
        else:
            self.statusBar.showMessage("Translation finished.", 3000)

        if self._history_window is not None and self._history_window.isVisible():
            self._history_window.refresh()

    @Slot(str, object)
    def _on_translation_task_error(self, error_message: str, output_side: Side):
        # The message takes the place of the translation
        self._set_pane_text(output_side, error_message)
        self._state = self._state._replace(**{f"{output_side.value}_text": error_message})
        self._refresh_controls()
        self.statusBar.showMessage("Translation failed.", 5000)

    def closeEvent(self, event):
        if self._history_window is not None:
            self._history_window.close()
        event.accept()
