# offline_translator/ui/about_dialog.py

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QLabel, QPushButton, QVBoxLayout, QWidget

from offline_translator.config import Settings


class AboutDialog(QDialog):
    """Small "About" window with the application name and version."""

    def __init__(self, settings: Settings, parent: QWidget = None):
        super().__init__(parent)
        self.setWindowTitle(f"About {settings.app_name}")
        self.setFixedSize(300, 200)

        layout = QVBoxLayout(self)

        title_label = QLabel(f"<h2>{settings.app_name}</h2>")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title_label)

        version_label = QLabel(f"Version {settings.app_version}")
        version_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(version_label)

        description_label = QLabel("Simple offline translation for the desktop.")
        description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        description_label.setWordWrap(True)
        layout.addWidget(description_label)

        close_button = QPushButton("Close")
        close_button.clicked.connect(self.accept)
        layout.addWidget(close_button)
