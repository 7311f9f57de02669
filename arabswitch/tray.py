"""System tray icon with About / Exit menu for ArabSwitch."""
import logging
from PyQt5.QtWidgets import QSystemTrayIcon, QMenu, QAction, QApplication, QMessageBox
from PyQt5.QtGui import QIcon, QPixmap, QPainter, QColor, QFont
from PyQt5.QtCore import Qt, pyqtSignal

from arabswitch.config import HOTKEY_LABEL

logger = logging.getLogger(__name__)

APP_TITLE = "Keyboard Layout Converter"


def _create_icon() -> QIcon:
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)

    painter.setBrush(QColor(0x19, 0x76, 0xD2))
    painter.setPen(Qt.NoPen)
    painter.drawEllipse(4, 4, size - 8, size - 8)

    painter.setPen(QColor(255, 255, 255))
    painter.setFont(QFont("Sans", 26, QFont.Bold))
    painter.drawText(pixmap.rect(), Qt.AlignCenter, "ع")

    painter.end()
    return QIcon(pixmap)


class TrayIcon(QSystemTrayIcon):
    """Tray entry point: About, Exit, and error notifications from the daemon."""

    # Emitted from the daemon worker thread; delivered on the Qt main thread.
    error_raised = pyqtSignal(str)

    def __init__(self, daemon, parent=None):
        super().__init__(parent)
        self.daemon = daemon

        self.setIcon(_create_icon())
        self.setToolTip(APP_TITLE)
        self._build_menu()

        self.activated.connect(self._on_activated)
        self.error_raised.connect(self._show_error)

    def _build_menu(self):
        menu = QMenu()

        about_action = QAction("About", menu)
        about_action.triggered.connect(self._show_about)
        menu.addAction(about_action)

        menu.addSeparator()

        exit_action = QAction("Exit", menu)
        exit_action.triggered.connect(self._quit)
        menu.addAction(exit_action)

        self.setContextMenu(menu)

    def show_error(self, message: str):
        """Thread-safe; used as the daemon's on_error callback."""
        self.error_raised.emit(message)

    def _show_error(self, message: str):
        self.showMessage("Error", message, QSystemTrayIcon.Critical)

    def _show_about(self):
        QMessageBox.information(
            None, "About",
            f"English-Arabic Keyboard Layout Converter\n"
            f"Press {HOTKEY_LABEL} to convert selected text.",
        )

    def _quit(self):
        self.hide()
        self.daemon.stop()
        QApplication.quit()

    def _on_activated(self, reason):
        if reason == QSystemTrayIcon.DoubleClick:
            QMessageBox.information(
                None, APP_TITLE,
                f"English-Arabic Keyboard Layout Converter is running.\n"
                f"Press {HOTKEY_LABEL} to convert selected text.",
            )
