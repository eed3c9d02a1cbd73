#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Random String Generator GUI (PySide6)
- Uppercase / lowercase / numbers / symbols toggles
- Length slider (4–50)
- Copy with a short-lived "Copied!" notice
- Recent history of the last five strings (in memory only)
- Remembers window geometry between sessions
"""

import logging
import os
import sys

from PySide6.QtCore import QSettings, Qt
from PySide6.QtGui import QClipboard, QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from .config import (
    LOG_LEVEL_ENV,
    MAX_LENGTH,
    MIN_LENGTH,
    SETTINGS_APP,
    SETTINGS_GEOMETRY,
    SETTINGS_ORG,
)
from .core import CharClass
from .notifier import QtTimerFacility
from .session import GeneratorSession

logger = logging.getLogger(__name__)

CLASS_LABELS = {
    CharClass.UPPERCASE: "Uppercase (A-Z)",
    CharClass.LOWERCASE: "Lowercase (a-z)",
    CharClass.NUMBERS: "Numbers (0-9)",
    CharClass.SYMBOLS: "Symbols (!@#$...)",
}


def write_clipboard(text: str) -> None:
    QApplication.clipboard().setText(text, mode=QClipboard.Clipboard)


# ---------------- Main window ----------------

class GeneratorWindow(QMainWindow):
    def __init__(self, session: GeneratorSession | None = None):
        super().__init__()
        self.setWindowTitle("Random String Generator")
        self.settings = QSettings(SETTINGS_ORG, SETTINGS_APP)

        geom = self.settings.value(SETTINGS_GEOMETRY, None)
        if geom is None or not self.restoreGeometry(geom):
            self.resize(560, 520)

        # ---------- Root layout ----------
        central = QWidget(self); self.setCentralWidget(central)
        root = QVBoxLayout(central); root.setContentsMargins(12, 12, 12, 12); root.setSpacing(12)

        # -------- Output --------
        out_box = QGroupBox("Generated String")
        out_layout = QVBoxLayout(out_box)

        self.lbl_copied = QLabel("Copied!")
        self.lbl_copied.setStyleSheet("color: green; font-weight: bold;")
        self.lbl_copied.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        out_layout.addWidget(self.lbl_copied)

        mono = QFont("Consolas"); mono.setStyleHint(QFont.TypeWriter)
        self.txt_result = QLineEdit(); self.txt_result.setReadOnly(True)
        self.txt_result.setFont(mono)
        self.btn_copy = QPushButton("Copy")
        out_row = QHBoxLayout()
        out_row.addWidget(self.txt_result, 1)
        out_row.addWidget(self.btn_copy)
        out_layout.addLayout(out_row)
        root.addWidget(out_box)

        # -------- Length --------
        params_box = QGroupBox("String Length")
        grid = QGridLayout(params_box)
        self.slider_length = QSlider(Qt.Horizontal)
        self.slider_length.setRange(MIN_LENGTH, MAX_LENGTH)
        self.lbl_length = QLabel()
        self.lbl_length.setStyleSheet("font-weight: bold;")
        grid.addWidget(self.slider_length, 0, 0, 1, 2)
        grid.addWidget(self.lbl_length, 0, 2)
        grid.addWidget(QLabel(str(MIN_LENGTH)), 1, 0, alignment=Qt.AlignLeft)
        grid.addWidget(QLabel(str(MAX_LENGTH)), 1, 1, alignment=Qt.AlignRight)
        self.lbl_entropy = QLabel("Entropy: —")
        self.lbl_entropy.setTextInteractionFlags(Qt.TextSelectableByMouse)
        grid.addWidget(self.lbl_entropy, 2, 0, 1, 3)
        root.addWidget(params_box)

        # -------- Character classes (2x2) --------
        classes_box = QGroupBox("Character Types")
        classes_layout = QGridLayout(classes_box)
        self.class_checks: dict[CharClass, QCheckBox] = {}
        for i, cls in enumerate(CharClass):
            chk = QCheckBox(CLASS_LABELS[cls])
            self.class_checks[cls] = chk
            classes_layout.addWidget(chk, i // 2, i % 2)
        root.addWidget(classes_box)

        self.btn_generate = QPushButton("Generate New String")
        root.addWidget(self.btn_generate)

        # -------- History --------
        self.history_box = QGroupBox("Recent History")
        hist_layout = QVBoxLayout(self.history_box)
        self.list_history = QListWidget()
        self.list_history.setFont(mono)
        hist_layout.addWidget(self.list_history)
        clear_row = QHBoxLayout(); clear_row.addStretch(1)
        self.btn_clear_history = QPushButton("Clear History")
        clear_row.addWidget(self.btn_clear_history)
        hist_layout.addLayout(clear_row)
        root.addWidget(self.history_box, 1)

        # ---------------- Session & signal wiring ----------------
        if session is None:
            session = GeneratorSession(timer=QtTimerFacility(self), clipboard=write_clipboard)
        self.session = session
        self.session.on_change = self.refresh

        # seed controls from the session before connecting, so nothing echoes back
        self._sync_controls()

        self.slider_length.valueChanged.connect(self.session.set_length)
        for cls, chk in self.class_checks.items():
            chk.toggled.connect(lambda checked, c=cls: self.session.set_class_toggle(c, checked))
        self.btn_generate.clicked.connect(self.on_generate)
        self.btn_copy.clicked.connect(self.session.copy_current)
        self.btn_clear_history.clicked.connect(self.session.clear_history)

        self.refresh()

    # ---------- helpers & events ----------

    def _sync_controls(self) -> None:
        config = self.session.config
        self.slider_length.setValue(config.length)
        for cls, chk in self.class_checks.items():
            chk.setChecked(config.is_enabled(cls))

    def refresh(self) -> None:
        snap = self.session.snapshot()
        self.txt_result.setText(snap.display_text)
        self.txt_result.setStyleSheet("color: gray;" if snap.is_notice else "")
        self.btn_copy.setEnabled(not snap.is_notice)
        self.lbl_copied.setVisible(snap.copied)
        self.lbl_length.setText(str(snap.config.length))
        self.lbl_entropy.setText(f"Entropy: {snap.entropy_bits:.1f} bits" if snap.entropy_bits else "Entropy: —")

        self.list_history.clear()
        self.list_history.addItems(list(snap.history))
        self.history_box.setVisible(bool(snap.history))

    def closeEvent(self, event) -> None:  # noqa: N802
        try:
            self.settings.setValue(SETTINGS_GEOMETRY, self.saveGeometry())
            self.session.close()
        finally:
            super().closeEvent(event)

    def show_error(self, message: str) -> None:
        QMessageBox.critical(self, "Error", message)

    def on_generate(self) -> None:
        try:
            self.session.generate()
        except Exception as exc:
            logger.exception("Generation failed")
            self.show_error(f"Generation failed:\n{exc}")


# ---------------- Entrypoint ----------------

def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(levelname)s: %(message)s")


def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)
    app.setOrganizationName(SETTINGS_ORG)
    app.setApplicationName(SETTINGS_APP)
    QGuiApplication.setApplicationDisplayName("Random String Generator")
    w = GeneratorWindow(); w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
