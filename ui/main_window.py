# ui/main_window.py
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QMenu, QToolButton, QLabel,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from ui.test_ui import TestUI
from app.themes import THEMES, DEFAULT_THEME_INDEX, load_custom_themes

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Typing Speed Test")
        self.resize(1100, 680)
        load_custom_themes()
        self.theme_idx = DEFAULT_THEME_INDEX

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 24, 16, 16)
        root_v.setSpacing(16)
        self._build_top_bar(root_v)

        self.lblKicker = QLabel("TYPING SPEED TEST", root)
        self.lblKicker.setObjectName("lblKicker")
        self.lblKicker.setAlignment(Qt.AlignCenter)
        self.lblHeadline = QLabel("Test your typing skills", root)
        self.lblHeadline.setObjectName("lblHeadline")
        self.lblHeadline.setAlignment(Qt.AlignCenter)
        root_v.addWidget(self.lblKicker)
        root_v.addWidget(self.lblHeadline)

        self.test = TestUI(parent=self)
        self.test.roundStarted.connect(self._on_round_started)
        self.test.finished.connect(self._on_round_finished)

        test_h = QHBoxLayout()
        test_h.addStretch(1)
        test_h.addWidget(self.test, 1)
        test_h.addStretch(1)
        root_v.addLayout(test_h, 1)
        self.setCentralWidget(root)

        # keyboard focus must stay on the typing view
        self.setFocusPolicy(Qt.NoFocus)
        self.test.setFocus()

        self.menuBar().setVisible(False)
        self._apply_theme(DEFAULT_THEME_INDEX)

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 10, 14, 10)
        h.setSpacing(10)

        self.theme_menu = QMenu(self)
        self._rebuild_theme_menu()
        theme_btn = QToolButton(bar)
        theme_btn.setText("Theme")
        theme_btn.setObjectName("TopBtn")
        theme_btn.setMenu(self.theme_menu)
        theme_btn.setPopupMode(QToolButton.InstantPopup)
        theme_btn.setFocusPolicy(Qt.NoFocus)
        h.addWidget(theme_btn)
        h.addStretch(1)

        parent_layout.addWidget(bar)

        self._topbar_qss = """
        QWidget#TopBar {
            background: rgba(255,255,255,0.04);
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 14px;
        }
        QToolButton#TopBtn {
            background: transparent;
            border: 1px solid rgba(255,255,255,0.10);
            border-radius: 9px;
            padding: 6px 12px;
        }
        QToolButton#TopBtn:hover {
            border-color: rgba(255,255,255,0.32);
            background: rgba(255,255,255,0.06);
        }
        QToolButton::menu-indicator { image: none; width: 0px; height: 0px; }
        """

    # ---------------- Theme ----------------
    def _rebuild_theme_menu(self):
        self.theme_menu.clear()
        for i, t in enumerate(THEMES):
            act = QAction(t.name, self)
            act.triggered.connect(lambda _, idx=i: self._apply_theme(idx))
            self.theme_menu.addAction(act)

    def _apply_theme(self, idx):
        theme = THEMES[idx]
        self.theme_idx = idx
        self.test.set_theme(theme)
        self.setStyleSheet(
            f"""
            QWidget {{ background: {theme.background}; color: {theme.primary}; }}
            QLabel#lblKicker {{ color: {theme.secondary}; letter-spacing: 4px; font-size: 12px; }}
            QLabel#lblHeadline {{ color: {theme.primary}; font-size: 40px; font-weight: 700; }}
            {self._topbar_qss}
            """
        )
        self.test.setFocus()

    # ---------------- Round ----------------
    def _on_round_started(self):
        self.setWindowTitle("Typing Speed Test: running")

    def _on_round_finished(self, metrics):
        log.info("Round finished: %s", metrics)
        self.setWindowTitle(f"Typing Speed Test: {metrics.wpm} WPM, {metrics.accuracy}%")

    def closeEvent(self, event):
        self.test.teardown()
        super().closeEvent(event)
