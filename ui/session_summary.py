# ui/session_summary.py
from __future__ import annotations
from typing import Sequence, Tuple

from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt
import pyqtgraph as pg

from app.state import RoundMetrics


def history_series(history: Sequence[Tuple[int, RoundMetrics]], total: int) -> tuple[list[float], list[float]]:
    """
    Step series of correct words against elapsed seconds, closed at `total`
    so the last value is held until time ran out.
    """
    xs: list[float] = [0.0]
    ys: list[float] = [0.0]
    for secs, m in history:
        xs.append(float(secs))
        ys.append(float(m.wpm))
    if xs[-1] < total:
        xs.append(float(total))
        ys.append(ys[-1])
    return xs, ys


class RoundSummary(QDialog):
    """End-of-round dialog. Closing it in any way dismisses the round."""

    def __init__(
        self,
        metrics: RoundMetrics,
        history: Sequence[Tuple[int, RoundMetrics]],
        total_seconds: int,
        line_color: str = "#eab308",
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Your time is up.")
        self.resize(560, 380)

        root = QVBoxLayout(self)
        title = QLabel("Your time is up.", self)
        title.setStyleSheet("font-size: 20px; font-weight: 600;")
        root.addWidget(title)

        body = QLabel(
            f"Well... Your typing speed is <b>{metrics.wpm} words per minute</b> "
            f"and <b>{metrics.cpm} characters per minute</b> with an accuracy of "
            f"<b>{metrics.accuracy}%</b>. Keep practicing!",
            self,
        )
        body.setTextFormat(Qt.RichText)
        body.setWordWrap(True)
        root.addWidget(body)

        plot = pg.PlotWidget()
        plot.setBackground(None)
        plot.setMenuEnabled(False)
        plot.setMouseEnabled(x=False, y=False)
        plot.hideButtons()
        plot.showGrid(x=False, y=True, alpha=0.08)
        plot.setLabel("left", "Words")
        plot.setLabel("bottom", "Time (s)")

        xs, ys = history_series(history, total_seconds)
        plot.plot(xs, ys, pen=pg.mkPen(line_color, width=2), symbol=None)
        root.addWidget(plot, stretch=1)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
