from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QColor, QPen, QFont, QPaintEvent
from PySide6.QtCore import Qt, QRectF


class CountdownRing(QWidget):
    """Seconds-left number inside an arc that empties as the round runs."""

    def __init__(self, total: int = 60, size: int = 120, stroke: int = 5, parent=None):
        super().__init__(parent)
        self._total = max(1, total)
        self._value = total
        self._stroke = stroke
        self._track = QColor("#2a2d34")
        self._fill = QColor("#eab308")
        self._text = QColor("#e5e7eb")
        self._muted = QColor("#6b7280")
        self.setFixedSize(size, size)

    def value(self) -> int:
        return self._value

    def set_value(self, seconds: int):
        self._value = max(0, min(int(seconds), self._total))
        self.update()

    def set_colors(self, fill: str, text: str, muted: str):
        self._fill = QColor(fill)
        self._text = QColor(text)
        self._muted = QColor(muted)
        self.update()

    def paintEvent(self, e: QPaintEvent):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing)
        half = self._stroke / 2.0
        rect = QRectF(half, half, self.width() - self._stroke, self.height() - self._stroke)

        pen = QPen(self._track, self._stroke)
        p.setPen(pen)
        p.drawEllipse(rect)

        # Qt arcs are in 1/16th degree, counter-clockwise from 3 o'clock
        span = int(360 * 16 * self._value / self._total)
        pen = QPen(self._fill, self._stroke)
        pen.setCapStyle(Qt.RoundCap)
        p.setPen(pen)
        p.drawArc(rect, 90 * 16, -span)

        big = QFont(self.font())
        big.setPointSize(26)
        big.setBold(True)
        p.setFont(big)
        p.setPen(self._text)
        upper = QRectF(rect.left(), rect.top(), rect.width(), rect.height() * 0.68)
        p.drawText(upper, Qt.AlignHCenter | Qt.AlignBottom, str(self._value))

        small = QFont(self.font())
        small.setPointSize(9)
        p.setFont(small)
        p.setPen(self._muted)
        lower = QRectF(rect.left(), rect.top() + rect.height() * 0.66, rect.width(), rect.height() * 0.3)
        p.drawText(lower, Qt.AlignHCenter | Qt.AlignTop, "seconds")
