import math
import logging
from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtGui import QPainter, QBrush, QColor, QFont, QFontMetricsF, QPolygonF
from PySide6.QtCore import Qt, QPointF, QRectF, QTimer, Signal

from constants import EMPTY_WHEEL_TEXT, TICK_INTERVAL_MS, WHEEL_MARGIN

logger = logging.getLogger(__name__)


class WheelWidget(QWidget):
    """Wheel widget: paints the session's layout and drives its ticks."""
    # Winning choice id, or None when the wheel was emptied mid-spin
    spin_finished = Signal(object)

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session
        self.setMinimumSize(300, 300)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self.wheel_font = QFont()
        self.wheel_font.setBold(True)
        self.pointer_color = QColor(200, 200, 200)

        # One timeout per frame while spinning
        self.timer = QTimer(self)
        self.timer.setInterval(TICK_INTERVAL_MS)
        self.timer.timeout.connect(self.physics_update)

    def measure_text(self, text, size):
        """Width and height of ``text`` at pixel size ``size``."""
        self.wheel_font.setPixelSize(size)
        fm = QFontMetricsF(self.wheel_font)
        return fm.horizontalAdvance(text), fm.height()

    def start_spin(self):
        """Start a spin and the frame timer."""
        if not self.session.start_spin():
            return False
        self.timer.start()
        self.update()
        return True

    def physics_update(self):
        """One animation frame."""
        if not self.session.spinning:
            self.timer.stop()
            return

        still_spinning = self.session.tick()
        self.update()

        if not still_spinning:
            self.timer.stop()
            self.on_spin_finished()

    def on_spin_finished(self):
        winner = self.session.winner
        logger.debug("Spin finished at rotation %.4f, winner %r", self.session.rotation, winner)
        self.spin_finished.emit(winner.id if winner is not None else None)

    def stop(self):
        """Stop ticking; used when the wheel is cleared."""
        self.timer.stop()
        self.update()

    def paintEvent(self, event):
        """Draw the wheel."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        rect = self.rect()
        w = min(rect.width(), rect.height())
        center = QPointF(rect.width() / 2, rect.height() / 2)
        radius = max(0.0, w / 2 - WHEEL_MARGIN)
        self.session.set_geometry((center.x(), center.y()), radius)

        segments = self.session.layout(self.measure_text)
        if not segments:
            font = painter.font()
            font.setPixelSize(30)
            painter.setFont(font)
            painter.setPen(self.palette().windowText().color())
            painter.drawText(QRectF(rect), Qt.AlignCenter, EMPTY_WHEEL_TEXT)
            return

        for segment in segments:
            painter.setBrush(QBrush(QColor(*segment.color)))
            painter.setPen(Qt.NoPen)
            painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in segment.points]))

        painter.setPen(Qt.white)
        for segment in segments:
            self.wheel_font.setPixelSize(segment.font_size)
            painter.setFont(self.wheel_font)
            text_w, text_h = self.measure_text(segment.text, segment.font_size)

            painter.save()
            painter.translate(QPointF(*segment.text_anchor))
            painter.rotate(math.degrees(segment.text_angle))
            painter.drawText(QRectF(-text_w / 2, -text_h / 2, text_w, text_h), Qt.AlignCenter, segment.text)
            painter.restore()

        # Pointer, due east of the center
        px, py = self.session.pointer
        painter.setBrush(QBrush(self.pointer_color))
        painter.setPen(Qt.NoPen)
        painter.drawPolygon(QPolygonF([
            QPointF(px - 15, py),
            QPointF(px + 30, py + 20),
            QPointF(px + 30, py - 20),
        ]))
