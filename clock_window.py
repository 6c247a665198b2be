from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QPen, QColor, QBrush
from PySide6.QtCore import Qt, QPointF

from clock_events import TimerTick, WindowClose, KeyUp, ESCAPE
from clock_face import BLACK


class PainterSurface:
    """
    Drawing surface backed by a QPainter. Colors are RGB tuples.
    """
    def __init__(self, painter):
        self.painter = painter

    def clear(self, color):
        window = self.painter.window()
        self.painter.fillRect(window, QColor(*color))

    def fill_circle(self, x, y, radius, color):
        self.painter.setPen(Qt.NoPen)
        self.painter.setBrush(QBrush(QColor(*color)))
        self.painter.drawEllipse(QPointF(x, y), radius, radius)

    def line(self, x1, y1, x2, y2, color, thickness):
        self.painter.setPen(QPen(QColor(*color), thickness, Qt.SolidLine, Qt.FlatCap))
        self.painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))


def key_name(key):
    """Lowercase name of a Qt key code; only Escape matters to the clock."""
    if key == Qt.Key_Escape:
        return ESCAPE
    return f"key-{int(key)}"


class ClockWindow(QWidget):
    """
    Fixed-size window that shows the clock face.

    Qt events are translated into clock events and handed to the loop.
    update() requests are coalesced by Qt and painted once pending events
    have been processed.
    """
    def __init__(self, loop, face, width=600, height=600, parent=None):
        super().__init__(parent)
        self.loop = loop
        self.face = face
        self.setFixedSize(width, height)

        # Needed to receive key releases
        self.setFocusPolicy(Qt.StrongFocus)

    def on_timer(self):
        self.dispatch(TimerTick())

    def dispatch(self, event):
        self.loop.handle(event)
        if not self.loop.running:
            self.close()
        elif self.loop.needs_redraw():
            self.update()

    def keyReleaseEvent(self, event):
        if event.isAutoRepeat():
            return
        self.dispatch(KeyUp(key_name(event.key())))

    def closeEvent(self, event):
        self.loop.handle(WindowClose())
        event.accept()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        surface = PainterSurface(painter)
        surface.clear(BLACK)
        self.face.draw(
            surface,
            self.width() / 2,
            self.height() / 2,
            self.height() / 2,
            self.loop.begin_frame(),
        )

        painter.end()
