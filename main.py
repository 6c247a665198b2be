import sys
from contextlib import ExitStack

from rich.console import Console

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QGuiApplication, QImage, QPainter
from PySide6.QtCore import QTimer, QAbstractEventDispatcher

from clock_events import ClockLoop
from clock_face import ClockFace
from clock_time import ClockTime
from clock_window import ClockWindow
from startup import StartupError, acquire

# --- SETTINGS ---
WIDTH = 600
HEIGHT = 600
FPS = 1                    # One redraw per second
TITLE = "Clock"

console = Console(stderr=True)


def probe_primitives():
    """Return True if a QPainter can draw on an offscreen image."""
    image = QImage(1, 1, QImage.Format_ARGB32)
    painter = QPainter()
    ready = painter.begin(image)
    if ready:
        painter.end()
    return ready


def create_app(argv):
    return QApplication.instance() or QApplication(sys.argv if argv is None else argv)


def input_method():
    return QGuiApplication.inputMethod()


def event_dispatcher():
    return QAbstractEventDispatcher.instance()


def create_window():
    window = ClockWindow(ClockLoop(ClockTime()), ClockFace(), WIDTH, HEIGHT)
    window.setWindowTitle(TITLE)
    return window


def create_timer():
    timer = QTimer()
    timer.setInterval(int(1000 / FPS))
    return timer


def main(argv=None):
    with ExitStack() as stack:
        try:
            app = acquire(stack, "core", lambda: create_app(argv))
            acquire(stack, "keyboard", input_method)
            acquire(stack, "primitives", probe_primitives)
            window = acquire(stack, "display", create_window, release=lambda w: w.close())
            timer = acquire(stack, "timer", create_timer, release=lambda t: t.stop())
            acquire(stack, "event queue", event_dispatcher)
        except StartupError as e:
            console.print(f"[bold red]{e}[/bold red]")
            return -1

        # First frame is painted from the construction-time clock
        window.show()

        timer.timeout.connect(window.on_timer)
        timer.start()

        return app.exec()


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
