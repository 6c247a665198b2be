from dataclasses import dataclass


# --- Events delivered to the loop ---

@dataclass(frozen=True)
class TimerTick:
    pass


@dataclass(frozen=True)
class WindowClose:
    pass


@dataclass(frozen=True)
class KeyUp:
    key: str


ESCAPE = "escape"


class ClockLoop:
    """
    Running/Exiting state machine behind the clock window.

    Timer ticks refresh the time and mark the frame dirty. The host
    redraws once its queue is drained, calling `begin_frame()` to get the
    time to render.
    """
    RUNNING = "running"
    EXITING = "exiting"

    def __init__(self, clock_time):
        self.time = clock_time
        self.state = self.RUNNING
        self.dirty = True

    @property
    def running(self):
        return self.state == self.RUNNING

    def handle(self, event):
        if not self.running:
            return

        if isinstance(event, TimerTick):
            self.time.refresh()
            self.dirty = True
        elif isinstance(event, WindowClose):
            self.state = self.EXITING
        elif isinstance(event, KeyUp):
            if event.key == ESCAPE:
                self.state = self.EXITING

    def needs_redraw(self, queue_empty=True):
        """`queue_empty` is for hosts that poll their own event queue; Qt coalesces update() itself."""
        return self.running and self.dirty and queue_empty

    def begin_frame(self):
        """Refresh the time, clear the dirty flag and return the time to draw."""
        self.time.refresh()
        self.dirty = False
        return self.time
