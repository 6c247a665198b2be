from datetime import datetime


class ClockTime:
    """
    Hours (0-23), minutes and seconds (0-59) of the local wall clock.
    """
    def __init__(self, now=datetime.now):
        self._now = now
        self.hours = 0
        self.minutes = 0
        self.seconds = 0

        # First frame must be correct before any timer fires
        self.refresh()

    def refresh(self):
        """Overwrite the fields with the current local time."""
        current = self._now()
        self.hours = current.hour
        self.minutes = current.minute
        self.seconds = current.second

    def __repr__(self):
        return f"ClockTime({self.hours:02d}:{self.minutes:02d}:{self.seconds:02d})"
