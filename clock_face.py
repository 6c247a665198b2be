import math

import numpy as np

TWO_PI = 2 * math.pi

# --- Colors (RGB) ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def tick_angles(count):
    """Return `count` evenly spaced angles in [0, 2*pi)."""
    return np.arange(count) * (TWO_PI / count)


def tick_segments(x, y, r, count, length):
    """
    Return one (x1, y1, x2, y2) segment per tick, running from the dial
    edge inward by `length`. Ticks use the plain (cos, sin) placement.
    """
    angles = tick_angles(count)
    cos = np.cos(angles)
    sin = np.sin(angles)
    x1 = x + cos * r
    y1 = y + sin * r
    x2 = x + cos * (r - length)
    y2 = y + sin * (r - length)
    return [
        (float(a), float(b), float(c), float(d))
        for a, b, c, d in zip(x1, y1, x2, y2)
    ]


def hand_angle(value, divisions):
    """Angle of a hand, clockwise from 12 o'clock. No carry between fields."""
    return value * (TWO_PI / divisions)


def hand_segment(x, y, angle, tail, length):
    """
    Return the (x1, y1, x2, y2) segment of a hand: a tail of `tail` behind
    the center, and the tip `length` ahead of it.
    """
    return (
        x - math.sin(angle) * tail,
        y + math.cos(angle) * tail,
        x + math.sin(angle) * length,
        y - math.cos(angle) * length,
    )


class ClockFace:
    """
    Draws the dial, graduations, hands and hub onto a surface.

    A surface is any object with `fill_circle(x, y, radius, color)` and
    `line(x1, y1, x2, y2, color, thickness)`.
    """
    # (count, length, thickness)
    LIGHT_GRADUATIONS = (60, 10, 3)
    BOLD_GRADUATIONS = (12, 20, 4)

    # (field, divisions, inset from the dial edge, thickness, color)
    HANDS = (
        ("hours", 12, 80, 10, RED),
        ("minutes", 60, 20, 5, GREEN),
        ("seconds", 60, 5, 2, BLUE),
    )
    HAND_TAIL = 20
    HUB_RADIUS = 10

    def draw(self, surface, x, y, r, clock_time):
        # --- Dial ---
        surface.fill_circle(x, y, r, WHITE)

        # --- Graduations (bold ones overlay the light ones) ---
        for count, length, thickness in (self.LIGHT_GRADUATIONS, self.BOLD_GRADUATIONS):
            for x1, y1, x2, y2 in tick_segments(x, y, r, count, length):
                surface.line(x1, y1, x2, y2, BLACK, thickness)

        # --- Hands ---
        for field, divisions, inset, thickness, color in self.HANDS:
            angle = hand_angle(getattr(clock_time, field), divisions)
            x1, y1, x2, y2 = hand_segment(x, y, angle, self.HAND_TAIL, r - inset)
            surface.line(x1, y1, x2, y2, color, thickness)

        # --- Hub, on top of the hands' origins ---
        surface.fill_circle(x, y, self.HUB_RADIUS, BLACK)
