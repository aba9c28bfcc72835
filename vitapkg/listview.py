"""Formatting and cursor logic for the scrolling package list."""

from __future__ import annotations

import struct

_UNIT_B = "B"
_UNIT_KB = "KB"
_UNIT_MB = "MB"
_UNIT_GB = "GB"


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _scaled(size: int, divisions: int) -> float:
    value = _f32(float(size))
    for _ in range(divisions):
        value = _f32(value / 1024.0)
    return value


def friendly_size(size: int) -> str:
    """Return a short human-readable size, or an empty string for sizes <= 0."""
    if size <= 0:
        return ""
    if size < 1000:
        return f"{size} {_UNIT_B}"
    if size < 1000 * 1000:
        return f"{_scaled(size, 1):.2f} {_UNIT_KB}"
    if size < 1000 * 1000 * 1000:
        return f"{_scaled(size, 2):.2f} {_UNIT_MB}"
    return f"{_scaled(size, 3):.2f} {_UNIT_GB}"


def format_speed(speed: int) -> str:
    """Return a download speed in bytes per second as display text."""
    if speed > 1000 * 1024:
        return f"{_scaled(speed, 2):.3g} MB/s"
    if speed > 1000:
        return f"{_scaled(speed, 1):.3g} KB/s"
    return f"{speed} B/s"


class SpeedMeter:
    """Download speed measured over windows of at least one second."""

    def __init__(self) -> None:
        self.last_time = 0
        self.last_offset = 0
        self.speed = 0

    def sample(self, offset: int, now_ms: int) -> int:
        """Record the download offset at ``now_ms`` and return bytes per second.

        Until a full second has passed since the last measurement, the
        previous speed is returned unchanged.
        """
        elapsed = now_ms - self.last_time
        if elapsed < 1000:
            return self.speed
        self.speed = (offset - self.last_offset) * 1000 // elapsed
        self.last_offset = offset
        self.last_time = now_ms
        return self.speed


class ListCursor:
    """First visible row and selected row of a list with ``visible_rows`` rows per page.

    ``visible_rows`` is the number of rows the selection may move past the
    first visible row before the list scrolls.
    """

    def __init__(self, visible_rows: int) -> None:
        self.visible_rows = visible_rows
        self.first = 0
        self.selected = 0

    def reset(self) -> None:
        """Go back to the top of the list."""
        self.first = 0
        self.selected = 0

    def up(self, count: int) -> None:
        """Move the selection up one row, wrapping to the bottom."""
        if count <= 0:
            self.reset()
            return
        if self.selected == self.first and self.first > 0:
            self.first -= 1
            self.selected = self.first
        elif self.selected > 0:
            self.selected -= 1
        else:
            self.selected = count - 1
            rows = self.visible_rows
            self.first = count - rows - 1 if count > rows else 0

    def down(self, count: int) -> None:
        """Move the selection down one row, wrapping to the top."""
        if count <= 0:
            self.reset()
            return
        if self.selected == count - 1:
            self.reset()
        elif self.selected == self.first + self.visible_rows:
            self.first += 1
            self.selected += 1
        else:
            self.selected += 1

    def page_up(self) -> None:
        """Move one page up, stopping at the top."""
        rows = self.visible_rows
        self.first = 0 if self.first < rows else self.first - rows
        self.selected = 0 if self.selected < rows else self.selected - rows

    def page_down(self, count: int) -> None:
        """Move one page down if there is more below, clamping to the last row."""
        if count <= 0:
            return
        rows = self.visible_rows
        if self.first + rows < count - 1:
            self.first += rows
            self.selected += rows
            if self.selected >= count:
                self.selected = count - 1

    def reposition(self, count: int) -> None:
        """Pull the cursor back inside a list that now holds ``count`` rows."""
        if self.first + self.selected < count:
            return
        rows = self.visible_rows
        if count > rows:
            delta = self.selected - self.first
            self.first = count - rows
            self.selected = self.first + delta
        else:
            self.reset()