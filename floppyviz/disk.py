"""State and head animation of a 5.25-inch floppy disk."""

from __future__ import annotations

import math

ANIMATION_STEPS = 80
DISK_RPM = 300
MINIMUM_SIZE = (400, 400)
SIZE_HINT = (400, 400)
BASE_TRACK_INTERVAL_MS = 1000
DEFAULT_SECTOR_COUNT = 16


class FloppyDisk:
    """A floppy disk in a drive: head, rotation, sectors and head animation.

    The animation is stepped from outside by calling :meth:`animate_head`
    every :meth:`track_interval` milliseconds and :meth:`animate_side` every
    :meth:`side_interval` milliseconds.
    """

    def __init__(self) -> None:
        self.track = 0
        self.side = 0
        self.head_position = 0
        self.write_operation = False
        self.double_sided = True
        self.double_density = True
        self.rotation_angle = 0.0
        self.index_pulse = False
        self.highlight_track = True
        self.highlight_sector = True
        self.front_view = True
        self.animation_step = 0
        self.animation_direction_up = True
        self._envelope_transparency = 1.0
        self._sector_count = DEFAULT_SECTOR_COUNT
        self._current_sector = 0
        self._head_animating = False
        self._animation_speed = 1.0

    @property
    def envelope_transparency(self) -> float:
        """Opacity of the envelope, clamped to the range 0.0 to 1.0."""
        return self._envelope_transparency

    @envelope_transparency.setter
    def envelope_transparency(self, alpha: float) -> None:
        self._envelope_transparency = min(max(float(alpha), 0.0), 1.0)

    @property
    def sector_count(self) -> int:
        """Number of sectors per track; never less than one."""
        return self._sector_count

    @sector_count.setter
    def sector_count(self, count: int) -> None:
        self._sector_count = count if count > 0 else 1

    @property
    def current_sector(self) -> int:
        return self._current_sector

    @current_sector.setter
    def current_sector(self, sector: int) -> None:
        self.set_current_sector(sector)

    @property
    def head_animating(self) -> bool:
        return self._head_animating

    @property
    def animation_speed(self) -> float:
        return self._animation_speed

    def num_tracks(self) -> int:
        """Return 80 tracks for double density, 40 otherwise."""
        return 80 if self.double_density else 40

    def track_interval(self) -> int:
        """Milliseconds between head steps at the current speed."""
        return int(BASE_TRACK_INTERVAL_MS / self._animation_speed)

    def side_interval(self) -> int:
        """Milliseconds between side changes: twice as often as head steps."""
        return self.track_interval() // 2

    def start_head_animation(self) -> None:
        self._head_animating = True

    def stop_head_animation(self) -> None:
        """Pause the animation; it resumes from the same step."""
        self._head_animating = False

    def reset_head_animation(self) -> None:
        self._head_animating = False
        self.animation_step = 0
        self.animation_direction_up = True
        self.track = 0
        self.side = 0

    def set_animation_speed(self, speed: float) -> None:
        """Set the speed multiplier; values that are not positive are ignored."""
        if speed > 0:
            self._animation_speed = float(speed)

    def set_current_sector(self, sector: int) -> None:
        """Select a sector; values outside the track's sectors are ignored."""
        if 0 <= sector < self._sector_count:
            self._current_sector = sector

    def animate_side(self) -> None:
        """Flip between the two sides while animating a double-sided disk."""
        if self._head_animating and self.double_sided:
            self.side = 1 if self.side == 0 else 0

    def animate_head(self) -> None:
        """Move the head one step, bouncing between the outer and inner track."""
        if not self._head_animating:
            return

        if self.animation_direction_up:
            self.animation_step += 1
            if self.animation_step >= ANIMATION_STEPS - 1:
                self.animation_direction_up = False
        else:
            self.animation_step -= 1
            if self.animation_step <= 0:
                self.animation_direction_up = True

        fraction = self.animation_step / (ANIMATION_STEPS - 1)
        self.track = int(fraction * (self.num_tracks() - 1))

        sector_span = 360.0 / self._sector_count
        self.set_current_sector(int(math.fmod(self.rotation_angle, 360.0) / sector_span))

    def status_text(self) -> str:
        """Return the one-line status shown below the disk."""
        operation = "Write" if self.write_operation else "Read"
        density = "DD" if self.double_density else "SD"
        return (
            f"Track: {self.track}  Side: {self.side}  "
            f"Sector: {self._current_sector}  {operation}  {density}"
        )