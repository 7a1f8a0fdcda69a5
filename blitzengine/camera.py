"""A camera that follows the pointer inside normalised bounds."""

from __future__ import annotations

from copy import copy
from typing import Callable, Optional

from .geometry import Dyad, Quad, Triad

PointerWarp = Callable[[int, int], None]


class Camera:
    """Tracks a position in normalised screen space, kept inside ``bounds``.

    ``bounds`` is read as left (a), top (b), right (c) and bottom (d).
    ``warp_pointer`` is called with pixel coordinates whenever the camera
    needs to move the pointer back inside the bounds.
    """

    def __init__(
        self,
        current: Optional[Triad] = None,
        screen: Optional[Dyad] = None,
        bounds: Optional[Quad] = None,
        fixed: bool = False,
        warp_pointer: Optional[PointerWarp] = None,
    ) -> None:
        self.current = copy(current) if current is not None else Triad()
        self.screen = copy(screen) if screen is not None else Dyad()
        self.fixed = fixed
        self._warp_pointer = warp_pointer
        self.set_bounds(bounds if bounds is not None else Quad())

    @property
    def bounds(self) -> Quad:
        return copy(self._bounds)

    @property
    def bound_width(self) -> float:
        return self._bound_width

    @property
    def bound_height(self) -> float:
        return self._bound_height

    def set_screen(self, width: int, height: int) -> None:
        self.screen.set(float(width), float(height))

    def set_bounds(self, bounds: Quad) -> None:
        self._bounds = copy(bounds)
        self._bound_width = self._bounds.c - self._bounds.a
        self._bound_height = self._bounds.b - self._bounds.d

    def _warp(self, x: int, y: int) -> None:
        if self._warp_pointer is not None:
            self._warp_pointer(x, y)

    def update_absolute(self, position: Triad) -> None:
        self.current = copy(position)

    def update_from_pixels(self, x: int, y: int) -> None:
        """Move to the pointer at pixel ``(x, y)``, clamping it to the bounds."""
        nx = 2 * (float(x) / self.screen.x - 0.5)
        ny = 2 * (0.5 - float(y) / self.screen.y)
        bounds = self._bounds
        changed = False
        if nx <= bounds.a or nx >= bounds.c:
            nx = bounds.a if nx < 0.0 else bounds.c
            changed = True
        if ny <= bounds.d or ny >= bounds.b:
            ny = bounds.d if ny < 0.0 else bounds.b
            changed = True
        if changed:
            rx = (nx / 2 + 0.5) * self.screen.x
            ry = (0.5 - ny / 2) * self.screen.y
            self._warp(int(rx), int(ry))
        self.current.x = nx
        self.current.y = ny

    def update_relative(self, dx: float, dy: float) -> None:
        """Shift by a normalised offset and move the pointer to match."""
        self.current.x += dx
        self.current.y += dy
        rx = int((self.current.x / 2 + 0.5) * self.screen.x)
        ry = int((self.current.y / 2 + 0.5) * self.screen.y)
        self._warp(rx, ry)

    def current_normalized(self) -> Triad:
        """The position scaled by the bounds' size."""
        return Triad(
            2 * self.current.x / self._bound_width,
            2 * self.current.y / self._bound_height,
            0.0,
        )