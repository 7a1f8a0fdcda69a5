"""Per-unit simulation state."""

from __future__ import annotations

from copy import copy
from dataclasses import dataclass, field

from .geometry import Quad, Triad, Vector


def _white() -> Quad:
    return Quad(1.0, 1.0, 1.0, 1.0)


@dataclass
class State:
    """Time, position, orientation and colour of a unit."""

    duration: float = 0.0
    color: Quad = field(default_factory=_white)
    current: Triad = field(default_factory=Triad)
    angle: float = 0.0
    clear: Quad = field(default_factory=_white)
    start: Triad = field(default_factory=Triad)
    box: Quad = field(default_factory=Quad)
    normal: Triad = field(default_factory=Triad)
    velocity: Triad = field(default_factory=Triad)
    rotation: Vector = field(default_factory=Vector)
    gravity: Triad = field(default_factory=Triad)

    def set_color_clear(self, color: Quad) -> None:
        """Set both the current and the resting colour to copies of ``color``."""
        self.clear = copy(color)
        self.color = copy(color)