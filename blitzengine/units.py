"""Game units: ticking, painting, input handling and animated state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Set, Tuple

from .animation import Animation
from .geometry import Quad
from .state import State

Vertex = Tuple[float, float, float]


def _boxes_overlap(first: Quad, second: Quad) -> bool:
    """True when two (left, top, right, bottom) boxes intersect."""
    return (
        first.a <= second.c
        and second.a <= first.c
        and first.d <= second.b
        and second.d <= first.b
    )


class Ticker(ABC):
    """Something advanced by elapsed time."""

    @abstractmethod
    def tick(self, delta: float) -> None:
        """Advance by ``delta`` seconds."""


class Painter(ABC):
    """Something drawn each frame, with a hook run before the first draw."""

    def __init__(self) -> None:
        super().__init__()
        self._first_render = True
        self.has_rendered = False

    @abstractmethod
    def draw(self) -> None:
        """Draw the object."""

    def call_first_render(self) -> None:
        """Run ``on_first_render`` once, on the first call only."""
        if self._first_render:
            self.on_first_render()
            self._first_render = False

    def on_first_render(self) -> None:
        """Hook run before the first draw; marks the painter as rendered."""
        self.has_rendered = True


class InputListener(ABC):
    """Receives mouse and keyboard events."""

    @abstractmethod
    def mouse_pressed(self, button: int) -> None: ...

    @abstractmethod
    def mouse_released(self, button: int) -> None: ...

    @abstractmethod
    def mouse_moved(self, x: int, y: int) -> None: ...

    @abstractmethod
    def mouse_wheel_moved(self, pos: int) -> None: ...

    @abstractmethod
    def key_pressed(self, key: int) -> None: ...

    @abstractmethod
    def key_released(self, key: int) -> None: ...

    @abstractmethod
    def key_char_pressed(self, character: int) -> None: ...

    @abstractmethod
    def key_char_released(self, character: int) -> None: ...


class UnitObject(Ticker, Painter):
    """A drawable, ticking unit with a state and a list of animations."""

    #: Units collide only when both are solid; none are by default.
    solid = False

    def __init__(self) -> None:
        super().__init__()
        self.state = State()
        self.animations: List[Animation] = []
        self.completed = False
        self.sound_manager: Optional[Any] = None
        self.hits: List["UnitObject"] = []
        self.terminal_completions = 0

    def mark_completed(self) -> bool:
        self.completed = True
        return self.completed

    def bounding_box_vertices(self) -> List[Vertex]:
        """Corners of the state's box, clockwise from top-left, at z = 0."""
        box = self.state.box
        return [
            (box.a, box.b, 0.0),
            (box.c, box.b, 0.0),
            (box.c, box.d, 0.0),
            (box.a, box.d, 0.0),
        ]

    def add_animation(self, animation: Animation) -> None:
        self.animations.append(animation)

    def remove_animation(self, index: int) -> Animation:
        return self.animations.pop(index)

    def animate_all(self, delta: float) -> bool:
        """Run every animation, drop finished ones; report a terminal finish."""
        terminal = False
        running: List[Animation] = []
        for animation in self.animations:
            if animation.animate(delta):
                running.append(animation)
            else:
                terminal |= animation.terminal
        self.animations = running
        if terminal:
            self.terminal_complete()
        return terminal

    def update_state(self, delta: float) -> bool:
        """Advance the clock, position and angle, then run the animations."""
        state = self.state
        state.duration += delta
        state.current += state.velocity * delta
        state.angle += state.rotation.magnitude * delta
        return self.animate_all(delta)

    def is_complete(self) -> bool:
        return False

    def collision(self, other: "UnitObject") -> bool:
        """True when both units are solid and their boxes overlap."""
        return (
            self.solid
            and other.solid
            and _boxes_overlap(self.state.box, other.state.box)
        )

    def hit(self, other: "UnitObject") -> None:
        """React to being hit by ``other``; records the hitting unit."""
        self.hits.append(other)

    def terminal_complete(self) -> None:
        """Called when a terminal animation finishes; counts the finishes."""
        self.terminal_completions += 1


class HealthObject(UnitObject):
    """A unit with health."""

    def __init__(self) -> None:
        super().__init__()
        self.health = 0.0


class EnergyObject(UnitObject):
    """A unit with energy."""

    def __init__(self) -> None:
        super().__init__()
        self.energy = 0.0


class DamageObject(UnitObject):
    """A unit that deals damage."""

    def __init__(self) -> None:
        super().__init__()
        self.damage = 0.0


class Player(HealthObject, InputListener):
    """A player unit that keeps track of the input it has received."""

    def __init__(self, id: int = 0, name: str = "Default Player") -> None:
        super().__init__()
        self.id = id
        self.name = name
        self.level: Optional[Any] = None
        self.pressed_buttons: Set[int] = set()
        self.mouse_position: Tuple[int, int] = (0, 0)
        self.wheel_position = 0
        self.pressed_keys: Set[int] = set()
        self.pressed_chars: Set[int] = set()

    def set_level(self, level: Any) -> None:
        self.level = level

    def mouse_pressed(self, button: int) -> None:
        self.pressed_buttons.add(button)

    def mouse_released(self, button: int) -> None:
        self.pressed_buttons.discard(button)

    def mouse_moved(self, x: int, y: int) -> None:
        self.mouse_position = (x, y)

    def mouse_wheel_moved(self, pos: int) -> None:
        self.wheel_position = pos

    def key_pressed(self, key: int) -> None:
        self.pressed_keys.add(key)

    def key_released(self, key: int) -> None:
        self.pressed_keys.discard(key)

    def key_char_pressed(self, character: int) -> None:
        self.pressed_chars.add(character)

    def key_char_released(self, character: int) -> None:
        self.pressed_chars.discard(character)