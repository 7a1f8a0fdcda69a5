"""Timed animations that drive a unit's state."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from copy import copy

from .geometry import Quad, Triad, Vector
from .state import State


class AnimationType(enum.Enum):
    TRANSLATE = 0
    ROTATE = 1
    COLOR_BLINK = 2
    COLOR_RGB = 3
    COLOR_RGBA = 4


class Animation(ABC):
    """Base class for animations that run for a time after an optional delay.

    ``animate`` is called once per frame with the elapsed time; it applies a
    step while the animation is live and finishes it once the state's clock
    passes ``delay + duration``, unless the animation is infinite.
    """

    def __init__(
        self,
        state: State,
        type: AnimationType,
        step: Quad,
        duration: float = 0.0,
        delay: float = 0.0,
        infinite: bool = False,
    ) -> None:
        self._enabled = True
        self._type = AnimationType(type)
        self._state = state
        self._duration = float(state.duration) + duration
        self._delay = delay
        self._step = copy(step)
        self._infinite = infinite
        self._old_color = copy(state.clear)
        self.terminal = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def type(self) -> AnimationType:
        return self._type

    @property
    def state(self) -> State:
        return self._state

    @property
    def step(self) -> Quad:
        return copy(self._step)

    @property
    def infinite(self) -> bool:
        return self._infinite

    def animate(self, delta: float) -> bool:
        """Advance by ``delta``; return whether the animation is still running."""
        if self._enabled and self._state.duration >= self._delay:
            if self._infinite or self._state.duration < self._delay + self._duration:
                self.animate_delta(delta)
            else:
                self.animate_end()
                self._enabled = False
        return self._enabled

    @abstractmethod
    def animate_delta(self, delta: float) -> None:
        """Apply one frame's worth of change."""

    @abstractmethod
    def animate_end(self) -> None:
        """Finish the animation."""


class ColorAnimation(Animation):
    """Blinks or fades the state's colour; restores the resting colour at the end."""

    def __init__(
        self,
        state: State,
        type: AnimationType,
        step: Quad,
        duration: float = 0.0,
        delay: float = 0.0,
    ) -> None:
        super().__init__(state, type, step, duration, delay, duration <= 0.0)
        if self._type is AnimationType.COLOR_RGB:
            # The step is a target colour, turned into a rate per unit time.
            if duration != 0.0:
                self._step = (step - state.color) / duration
            else:
                self._step = Quad()

    def animate_delta(self, delta: float) -> None:
        step = self._step
        color = self._state.color
        if self._type is AnimationType.COLOR_BLINK:
            color.set(step.a, step.b, step.c, step.d)
        elif self._type is AnimationType.COLOR_RGB:
            color += Quad(step.a * delta, step.b * delta, step.c * delta, 0.0)
        elif self._type is AnimationType.COLOR_RGBA:
            color += Quad(step.a * delta, step.b * delta, step.c * delta, step.d * delta)

    def animate_end(self) -> None:
        self._state.color = copy(self._old_color)


class LinearAnimation(Animation):
    """Moves the state's position at a constant velocity."""

    def __init__(
        self,
        state: State,
        step: Triad,
        duration: float = 0.0,
        delay: float = 0.0,
    ) -> None:
        super().__init__(state, AnimationType.TRANSLATE, Quad(), duration, delay, duration <= 0.0)
        # Unlike colour animations, the duration is not offset by the state's clock.
        self._duration = duration
        self._old_color = copy(state.color)
        self._step_t = copy(step)

    @property
    def translation(self) -> Triad:
        return copy(self._step_t)

    def animate_delta(self, delta: float) -> None:
        self._state.current += self._step_t * delta

    def animate_end(self) -> None:
        pass


class RotationAnimation(Animation):
    """Spins the state about an axis at a constant angular speed."""

    def __init__(
        self,
        state: State,
        step: Vector,
        duration: float = 0.0,
        delay: float = 0.0,
    ) -> None:
        axis = step.direction
        super().__init__(
            state,
            AnimationType.ROTATE,
            Quad(axis.x, axis.y, axis.z, step.magnitude),
            duration,
            delay,
            duration <= 0.0,
        )
        self._duration = duration
        self._old_color = copy(state.color)

    def animate_delta(self, delta: float) -> None:
        step = self._step
        self._state.rotation.direction.set(step.a, step.b, step.c)
        self._state.rotation.magnitude = step.d
        self._state.angle += step.d * delta

    def animate_end(self) -> None:
        pass