import pytest

from blitzengine.animation import (
    Animation,
    AnimationType,
    ColorAnimation,
    LinearAnimation,
    RotationAnimation,
)
from blitzengine.geometry import Quad, Triad, Vector
from blitzengine.state import State


def _run(state, anim, delta, frames):
    results = []
    for _ in range(frames):
        state.duration += delta
        results.append(anim.animate(delta))
    return results


def test_animation_is_abstract():
    with pytest.raises(TypeError):
        Animation(State(), AnimationType.TRANSLATE, Quad(), 1.0, 0.0, False)


def test_linear_moves_until_duration():
    state = State()
    step = Triad(1.0, 2.0, 0.0)
    anim = LinearAnimation(state, step, duration=2.0)
    results = _run(state, anim, 0.5, 5)
    assert results == [True, True, True, False, False]
    assert state.current == step * 0.5 + step * 0.5 + step * 0.5
    assert anim.enabled is False


def test_linear_zero_duration_is_infinite():
    state = State()
    anim = LinearAnimation(state, Triad(1.0, 0.0, 0.0))
    assert anim.infinite
    assert all(_run(state, anim, 1.0, 10))
    assert anim.type is AnimationType.TRANSLATE


def test_linear_waits_for_delay():
    state = State()
    anim = LinearAnimation(state, Triad(1.0, 1.0, 1.0), duration=5.0, delay=1.0)
    state.duration = 0.5
    assert anim.animate(0.5) is True
    assert state.current == Triad()
    state.duration = 1.0
    assert anim.animate(0.5) is True
    assert state.current == Triad(1.0, 1.0, 1.0) * 0.5


def test_linear_duration_not_offset_by_clock():
    state = State(duration=5.0)
    anim = LinearAnimation(state, Triad(1.0, 0.0, 0.0), duration=1.0)
    assert anim.animate(0.1) is False
    assert state.current == Triad()


def test_color_duration_offset_by_clock():
    state = State(duration=5.0)
    anim = ColorAnimation(state, AnimationType.COLOR_BLINK, Quad(1.0, 0.0, 0.0, 1.0), duration=1.0)
    state.duration = 5.5
    assert anim.animate(0.5) is True
    assert state.color == Quad(1.0, 0.0, 0.0, 1.0)


def test_color_blink_then_restore():
    state = State()
    anim = ColorAnimation(state, AnimationType.COLOR_BLINK, Quad(1.0, 0.0, 0.0, 1.0), duration=1.0)
    state.duration = 0.5
    assert anim.animate(0.5) is True
    assert state.color == Quad(1.0, 0.0, 0.0, 1.0)
    state.duration = 1.0
    assert anim.animate(0.5) is False
    assert state.color == state.clear


def test_color_rgb_step_is_rate_towards_target():
    state = State()
    target = Quad(0.0, 0.0, 0.0, 1.0)
    anim = ColorAnimation(state, AnimationType.COLOR_RGB, target, duration=2.0)
    assert anim.step == (target - Quad(1.0, 1.0, 1.0, 1.0)) / 2.0
    state.duration = 1.0
    assert anim.animate(2.0) is True
    assert state.color == target


def test_color_rgb_zero_duration_has_no_step():
    state = State()
    anim = ColorAnimation(state, AnimationType.COLOR_RGB, Quad(0.0, 0.0, 0.0, 0.0))
    assert anim.step == Quad()
    assert anim.infinite
    anim.animate(1.0)
    assert state.color == Quad(1.0, 1.0, 1.0, 1.0)


def test_color_rgba_changes_alpha_rgb_does_not():
    state = State()
    state.set_color_clear(Quad(0.0, 0.0, 0.0, 0.0))
    rate = Quad(0.25, 0.5, 0.75, 1.0)
    anim = ColorAnimation(state, AnimationType.COLOR_RGBA, rate)
    assert anim.animate(1.0) is True
    assert state.color == rate


def test_color_end_restores_clear_not_current():
    state = State()
    state.set_color_clear(Quad(0.5, 0.5, 0.5, 1.0))
    anim = ColorAnimation(state, AnimationType.COLOR_RGBA, Quad(0.1, 0.1, 0.1, 0.0), duration=1.0)
    results = _run(state, anim, 0.5, 3)
    assert results[-1] is False
    assert state.color == Quad(0.5, 0.5, 0.5, 1.0)
    assert state.color is not state.clear


def test_rotation_updates_angle_and_axis():
    state = State()
    anim = RotationAnimation(state, Vector(Triad(0.0, 0.0, 1.0), 90.0), duration=2.0)
    assert anim.step == Quad(0.0, 0.0, 1.0, 90.0)
    assert anim.type is AnimationType.ROTATE
    state.duration = 1.0
    assert anim.animate(1.0) is True
    assert state.angle == 90.0
    assert state.rotation.direction == Triad(0.0, 0.0, 1.0)
    assert state.rotation.magnitude == 90.0


def test_rotation_finishes():
    state = State()
    anim = RotationAnimation(state, Vector(Triad(1.0, 0.0, 0.0), 10.0), duration=1.0)
    state.duration = 1.0
    assert anim.animate(1.0) is False
    assert state.angle == 0.0


def test_terminal_flag():
    state = State()
    anim = LinearAnimation(state, Triad(), duration=1.0)
    assert anim.terminal is False
    anim.terminal = True
    assert anim.terminal is True


def test_disabled_animation_stays_disabled():
    state = State()
    anim = LinearAnimation(state, Triad(1.0, 0.0, 0.0), duration=1.0)
    state.duration = 2.0
    assert anim.animate(1.0) is False
    state.duration = 0.0
    assert anim.animate(1.0) is False
    assert state.current == Triad()