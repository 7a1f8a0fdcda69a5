# blitzengine

Building blocks for a small game engine, in plain Python. The package holds
the state, math and file decoding that a game loop works with. It has no
window, rendering or audio output of its own.

## Modules

- `blitzengine.geometry` has the mutable vector types `Dyad` (x, y), `Triad`
  (x, y, z) and `Quad` (a, b, c, d). They support element-wise and scalar
  `+ - * /` and the in-place forms of these operators. `Triad` and `Quad` have
  `dot_product`. `Quad`'s dot product and its string form use only the first
  three components. The module also has `Color` (white and opaque by default),
  `Point` and `Vector` (a direction with a magnitude).
- `blitzengine.state` has `State`, a dataclass that holds a unit's elapsed time
  (`duration`), position (`current`), velocity, rotation, angle, box and
  colours. `set_color_clear` sets both the current colour and the resting
  colour.
- `blitzengine.animation` has `AnimationType` and the abstract `Animation`,
  with three concrete animations:
  - `ColorAnimation` blinks the colour, fades it towards a target
    (`COLOR_RGB`) or changes it at a fixed rate (`COLOR_RGBA`). When it
    finishes it restores the resting colour.
  - `LinearAnimation` moves `current` at a constant velocity.
  - `RotationAnimation` turns the angle about an axis.

  `animate(delta)` returns whether the animation is still running. An
  animation whose duration is `0` or less runs without end.
- `blitzengine.camera` has `Camera`. It converts pointer pixels to normalised
  coordinates (`update_from_pixels`), clamps them to `bounds`, and can shift
  by a relative offset (`update_relative`). You can pass an optional
  `warp_pointer(x, y)` callback. The camera calls it with pixel coordinates
  whenever it moves the pointer.
- `blitzengine.units` has these classes:
  - The interfaces `Ticker`, `Painter` and `InputListener`.
  - `UnitObject`. It keeps a `State` and a list of animations.
    `update_state(delta)` advances the clock, position and angle, then runs
    the animations and drops the ones that have finished.
  - `HealthObject`, `EnergyObject` and `DamageObject`. These are unit
    subclasses with `health`, `energy` and `damage` attributes.
  - `Player`. It records pressed buttons, keys and characters, the mouse
    position and the wheel position.
- `blitzengine.randomizer` has `Randomizer`. It gives seedable uniform floats
  (`rand_float`) and integers with an inclusive upper bound (`rand_int`).
- `blitzengine.tga` decodes uncompressed (type 2) and RLE (type 10) TGA images
  of 24 or 32 bits per pixel into a `TextureInfo`. Bad data raises `TgaError`.
- `blitzengine.images` loads 24-bit BMP (`decode_bmp`, `load_bmp`), TGA
  (`load_tga`) and RGB/RGBA or palette PNG images (`load_png`, which uses
  Pillow). Each loader returns a `RawImage` with RGB or RGBA data, bottom row
  first. Bad data raises `ImageError`.
- `blitzengine.waves` has `WaveLoader`. It parses RIFF/WAVE files, either read
  whole (`load_wave_file`) or streamed from disk (`open_wave_file`,
  `read_wave_data`). It reports the format, size and frequency of each file,
  and `buffer_format` gives a buffer format name such as
  `"AL_FORMAT_STEREO16"`. Failures raise `WaveError`, which carries a
  `WaveResult`, and `error_string` turns a result into text.
- `blitzengine.devices` has `DeviceList`, a list of `DeviceInfo` entries that
  you supply. You can filter it by minimum or maximum version and by
  extension, and walk the selected devices with `first_filtered` /
  `next_filtered` or `filtered()`.

## Installation

```
pip install blitzengine
```

## Examples

Move a unit with an animation:

```python
from blitzengine.geometry import Triad
from blitzengine.state import State
from blitzengine.animation import LinearAnimation

state = State()
move = LinearAnimation(state, Triad(1.0, 0.0, 0.0), 2.0, 0.0)

state.duration += 0.5
move.animate(0.5)
print(state.current)  # 0.5, 0, 0
```

Decode an image:

```python
from blitzengine.images import load_png

image = load_png("sprite.png")
print(image.width, image.height, image.has_alpha)
```

Read a wave file:

```python
from blitzengine.waves import WaveLoader

with WaveLoader() as loader:
    wave_id = loader.load_wave_file("sound.wav")
    print(loader.frequency(wave_id), loader.wave_size(wave_id), loader.buffer_format(wave_id))
```

## What it does not do

- It does not draw anything. `UnitObject.bounding_box_vertices` returns the
  corners of the box, and it is up to you to render them.
- It has no texture, model or sound managers.
- It does not play audio. `WaveLoader` only reads and describes wave data.
- It does not detect audio hardware. You build a `DeviceList` from the
  devices that you already know about.
- It has no command-line program.

## Running the tests

```
pip install "blitzengine[test]"
pytest
```