"""Core pieces of a small game engine: geometry, unit state, animations, camera, units, image and wave loaders, and an audio device list."""

__version__ = "0.1.0"