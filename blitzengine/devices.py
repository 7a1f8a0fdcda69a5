"""A filterable list of audio output devices and their capabilities."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass
class DeviceInfo:
    """One audio device: its name, version, source limit and extensions."""

    name: str
    major_version: int = 0
    minor_version: int = 0
    source_count: int = 0
    extensions: Tuple[str, ...] = ()
    selected: bool = field(default=True, compare=False)

    def supports(self, extension: str) -> bool:
        """Whether ``extension`` is listed, ignoring case."""
        wanted = extension.casefold()
        return any(ext.casefold() == wanted for ext in self.extensions)


class DeviceList:
    """Devices in enumeration order, with filters that deselect some of them.

    Entries with an empty name or a name already seen are dropped. The
    default device index is the position of ``default_name`` among the
    devices as given, before any were dropped, or 0 if it is not found.
    """

    def __init__(self, devices: Iterable[DeviceInfo] = (), default_name: Optional[str] = None) -> None:
        self._devices: List[DeviceInfo] = []
        self.default_device = 0
        seen = set()
        for index, device in enumerate(devices):
            if default_name is not None and device.name == default_name:
                self.default_device = index
            if device.name and device.name not in seen:
                seen.add(device.name)
                self._devices.append(
                    replace(device, extensions=tuple(device.extensions), selected=True)
                )
        self._filter_index = 0
        self.reset_filters()

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[DeviceInfo]:
        return iter(self._devices)

    def _device(self, index: int) -> Optional[DeviceInfo]:
        if 0 <= index < len(self._devices):
            return self._devices[index]
        return None

    def device_name(self, index: int) -> Optional[str]:
        """The name at ``index``, or ``None`` when out of range."""
        device = self._device(index)
        return device.name if device is not None else None

    def device_version(self, index: int) -> Optional[Tuple[int, int]]:
        """``(major, minor)`` at ``index``, or ``None`` when out of range."""
        device = self._device(index)
        if device is None:
            return None
        return device.major_version, device.minor_version

    def max_sources(self, index: int) -> int:
        """The number of sources the device can create; 0 when out of range."""
        device = self._device(index)
        return device.source_count if device is not None else 0

    def is_extension_supported(self, index: int, name: str) -> bool:
        device = self._device(index)
        return device is not None and device.supports(name)

    def filter_min_version(self, major: int, minor: int) -> None:
        """Deselect devices older than ``major.minor``."""
        for device in self._devices:
            if (device.major_version, device.minor_version) < (major, minor):
                device.selected = False

    def filter_max_version(self, major: int, minor: int) -> None:
        """Deselect devices newer than ``major.minor``."""
        for device in self._devices:
            if (device.major_version, device.minor_version) > (major, minor):
                device.selected = False

    def filter_extension(self, name: str) -> None:
        """Deselect devices without the named extension."""
        for device in self._devices:
            if not device.supports(name):
                device.selected = False

    def reset_filters(self) -> None:
        """Select every device again."""
        for device in self._devices:
            device.selected = True
        self._filter_index = 0

    def _next_from(self, start: int) -> int:
        index = next(
            (i for i in range(start, len(self._devices)) if self._devices[i].selected),
            len(self._devices),
        )
        self._filter_index = index + 1
        return index

    def first_filtered(self) -> int:
        """Index of the first selected device; ``len(self)`` if there is none."""
        return self._next_from(0)

    def next_filtered(self) -> int:
        """Index of the next selected device; ``len(self)`` when exhausted."""
        return self._next_from(self._filter_index)

    def filtered(self) -> Iterator[int]:
        """Indices of all selected devices, in order."""
        return (i for i, device in enumerate(self._devices) if device.selected)