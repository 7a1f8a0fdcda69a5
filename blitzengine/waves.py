"""Reading of RIFF/WAVE files, loaded whole or streamed from disk."""

from __future__ import annotations

import enum
import os
import struct
from dataclasses import dataclass, replace
from typing import BinaryIO, Dict, Optional, Union

MAX_NUM_WAVEID = 1024

WAVE_FORMAT_PCM = 0x0001
WAVE_FORMAT_EXTENSIBLE = 0xFFFE

SPEAKER_FRONT_LEFT = 0x1
SPEAKER_FRONT_RIGHT = 0x2
SPEAKER_FRONT_CENTER = 0x4
SPEAKER_LOW_FREQUENCY = 0x8
SPEAKER_BACK_LEFT = 0x10
SPEAKER_BACK_RIGHT = 0x20
SPEAKER_BACK_CENTER = 0x100
SPEAKER_SIDE_LEFT = 0x200
SPEAKER_SIDE_RIGHT = 0x400

_FMT_LAYOUT = struct.Struct("<HHIIHHHHI16s")
_FMT_SIZE = _FMT_LAYOUT.size  # 40 bytes, the largest format block understood
_CHUNK_HEADER = struct.Struct("<4sI")

PathLike = Union[str, os.PathLike]


class WaveResult(enum.IntEnum):
    OK = 0
    INVALIDFILENAME = -1
    BADWAVEFILE = -2
    INVALIDPARAM = -3
    INVALIDWAVEID = -4
    NOTSUPPORTEDYET = -5
    WAVEMUSTBEMONO = -6
    WAVEMUSTBEWAVEFORMATPCM = -7
    WAVESMUSTHAVESAMEBITRESOLUTION = -8
    WAVESMUSTHAVESAMEFREQUENCY = -9
    WAVESMUSTHAVESAMEBITRATE = -10
    WAVESMUSTHAVESAMEBLOCKALIGNMENT = -11
    OFFSETOUTOFDATARANGE = -12
    FILEERROR = -13
    OUTOFMEMORY = -14
    INVALIDSPEAKERPOS = -15
    INVALIDWAVEFILETYPE = -16
    NOTWAVEFORMATEXTENSIBLEFORMAT = -17


_MESSAGES = {
    WaveResult.OK: "Success",
    WaveResult.INVALIDFILENAME: "Invalid file name or file does not exist",
    WaveResult.BADWAVEFILE: "Invalid Wave file",
    WaveResult.INVALIDPARAM: "Invalid parameter passed to function",
    WaveResult.FILEERROR: "File I/O error",
    WaveResult.INVALIDWAVEID: "Invalid WAVEID",
    WaveResult.NOTSUPPORTEDYET: "Function not supported yet",
    WaveResult.WAVEMUSTBEMONO: "Input wave files must be mono",
    WaveResult.WAVEMUSTBEWAVEFORMATPCM: "Input wave files must be in Wave Format PCM",
    WaveResult.WAVESMUSTHAVESAMEBITRESOLUTION: "Input wave files must have the same Bit Resolution",
    WaveResult.WAVESMUSTHAVESAMEFREQUENCY: "Input wave files must have the same Frequency",
    WaveResult.WAVESMUSTHAVESAMEBITRATE: "Input wave files must have the same Bit Rate",
    WaveResult.WAVESMUSTHAVESAMEBLOCKALIGNMENT: "Input wave files must have the same Block Alignment",
    WaveResult.OFFSETOUTOFDATARANGE: "Wave files Offset is not within audio data",
    WaveResult.INVALIDSPEAKERPOS: "Invalid Speaker Destinations",
    WaveResult.OUTOFMEMORY: "Out of memory",
    WaveResult.INVALIDWAVEFILETYPE: "Invalid Wave File Type",
    WaveResult.NOTWAVEFORMATEXTENSIBLEFORMAT: "Wave file is not in WAVEFORMATEXTENSIBLE format",
}


def error_string(result: Union[WaveResult, int]) -> str:
    """A readable description of a wave result code."""
    try:
        return _MESSAGES[WaveResult(result)]
    except (ValueError, KeyError):
        return "Undefined error"


class WaveError(Exception):
    """Raised when a wave operation fails; ``result`` holds the reason."""

    def __init__(self, result: WaveResult) -> None:
        self.result = WaveResult(result)
        super().__init__(error_string(self.result))


class WaveFileType(enum.IntEnum):
    EX = 1
    EXT = 2


@dataclass(frozen=True)
class WaveFormat:
    """The format block of a wave file; extensible fields are zero for plain PCM."""

    format_tag: int = 0
    channels: int = 0
    samples_per_sec: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    extra_size: int = 0
    valid_bits_per_sample: int = 0
    channel_mask: int = 0
    sub_format: bytes = bytes(16)

    @classmethod
    def _unpack(cls, raw: bytes) -> "WaveFormat":
        return cls(*_FMT_LAYOUT.unpack(raw.ljust(_FMT_SIZE, b"\0")[:_FMT_SIZE]))

    def _basic(self) -> "WaveFormat":
        return replace(self, valid_bits_per_sample=0, channel_mask=0, sub_format=bytes(16))


@dataclass
class _WaveInfo:
    wave_type: WaveFileType
    format: WaveFormat
    data_size: int
    data_offset: int
    handle: Optional[BinaryIO] = None
    data: Optional[bytes] = None

    def close(self) -> None:
        if self.handle is not None:
            self.handle.close()
            self.handle = None


def _parse(path: PathLike) -> _WaveInfo:
    try:
        handle = open(path, "rb")
    except (OSError, TypeError, ValueError):
        raise WaveError(WaveResult.INVALIDFILENAME) from None
    try:
        header = handle.read(12)
        if len(header) < 12 or header[:4].lower() != b"riff" or header[8:12].lower() != b"wave":
            raise WaveError(WaveResult.BADWAVEFILE)

        wave_type: Optional[WaveFileType] = None
        fmt = WaveFormat()
        data_size = 0
        data_offset = 0
        while True:
            head = handle.read(_CHUNK_HEADER.size)
            if len(head) < _CHUNK_HEADER.size:
                break
            name, size = _CHUNK_HEADER.unpack(head)
            name = name.lower()
            if name == b"fmt " and size <= _FMT_SIZE:
                parsed = WaveFormat._unpack(handle.read(size))
                if parsed.format_tag == WAVE_FORMAT_PCM:
                    wave_type = WaveFileType.EX
                    # Only the PCM fields are meaningful here.
                    fmt = replace(parsed._basic(), extra_size=0)
                elif parsed.format_tag == WAVE_FORMAT_EXTENSIBLE:
                    wave_type = WaveFileType.EXT
                    fmt = parsed
            elif name == b"data":
                data_size = size
                data_offset = handle.tell()
                handle.seek(size, os.SEEK_CUR)
            else:
                handle.seek(size, os.SEEK_CUR)
            # Chunks are word aligned.
            if size & 1:
                handle.seek(1, os.SEEK_CUR)

        if not (data_size and data_offset and wave_type is not None):
            raise WaveError(WaveResult.BADWAVEFILE)
        return _WaveInfo(wave_type, fmt, data_size, data_offset, handle)
    except BaseException:
        handle.close()
        raise


class WaveLoader:
    """Keeps up to ``MAX_NUM_WAVEID`` wave files, each addressed by an integer id."""

    def __init__(self) -> None:
        self._waves: Dict[int, _WaveInfo] = {}

    def __enter__(self) -> "WaveLoader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _insert(self, info: _WaveInfo) -> int:
        for wave_id in range(MAX_NUM_WAVEID):
            if wave_id not in self._waves:
                self._waves[wave_id] = info
                return wave_id
        raise WaveError(WaveResult.OUTOFMEMORY)

    def _get(self, wave_id: int) -> _WaveInfo:
        if not self.is_wave_id(wave_id):
            raise WaveError(WaveResult.INVALIDWAVEID)
        return self._waves[wave_id]

    def load_wave_file(self, path: PathLike) -> int:
        """Read a whole wave file into memory and return its id."""
        info = _parse(path)
        try:
            assert info.handle is not None
            info.handle.seek(info.data_offset)
            data = info.handle.read(info.data_size)
            if len(data) != info.data_size:
                raise WaveError(WaveResult.BADWAVEFILE)
            info.data = data
            return self._insert(info)
        finally:
            info.close()

    def open_wave_file(self, path: PathLike) -> int:
        """Open a wave file for streaming and return its id."""
        info = _parse(path)
        try:
            return self._insert(info)
        except BaseException:
            info.close()
            raise

    def read_wave_data(self, wave_id: int, size: int) -> bytes:
        """Read up to ``size`` bytes of audio from a streamed wave."""
        if size <= 0:
            raise WaveError(WaveResult.INVALIDPARAM)
        info = self._get(wave_id)
        if info.handle is None:
            raise WaveError(WaveResult.BADWAVEFILE)
        position = info.handle.tell() - info.data_offset
        if position + size > info.data_size:
            size = max(0, info.data_size - position)
        return info.handle.read(size)

    def set_wave_data_offset(self, wave_id: int, offset: int) -> None:
        """Move a streamed wave to ``offset`` bytes into its audio data."""
        info = self._get(wave_id)
        if info.handle is None:
            raise WaveError(WaveResult.INVALIDPARAM)
        info.handle.seek(info.data_offset + offset)

    def get_wave_data_offset(self, wave_id: int) -> int:
        """The current position of a streamed wave within its audio data."""
        info = self._get(wave_id)
        if info.handle is None:
            raise WaveError(WaveResult.INVALIDPARAM)
        return info.handle.tell() - info.data_offset

    def wave_type(self, wave_id: int) -> WaveFileType:
        return self._get(wave_id).wave_type

    def format_header(self, wave_id: int) -> WaveFormat:
        """The basic format fields, without the extensible part."""
        return self._get(wave_id).format._basic()

    def extensible_header(self, wave_id: int) -> WaveFormat:
        """The full extensible format; only for extensible files."""
        info = self._get(wave_id)
        if info.wave_type is not WaveFileType.EXT:
            raise WaveError(WaveResult.NOTWAVEFORMATEXTENSIBLEFORMAT)
        return info.format

    def wave_data(self, wave_id: int) -> Optional[bytes]:
        """The audio of a loaded wave; ``None`` for a streamed one."""
        return self._get(wave_id).data

    def wave_size(self, wave_id: int) -> int:
        return self._get(wave_id).data_size

    def frequency(self, wave_id: int) -> int:
        return self._get(wave_id).format.samples_per_sec

    def buffer_format(self, wave_id: int) -> str:
        """The name of the audio buffer format matching the wave's layout."""
        info = self._get(wave_id)
        fmt = info.format
        channels = fmt.channels
        sixteen = fmt.bits_per_sample == 16
        mask = fmt.channel_mask
        front = SPEAKER_FRONT_LEFT | SPEAKER_FRONT_RIGHT
        back = SPEAKER_BACK_LEFT | SPEAKER_BACK_RIGHT
        surround = front | SPEAKER_FRONT_CENTER | SPEAKER_LOW_FREQUENCY | back
        name: Optional[str] = None

        if info.wave_type is WaveFileType.EX:
            if channels == 1:
                name = "AL_FORMAT_MONO16" if sixteen else "AL_FORMAT_MONO8"
            elif channels == 2:
                name = "AL_FORMAT_STEREO16" if sixteen else "AL_FORMAT_STEREO8"
            elif channels == 4 and sixteen:
                name = "AL_FORMAT_QUAD16"
        elif info.wave_type is WaveFileType.EXT:
            if channels == 1 and mask == SPEAKER_FRONT_CENTER:
                name = "AL_FORMAT_MONO16" if sixteen else "AL_FORMAT_MONO8"
            elif channels == 2 and mask == front:
                name = "AL_FORMAT_STEREO16" if sixteen else "AL_FORMAT_STEREO8"
            elif channels == 2 and sixteen and mask == back:
                name = "AL_FORMAT_REAR16"
            elif channels == 4 and sixteen and mask == front | back:
                name = "AL_FORMAT_QUAD16"
            elif channels == 6 and sixteen and mask == surround:
                name = "AL_FORMAT_51CHN16"
            elif channels == 7 and sixteen and mask == surround | SPEAKER_BACK_CENTER:
                name = "AL_FORMAT_61CHN16"
            elif channels == 8 and sixteen and mask == surround | SPEAKER_SIDE_LEFT | SPEAKER_SIDE_RIGHT:
                name = "AL_FORMAT_71CHN16"

        if name is None:
            raise WaveError(WaveResult.INVALIDWAVEFILETYPE)
        return name

    def delete_wave_file(self, wave_id: int) -> None:
        """Release a wave and free its id."""
        self._get(wave_id).close()
        del self._waves[wave_id]

    def is_wave_id(self, wave_id: int) -> bool:
        return 0 <= wave_id < MAX_NUM_WAVEID and wave_id in self._waves

    def close(self) -> None:
        """Release every wave."""
        for info in self._waves.values():
            info.close()
        self._waves.clear()