"""Writer for LVX point cloud recordings."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Iterable

from .packets import PackDetail

MAGIC_CODE = 0xAC0EA767
SIGNATURE = b"livox_tech"
FILE_VERSION = bytes((1, 1, 0, 0))
DEFAULT_FRAME_DURATION = 50
BROADCAST_CODE_SIZE = 16
MAX_DEVICE_COUNT = 255

# signature[16], version[4], magic_code
_PUBLIC_HEADER = struct.Struct("<16s4sI")
# frame_duration, device_count
_PRIVATE_HEADER = struct.Struct("<IB")
# lidar code[16], hub code[16], device_index, device_type, extrinsic_enable,
# roll, pitch, yaw, x, y, z
_DEVICE_INFO = struct.Struct("<16s16sBBBffffff")
# current_offset, next_offset, frame_index
_FRAME_HEADER = struct.Struct("<QQQ")


def _code_bytes(code: str | bytes) -> bytes:
    raw = code.encode("ascii") if isinstance(code, str) else bytes(code)
    if len(raw) > BROADCAST_CODE_SIZE:
        raise ValueError(
            f"broadcast code longer than {BROADCAST_CODE_SIZE} bytes: {code!r}"
        )
    return raw


@dataclass(frozen=True)
class LvxDeviceInfo:
    """Description of one device recorded in an LVX file."""

    lidar_broadcast_code: str
    hub_broadcast_code: str = ""
    device_index: int = 0
    device_type: int = 0
    extrinsic_enable: bool = False
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def pack(self) -> bytes:
        """Return the device record as stored in the file header."""
        return _DEVICE_INFO.pack(
            _code_bytes(self.lidar_broadcast_code),
            _code_bytes(self.hub_broadcast_code),
            self.device_index,
            self.device_type,
            int(bool(self.extrinsic_enable)),
            self.roll,
            self.pitch,
            self.yaw,
            self.x,
            self.y,
            self.z,
        )


@dataclass(frozen=True)
class FrameHeader:
    """Header placed in front of every frame of packet records."""

    current_offset: int
    next_offset: int
    frame_index: int

    def pack(self) -> bytes:
        """Return the frame header's bytes."""
        return _FRAME_HEADER.pack(self.current_offset, self.next_offset, self.frame_index)


def default_filename(now: datetime) -> str:
    """Name a recording after the local time it was started."""
    return now.strftime("%Y-%m-%d_%H-%M-%S.lvx")


class LvxFileWriter:
    """Writes an LVX file: a header describing the devices, then frames."""

    def __init__(
        self,
        path: str | Path | None = None,
        frame_duration: int = DEFAULT_FRAME_DURATION,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.frame_duration = frame_duration
        self.devices: list[LvxDeviceInfo] = []
        self.offset = 0
        self.frame_index = 0
        self._file: BinaryIO | None = None

    @property
    def closed(self) -> bool:
        return self._file is None

    def add_device_info(self, info: LvxDeviceInfo) -> None:
        """Register a device to be listed in the file header."""
        if len(self.devices) >= MAX_DEVICE_COUNT:
            raise ValueError(f"at most {MAX_DEVICE_COUNT} devices can be recorded")
        self.devices.append(info)

    def open(self) -> Path:
        """Create the output file; without a path it is named after the current time."""
        if self._file is not None:
            raise ValueError("file is already open")
        if self.path is None:
            self.path = Path(default_filename(datetime.now()))
        self._file = open(self.path, "wb")
        return self.path

    def _stream(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("file is not open")
        return self._file

    def write_header(self) -> None:
        """Write the public and private headers and the device records."""
        stream = self._stream()
        parts = [
            _PUBLIC_HEADER.pack(SIGNATURE, FILE_VERSION, MAGIC_CODE),
            _PRIVATE_HEADER.pack(self.frame_duration, len(self.devices)),
        ]
        parts.extend(info.pack() for info in self.devices)
        data = b"".join(parts)
        stream.write(data)
        self.offset += len(data)

    def save_frame(self, packets: Iterable[PackDetail]) -> FrameHeader:
        """Write one frame holding the given packet records and return its header."""
        stream = self._stream()
        records = [packet.pack() for packet in packets]
        start = self.offset
        header = FrameHeader(
            current_offset=start,
            next_offset=start + _FRAME_HEADER.size + sum(map(len, records)),
            frame_index=self.frame_index,
        )
        stream.write(header.pack())
        for record in records:
            stream.write(record)
        self.offset = header.next_offset
        self.frame_index += 1
        return header

    def close(self) -> None:
        """Close the file if it is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> LvxFileWriter:
        if self._file is None:
            self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()