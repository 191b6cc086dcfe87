"""Point cloud packets and their LVX per-packet records."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

# device_index, version, port_id, lidar_index, rsvd, error_code,
# timestamp_type, data_type, timestamp[8]
_HEADER = struct.Struct("<BBBBBIBB8s")

HEADER_SIZE = _HEADER.size
"""Bytes in a packet record before its point data."""

MAX_POINT_BYTES = 1500
"""Largest amount of point data one record may carry."""

TIMESTAMP_SIZE = 8


class DataType(enum.IntEnum):
    """Kind of point data carried in a packet."""

    CARTESIAN = 0
    SPHERICAL = 1
    EXTEND_CARTESIAN = 2
    EXTEND_SPHERICAL = 3
    DUAL_EXTEND_CARTESIAN = 4
    DUAL_EXTEND_SPHERICAL = 5
    IMU = 6
    TRIPLE_EXTEND_CARTESIAN = 7
    TRIPLE_EXTEND_SPHERICAL = 8


# Bytes per point for each data type.
_POINT_SIZE = {
    DataType.CARTESIAN: 13,
    DataType.SPHERICAL: 9,
    DataType.EXTEND_CARTESIAN: 14,
    DataType.EXTEND_SPHERICAL: 10,
    DataType.DUAL_EXTEND_CARTESIAN: 28,
    DataType.DUAL_EXTEND_SPHERICAL: 16,
    DataType.IMU: 24,
    DataType.TRIPLE_EXTEND_CARTESIAN: 42,
    DataType.TRIPLE_EXTEND_SPHERICAL: 22,
}

# Points per packet for each data type.
_POINT_COUNT = {
    DataType.CARTESIAN: 100,
    DataType.SPHERICAL: 100,
    DataType.EXTEND_CARTESIAN: 96,
    DataType.EXTEND_SPHERICAL: 96,
    DataType.DUAL_EXTEND_CARTESIAN: 48,
    DataType.DUAL_EXTEND_SPHERICAL: 48,
    DataType.IMU: 1,
    DataType.TRIPLE_EXTEND_CARTESIAN: 30,
    DataType.TRIPLE_EXTEND_SPHERICAL: 30,
}


def _payload_size(data_type: DataType) -> int:
    return _POINT_SIZE[data_type] * _POINT_COUNT[data_type]


def _check_timestamp(timestamp: bytes) -> None:
    if len(timestamp) != TIMESTAMP_SIZE:
        raise ValueError(
            f"timestamp must be {TIMESTAMP_SIZE} bytes, got {len(timestamp)}"
        )


@dataclass(frozen=True)
class EthPacket:
    """A point cloud packet as received from a device."""

    version: int
    slot: int
    id: int
    rsvd: int
    err_code: int
    timestamp_type: int
    data_type: int
    timestamp: bytes
    data: bytes

    def __post_init__(self) -> None:
        _check_timestamp(self.timestamp)


@dataclass(frozen=True)
class PackDetail:
    """One packet record as stored in an LVX frame."""

    device_index: int
    version: int
    port_id: int
    lidar_index: int
    rsvd: int
    error_code: int
    timestamp_type: int
    data_type: DataType
    timestamp: bytes
    raw_point: bytes

    def __post_init__(self) -> None:
        _check_timestamp(self.timestamp)
        if len(self.raw_point) > MAX_POINT_BYTES:
            raise ValueError(
                f"point data exceeds {MAX_POINT_BYTES} bytes: {len(self.raw_point)}"
            )

    def pack(self) -> bytes:
        """Return the record's bytes: the fixed header followed by the points."""
        header = _HEADER.pack(
            self.device_index,
            self.version,
            self.port_id,
            self.lidar_index,
            self.rsvd,
            self.error_code,
            self.timestamp_type,
            int(self.data_type),
            bytes(self.timestamp),
        )
        return header + bytes(self.raw_point)


def pack_detail_from_packet(packet: EthPacket, device_index: int) -> PackDetail:
    """Build the LVX record for a received packet.

    The point data is cut to the fixed number of points its data type carries.
    """
    try:
        data_type = DataType(packet.data_type)
    except ValueError:
        raise ValueError(f"unknown point data type: {packet.data_type}") from None
    size = _payload_size(data_type)
    if len(packet.data) < size:
        raise ValueError(
            f"{data_type.name} packet needs {size} bytes of points, "
            f"got {len(packet.data)}"
        )
    return PackDetail(
        device_index=device_index,
        version=packet.version,
        port_id=packet.slot,
        lidar_index=packet.id,
        rsvd=packet.rsvd,
        error_code=packet.err_code,
        timestamp_type=packet.timestamp_type,
        data_type=data_type,
        timestamp=bytes(packet.timestamp),
        raw_point=bytes(packet.data[:size]),
    )