import struct

import pytest

from lvxkit.packets import (
    HEADER_SIZE,
    DataType,
    EthPacket,
    PackDetail,
    pack_detail_from_packet,
)

TIMESTAMP = bytes(range(1, 9))


def make_packet(data_type, data, **overrides):
    fields = dict(
        version=5,
        slot=2,
        id=3,
        rsvd=0,
        err_code=0x01020304,
        timestamp_type=1,
        data_type=int(data_type),
        timestamp=TIMESTAMP,
        data=data,
    )
    fields.update(overrides)
    return EthPacket(**fields)


def test_packed_header_is_nineteen_bytes():
    detail = PackDetail(
        device_index=1,
        version=2,
        port_id=3,
        lidar_index=4,
        rsvd=0,
        error_code=5,
        timestamp_type=1,
        data_type=DataType.IMU,
        timestamp=TIMESTAMP,
        raw_point=b"\x42" * 24,
    )
    raw = detail.pack()
    assert HEADER_SIZE == 19
    assert len(raw) - len(detail.raw_point) == 19
    assert raw[19:] == b"\x42" * 24


def test_fields_are_copied_from_packet():
    packet = make_packet(DataType.IMU, b"\xaa" * 24)
    detail = pack_detail_from_packet(packet, device_index=7)
    assert detail.device_index == 7
    assert detail.version == 5
    assert detail.port_id == 2
    assert detail.lidar_index == 3
    assert detail.error_code == 0x01020304
    assert detail.timestamp_type == 1
    assert detail.data_type is DataType.IMU
    assert detail.timestamp == TIMESTAMP


def test_pack_header_layout():
    packet = make_packet(DataType.IMU, b"\x11" * 24)
    raw = pack_detail_from_packet(packet, device_index=9).pack()
    fields = struct.unpack_from("<BBBBBIBB8s", raw)
    assert fields == (9, 5, 2, 3, 0, 0x01020304, 1, int(DataType.IMU), TIMESTAMP)
    assert raw[HEADER_SIZE:] == b"\x11" * 24


@pytest.mark.parametrize("data_type", list(DataType))
def test_pack_size_is_header_plus_points(data_type):
    data = bytes(i % 256 for i in range(1500))
    detail = pack_detail_from_packet(make_packet(data_type, data), 0)
    raw = detail.pack()
    assert len(raw) == HEADER_SIZE + len(detail.raw_point)
    assert raw[HEADER_SIZE:] == data[: len(detail.raw_point)]
    assert 0 < len(detail.raw_point) <= 1500


def test_cartesian_payload_is_cut_to_fixed_points():
    data = b"\x07" * 1500
    detail = pack_detail_from_packet(make_packet(DataType.CARTESIAN, data), 0)
    assert len(detail.raw_point) == 100 * 13


def test_unknown_data_type_raises():
    packet = make_packet(DataType.CARTESIAN, b"\x00" * 1500, data_type=42)
    with pytest.raises(ValueError):
        pack_detail_from_packet(packet, 0)


def test_short_payload_raises():
    packet = make_packet(DataType.IMU, b"\x00" * 10)
    with pytest.raises(ValueError):
        pack_detail_from_packet(packet, 0)


def test_bad_timestamp_length_raises():
    with pytest.raises(ValueError):
        make_packet(DataType.IMU, b"\x00" * 24, timestamp=b"\x00" * 4)


def test_pack_detail_rejects_oversized_points():
    with pytest.raises(ValueError):
        PackDetail(
            device_index=0,
            version=0,
            port_id=0,
            lidar_index=0,
            rsvd=0,
            error_code=0,
            timestamp_type=0,
            data_type=DataType.CARTESIAN,
            timestamp=TIMESTAMP,
            raw_point=b"\x00" * 1501,
        )


def test_data_type_values_follow_protocol():
    assert DataType.CARTESIAN == 0
    assert DataType.IMU == 6
    assert DataType(8) is DataType.TRIPLE_EXTEND_SPHERICAL