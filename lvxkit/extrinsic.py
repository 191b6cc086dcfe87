"""Reading per-device extrinsic parameters from an XML file."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from .lvxfile import BROADCAST_CODE_SIZE, LvxDeviceInfo

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_PARAMETERS = ("roll", "pitch", "yaw", "x", "y", "z")


def _atof(text: str) -> float:
    """Read the leading number of a string; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def parse_extrinsic_xml(
    path: str | Path,
    broadcast_code: str,
    device_type: int,
    device_index: int,
) -> LvxDeviceInfo | None:
    """Look up a device's extrinsic parameters.

    The file has a ``Livox`` root whose ``Device`` children carry a broadcast
    code as text and the parameters as attributes. Returns ``None`` when no
    device matches; the last matching entry wins.
    """
    root = ET.parse(path).getroot()
    if root.tag != "Livox":
        return None
    wanted = broadcast_code[:BROADCAST_CODE_SIZE]
    result = None
    for device in root:
        if device.tag != "Device":
            continue
        code = (device.text or "").strip()
        if code[:BROADCAST_CODE_SIZE] != wanted:
            continue
        values = {
            name: _atof(device.attrib[name])
            for name in _PARAMETERS
            if name in device.attrib
        }
        result = LvxDeviceInfo(
            lidar_broadcast_code=code[:BROADCAST_CODE_SIZE],
            hub_broadcast_code="",
            device_index=device_index,
            device_type=device_type,
            extrinsic_enable=True,
            **values,
        )
    return result