"""LVX recording, extrinsic calibration and GPS RMC time-sync tools for lidar data."""

__version__ = "0.1.0"

__all__ = [
    "conflict",
    "extrinsic",
    "lvxfile",
    "options",
    "packets",
    "rmc",
    "synchro",
    "whitelist",
]