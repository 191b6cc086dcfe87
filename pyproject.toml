[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lvxkit"
version = "0.1.0"
description = "Write LVX point-cloud recordings, read extrinsic calibration and decode GPS RMC sentences for lidar time sync"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["lidar", "lvx", "point cloud", "nmea", "gprmc", "time synchronization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lvxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
