# lvxkit

Building blocks for recording lidar point-cloud data:

- writing **LVX** recording files (public and private headers, per-device
  records, frame headers and packet records);
- reading per-device extrinsic calibration from an XML file;
- finding checksummed `$GPRMC` / `$GNRMC` sentences in a GPS receiver's
  serial stream, for time synchronisation;
- keeping a whitelist of device broadcast codes, parsing recorder options
  and spotting two broadcast codes seen at one IP address.

Serial-port access uses `pyserial`.

## Modules

### `lvxkit.packets`

`DataType` enumerates the point-data layouts (Cartesian, spherical,
extended, dual- and triple-return variants, IMU). `EthPacket` holds one
packet as received from a device. `pack_detail_from_packet(packet,
device_index)` turns it into a `PackDetail`, keeping exactly the number of
point bytes its data type carries; it raises `ValueError` for an unknown
data type or too little point data. `PackDetail.pack()` returns the record's
bytes: a fixed little-endian header followed by the point data.

### `lvxkit.lvxfile`

`LvxFileWriter` writes a recording. Register devices with
`add_device_info()` (an `LvxDeviceInfo`), then `open()` the file,
`write_header()`, and call `save_frame(packets)` once per frame. Each frame
starts with a `FrameHeader` holding its own offset, the offset of the next
frame and a running frame index; `save_frame` returns that header. Without
a path, `open()` names the file with `default_filename(now)`, in the form
`YYYY-MM-DD_HH-MM-SS.lvx`. The writer is a context manager that opens the
file on entry if needed and closes it on exit:

```python
from lvxkit.lvxfile import LvxDeviceInfo, LvxFileWriter

with LvxFileWriter("capture.lvx") as writer:
    writer.add_device_info(LvxDeviceInfo("000000000000001"))
    writer.write_header()
    for packets in frames:
        writer.save_frame(packets)
```

### `lvxkit.extrinsic`

`parse_extrinsic_xml(path, broadcast_code, device_type, device_index)`
looks for a `<Device>` entry under a `<Livox>` root whose text is the
broadcast code, and returns an `LvxDeviceInfo` with its `roll`, `pitch`,
`yaw`, `x`, `y` and `z` attributes and `extrinsic_enable` set. It returns
`None` when nothing matches.

### `lvxkit.rmc`

`RmcParser` finds RMC sentences in a byte stream. `feed(byte)` returns the
sentence a byte completes, or `None`; `decode(data)` returns every sentence
completed within a chunk. A sentence is accepted only when its `*hh`
checksum matches. `clear()` drops a partly collected sentence.

### `lvxkit.synchro`

`Synchro` opens a serial port (any `pyserial` port name or URL), reads it on
a background thread and calls its callback with each RMC sentence found.
`start()` opens the port and starts reading; `stop()` ends the thread and
closes the port. It can also be used as a context manager. `BaudRate` and
`Parity` name the supported settings, and `serial_settings(baudrate,
parity)` returns the matching `pyserial` parameters.

### `lvxkit.whitelist`

`Whitelist` is an ordered set of broadcast codes; when empty,
`auto_connect` is true. `add()` raises `ValueError` for a code that is too
long, already listed, or past the capacity. `add_local_codes()` adds the
codes that pass `is_valid_local_code()` and returns those added. Supports
`in`, `len()` and iteration.

### `lvxkit.options`

`parse_options(argv)` reads `-c/--code`, `-l/--log`, `-t/--time` and
`-p/--param` into a `ProgramOptions`. `split_broadcast_codes(text)` splits
codes joined with `&`:

```python
from lvxkit.options import split_broadcast_codes

split_broadcast_codes("000000000000001&000000000000002")
# ['000000000000001', '000000000000002']
```

### `lvxkit.conflict`

`BroadcastConflictDetector.observe(ip, code)` remembers the first code seen
at each IP address and returns a `Conflict` when a different code later
appears at the same address.

## What it does not do

lvxkit does not discover, connect to or configure lidar devices over the
network, and does not receive point-cloud packets itself: the caller
supplies packets, device details and broadcasts. It installs no
command-line program.