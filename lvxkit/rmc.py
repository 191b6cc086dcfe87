"""Extraction of GPRMC/GNRMC sentences from a serial byte stream."""

from __future__ import annotations

import re

RMC_BUFFER_SIZE = 128
"""Longest sentence, in bytes, the parser will hold."""

_HEADERS = (b"$GPRMC", b"$GNRMC")
_HEADER_LEN = 6
_STAR = ord("*")
_HEX_PREFIX = re.compile(r"\s*([0-9a-fA-F]*)")


def _hex_prefix(raw: bytes) -> int:
    """Value of the leading hexadecimal digits; 0 when there are none."""
    text = raw.split(b"\0", 1)[0].decode("latin-1")
    digits = _HEX_PREFIX.match(text).group(1)
    return int(digits, 16) if digits else 0


class RmcParser:
    """Finds checksummed ``$GPRMC`` and ``$GNRMC`` sentences in a byte stream.

    Bytes are scanned until a sentence header appears; the sentence is then
    collected until the two digits after ``*`` match the XOR of the bytes
    between ``$`` and ``*``.
    """

    def __init__(self) -> None:
        self._buffer = bytearray(RMC_BUFFER_SIZE)
        self._length = 0

    def clear(self) -> None:
        """Drop any partly collected sentence."""
        self._length = 0
        self._buffer[:] = bytes(RMC_BUFFER_SIZE)

    def feed(self, byte: int) -> str | None:
        """Take one byte; return the sentence it completes, if any."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte value: {byte}")
        buf = self._buffer
        if self._length < _HEADER_LEN:
            buf[0 : _HEADER_LEN - 1] = buf[1:_HEADER_LEN]
            buf[_HEADER_LEN - 1] = byte
            self._length += 1
            if self._length == _HEADER_LEN and bytes(buf[:_HEADER_LEN]) not in _HEADERS:
                self._length -= 1
            return None

        if self._length >= RMC_BUFFER_SIZE:
            self.clear()
            return None

        end = self._length
        buf[end] = byte
        if buf[end - 2] == _STAR:
            result = 0
            for value in buf[1 : end - 2]:
                result ^= value
            result ^= _hex_prefix(bytes(buf[end - 1 : end + 1])) & 0xFF
            if result == 0:
                sentence = bytes(buf[: end + 1]).decode("latin-1")
                self.clear()
                return sentence
        self._length += 1
        return None

    def decode(self, data: bytes) -> list[str]:
        """Take a chunk of bytes; return every sentence completed within it."""
        return [sentence for byte in data if (sentence := self.feed(byte)) is not None]