"""Receiving GPS time sentences from a serial port in the background."""

from __future__ import annotations

import enum
import threading
from typing import Callable

import serial

from .rmc import RmcParser

READ_BUFFER_SIZE = 256
_READ_TIMEOUT = 0.1


class Parity(enum.Enum):
    """Character framing of the serial line."""

    P_8N1 = "8N1"
    P_7E1 = "7E1"
    P_7O1 = "7O1"
    P_7S1 = "7S1"


class BaudRate(enum.IntEnum):
    """Supported line speeds, valued in bits per second."""

    BR2400 = 2400
    BR4800 = 4800
    BR9600 = 9600
    BR19200 = 19200
    BR38400 = 38400
    BR57600 = 57600
    BR115200 = 115200
    BR230400 = 230400
    BR460800 = 460800
    BR500000 = 500000
    BR576000 = 576000
    BR921600 = 921600
    BR1152000 = 1152000
    BR1500000 = 1500000
    BR2000000 = 2000000
    BR2500000 = 2500000
    BR3000000 = 3000000
    BR3500000 = 3500000
    BR4000000 = 4000000


_FRAMING = {
    Parity.P_8N1: (serial.EIGHTBITS, serial.PARITY_NONE),
    Parity.P_7E1: (serial.SEVENBITS, serial.PARITY_EVEN),
    Parity.P_7O1: (serial.SEVENBITS, serial.PARITY_ODD),
    # Space parity is set up the same as no parity.
    Parity.P_7S1: (serial.EIGHTBITS, serial.PARITY_NONE),
}


def serial_settings(baudrate: BaudRate, parity: Parity) -> dict[str, object]:
    """Serial port settings for a line speed and framing."""
    bytesize, parity_bit = _FRAMING[Parity(parity)]
    return {
        "baudrate": int(BaudRate(baudrate)),
        "bytesize": bytesize,
        "parity": parity_bit,
        "stopbits": serial.STOPBITS_ONE,
    }


class Synchro:
    """Reads a serial port in a thread and reports each RMC sentence found.

    ``callback`` is called from the reading thread with the sentence text.
    """

    def __init__(
        self,
        port_name: str = "",
        baudrate: BaudRate = BaudRate.BR9600,
        parity: Parity = Parity.P_8N1,
        callback: Callable[[str], None] | None = None,
    ) -> None:
        self.port_name = port_name
        self.baudrate = baudrate
        self.parity = parity
        self.callback = callback
        self._parser = RmcParser()
        self._port: serial.SerialBase | None = None
        self._thread: threading.Thread | None = None
        self._stopping = threading.Event()

    @property
    def port(self) -> serial.SerialBase | None:
        """The open serial port, or ``None`` when stopped."""
        return self._port

    @property
    def running(self) -> bool:
        return self._thread is not None

    def start(self) -> None:
        """Open the port and start reading; raises ``serial.SerialException`` if it cannot open."""
        if self._thread is not None:
            raise RuntimeError("synchro is already running")
        self._port = serial.serial_for_url(
            self.port_name,
            timeout=_READ_TIMEOUT,
            **serial_settings(self.baudrate, self.parity),
        )
        self._parser.clear()
        self._stopping.clear()
        self._thread = threading.Thread(target=self._read_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop reading and close the port."""
        self._stopping.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        if self._port is not None:
            self._port.reset_input_buffer()
            self._port.reset_output_buffer()
            self._port.close()
            self._port = None

    def _read_loop(self) -> None:
        port = self._port
        while not self._stopping.is_set():
            data = port.read(READ_BUFFER_SIZE)
            if not data:
                continue
            for sentence in self._parser.decode(data):
                if self.callback is not None:
                    self.callback(sentence)

    def __enter__(self) -> Synchro:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()