"""Non-blocking byte source backed by a pyserial port."""
from __future__ import annotations

import logging
from typing import Optional

import serial

__all__ = ["DEFAULT_BAUD", "SerialByteSource", "SourceUnavailableError"]

LOG = logging.getLogger(__name__)

DEFAULT_BAUD = 115200


class SourceUnavailableError(OSError):
    """The device could not be opened or configured."""


class SerialByteSource:
    """
    Raw 8N1 serial port opened with ``timeout=0``:
    - ``read`` returns whatever is buffered (possibly ``b""``) and never waits.
    - no software or hardware flow control.
    """

    def __init__(self, port: str, baud: int = DEFAULT_BAUD):
        self.port = port
        self.baud = int(baud)
        self._ser: Optional[serial.Serial] = None

    def open(self) -> "SerialByteSource":
        if self._ser is not None and self._ser.is_open:
            return self
        try:
            self._ser = serial.Serial(
                self.port,
                self.baud,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=0,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
            )
        except (serial.SerialException, ValueError) as exc:
            raise SourceUnavailableError(f"cannot open {self.port}: {exc}") from exc
        LOG.info("Opened %s @ %d baud", self.port, self.baud)
        return self

    @property
    def is_open(self) -> bool:
        return self._ser is not None and self._ser.is_open

    def read(self, size: int) -> bytes:
        if self._ser is None:
            raise SourceUnavailableError(f"{self.port} is not open")
        return self._ser.read(size)

    def close(self) -> None:
        if self._ser is None:
            return
        try:
            if self._ser.is_open:
                self._ser.close()
                LOG.info("Closed %s", self.port)
        finally:
            self._ser = None

    def __enter__(self) -> "SerialByteSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
