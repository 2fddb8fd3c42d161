from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .errors import BusError, ConfigurationError

logger = logging.getLogger(__name__)


class I2CDevice(Protocol):
    """What the LCD driver needs from an I2C bus.

    Exceptions raised by `i2c_write` are passed through the driver unchanged.
    """

    def i2c_write(self, address_7bit: int, data: bytes) -> None: ...


_WRITE_METHODS = ("I2C_write", "i2c_write", "I2C_Write", "i2c_writeto")
_READ_METHODS = ("I2C_read", "i2c_read", "I2C_Read", "i2c_readfrom")
_SPEED_METHODS = ("I2C_Init", "I2C_speed", "i2c_setspeed", "i2c_set_speed", "I2C_SetSpeed")


def _check_address(address_7bit: int) -> None:
    if not (0 <= address_7bit <= 0x7F):
        raise ConfigurationError(f"I2C 7-bit address must be 0..0x7F, got 0x{address_7bit:02X}")


@dataclass(slots=True)
class MCP2221AI2C:
    """I2C through an MCP2221A USB bridge, via PyMCP2221A.

    PyMCP2221A has been published under a few module/class shapes and method
    spellings; `open()` and the transfer methods accept any of them.
    """

    i2c_speed_hz: int = 100_000
    _dev: Optional[object] = None

    def open(self) -> "MCP2221AI2C":
        if self._dev is not None:
            return self

        errors: list[Exception] = []
        for importer in (self._import_style_a, self._import_style_b, self._import_style_c):
            try:
                self._dev = importer()
                break
            except (ImportError, AttributeError, OSError) as exc:
                errors.append(exc)

        if self._dev is None:
            raise BusError(
                "Could not initialize MCP2221A via PyMCP2221A. "
                "Please verify the package is installed and the bridge is plugged in."
            ) from (errors[-1] if errors else None)

        self._configure_speed()
        logger.info("MCP2221A opened (%s, %d Hz)", type(self._dev).__name__, self.i2c_speed_hz)
        return self

    @staticmethod
    def _import_style_a() -> object:
        from PyMCP2221A import PyMCP2221A  # type: ignore

        return PyMCP2221A.PyMCP2221A()

    @staticmethod
    def _import_style_b() -> object:
        from PyMCP2221A import MCP2221A  # type: ignore

        return MCP2221A.MCP2221A()

    @staticmethod
    def _import_style_c() -> object:
        from pymcp2221a import MCP2221A  # type: ignore

        return MCP2221A()

    def _configure_speed(self) -> None:
        method = self._find(_SPEED_METHODS)
        if method is None:
            logger.debug("MCP2221A backend has no speed setter, using its default")
            return
        try:
            method(self.i2c_speed_hz)
        except TypeError:
            # Some variants want kHz.
            method(int(self.i2c_speed_hz / 1000))

    def _find(self, names: tuple[str, ...]) -> Optional[Callable[..., object]]:
        for name in names:
            method = getattr(self._dev, name, None)
            if callable(method):
                return method
        return None

    def _require(self, names: tuple[str, ...]) -> Callable[..., object]:
        if self._dev is None:
            raise BusError("MCP2221AI2C not opened. Call .open() first.")
        method = self._find(names)
        if method is None:
            raise BusError(f"PyMCP2221A object has none of {', '.join(names)}")
        return method

    def i2c_write(self, address_7bit: int, data: bytes) -> None:
        _check_address(address_7bit)
        method = self._require(_WRITE_METHODS)
        try:
            method(address_7bit, data)
        except TypeError:
            # Some APIs want list of ints.
            method(address_7bit, list(data))

    def i2c_read(self, address_7bit: int, length: int) -> bytes:
        _check_address(address_7bit)
        if length <= 0:
            raise ConfigurationError(f"length must be > 0, got {length}")

        out = self._require(_READ_METHODS)(address_7bit, length)
        if isinstance(out, int):
            # PyMCP2221A returns -1 when nothing acknowledges.
            raise OSError(f"no ACK from 0x{address_7bit:02X} (backend returned {out})")
        if isinstance(out, (bytes, bytearray)):
            return bytes(out)
        if isinstance(out, memoryview):
            return out.tobytes()
        if isinstance(out, (list, tuple)):
            return bytes(int(x) & 0xFF for x in out)
        raise BusError(f"Unrecognized I2C read return type: {type(out)!r}")

    def scan(self, first: int = 0x03, last: int = 0x77) -> list[int]:
        """Addresses that acknowledge a one-byte read.

        A read is used so the PCF8574 output latch is left alone.
        """
        self._require(_READ_METHODS)
        found: list[int] = []
        for addr in range(first, last + 1):
            try:
                self.i2c_read(addr, 1)
            except BusError:
                raise
            except (OSError, RuntimeError) as exc:
                logger.debug("no ack at 0x%02X: %s", addr, exc)
                continue
            found.append(addr)
        return found
