from __future__ import annotations

import time
from typing import Callable

from .commands import hi_nibble, lo_nibble
from .mcp2221a_i2c import I2CDevice
from .pins import VARIANT_A, PinMapping


class PCF8574Transport:
    """4-bit HD44780 bus framed onto single-byte PCF8574 writes.

    Every nibble is one transaction of three writes (stable, E high, stable),
    each followed by `settle_s`. The backlight bit rides along in every byte,
    since the PCF8574 has no separate channel for it.
    """

    def __init__(
        self,
        i2c: I2CDevice,
        address_7bit: int,
        mapping: PinMapping = VARIANT_A,
        *,
        settle_s: float = 0.001,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._i2c = i2c
        self._address = address_7bit
        self._mapping = mapping
        self._settle_s = settle_s
        self._sleep = sleep

        self._backlight_mask = 0x00

    @property
    def address_7bit(self) -> int:
        return self._address

    def frame(self, nibble: int, is_data: bool) -> int:
        """Control byte presenting `nibble` on D4..D7 with RS and backlight."""
        state = (nibble & 0x0F) << 4
        if is_data:
            state |= self._mapping.rs_mask
        return state | self._backlight_mask

    def send_nibble(self, nibble: int, is_data: bool) -> None:
        state = self.frame(nibble, is_data)
        for value in (state, state | self._mapping.e_mask, state):
            self._write_pcf(value)
            self._sleep(self._settle_s)

    def send_byte(self, value: int, is_data: bool) -> None:
        self.send_nibble(hi_nibble(value), is_data)
        self.send_nibble(lo_nibble(value), is_data)

    # --- backlight ---

    def enable_backlight(self) -> None:
        self._backlight_mask = self._mapping.bl_mask
        self._write_pcf(self._backlight_mask)

    def disable_backlight(self) -> None:
        self._backlight_mask &= ~self._mapping.bl_mask
        self._write_pcf(self._backlight_mask)

    def toggle_backlight(self) -> None:
        self._backlight_mask ^= self._mapping.bl_mask
        self._write_pcf(self._backlight_mask)

    def is_backlight_on(self) -> bool:
        return self._backlight_mask != 0

    def _write_pcf(self, value: int) -> None:
        self._i2c.i2c_write(self._address, bytes([value & 0xFF]))
