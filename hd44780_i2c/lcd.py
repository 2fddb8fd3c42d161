from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from . import commands as cmd
from .address import AddressCounter
from .errors import ConfigurationError
from .mcp2221a_i2c import I2CDevice
from .pins import VARIANT_A, PinMapping
from .stream import LCDStream
from .transport import PCF8574Transport

logger = logging.getLogger(__name__)

# Controller timing, seconds.
POWER_ON_DELAY_S = 0.050
RESET_DELAY_S = 0.005
INSTRUCTION_DELAY_S = 0.002


@dataclass(slots=True)
class HD44780Config:
    address_7bit: int = 0x27
    settle_s: float = 0.001  # after every PCF8574 write


class EntryMode(enum.Enum):
    UNINITIALIZED = 0
    CURSOR_INC = 1
    CURSOR_DEC = 2
    DISPLAY_DEC = 3
    DISPLAY_INC = 4


_ENTRY_MODES = {
    cmd.ENTRY_CURSOR_MOVE | cmd.ENTRY_DECREMENT: EntryMode.CURSOR_DEC,
    cmd.ENTRY_CURSOR_MOVE | cmd.ENTRY_INCREMENT: EntryMode.CURSOR_INC,
    cmd.ENTRY_DISPLAY_SHIFT | cmd.ENTRY_INCREMENT: EntryMode.DISPLAY_DEC,
    cmd.ENTRY_DISPLAY_SHIFT | cmd.ENTRY_DECREMENT: EntryMode.DISPLAY_INC,
}


class HD44780:
    """HD44780 (4-bit, two lines) over a PCF8574 I2C backpack.

    The controller is write-only, so the display-control and entry-mode
    registers and the DDRAM address are shadowed here. Every mutator sends the
    full register value; queries only read the shadows.

    Not thread-safe: callers serialize access to one instance.
    """

    def __init__(
        self,
        i2c: I2CDevice,
        mapping: PinMapping = VARIANT_A,
        config: Optional[HD44780Config] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._cfg = config or HD44780Config()
        self._sleep = sleep
        self._bus = PCF8574Transport(
            i2c,
            self._cfg.address_7bit,
            mapping,
            settle_s=self._cfg.settle_s,
            sleep=sleep,
        )

        self._cursor = AddressCounter()
        self._display_state = 0x00
        self._entry_state = 0x00

    @property
    def config(self) -> HD44780Config:
        return self._cfg

    @property
    def address(self) -> int:
        """Current DDRAM address as tracked by the driver."""
        return self._cursor.address

    @property
    def display_state(self) -> int:
        return self._display_state

    @property
    def entry_state(self) -> int:
        return self._entry_state

    def initialize(self) -> None:
        """Bring the controller from an unknown bus width to 4-bit, two lines."""
        logger.debug("initializing HD44780 at 0x%02X", self._cfg.address_7bit)
        self._display_state = cmd.DISPLAY_ON
        self._entry_state = cmd.ENTRY_CURSOR_MOVE | cmd.ENTRY_INCREMENT

        self._sleep(POWER_ON_DELAY_S)

        # 8-bit function set three times, whatever width the controller is in.
        reset = cmd.hi_nibble(cmd.function_set(eight_bit=True))
        for _ in range(3):
            self._bus.send_nibble(reset, False)
            self._sleep(RESET_DELAY_S)

        # From here on the bus is 4 bits wide.
        self._bus.send_nibble(cmd.hi_nibble(cmd.function_set(eight_bit=False)), False)
        self._sleep(INSTRUCTION_DELAY_S)

        for instruction in (
            cmd.function_set(eight_bit=False, two_lines=True, tall_font=False),
            cmd.clear_display(),
            cmd.return_home(),
            cmd.DISPLAY_CONTROL | self._display_state,
            cmd.ENTRY_MODE | self._entry_state,
        ):
            self._bus.send_byte(instruction, False)
            self._sleep(INSTRUCTION_DELAY_S)

        self._cursor.reset()

    # --- characters ---

    def send_data(self, value: int) -> None:
        self._bus.send_byte(value & 0xFF, True)
        # The controller moves its address after every data write; follow it.
        if self._entry_state & cmd.ENTRY_INCREMENT:
            self._cursor.increment()
        else:
            self._cursor.decrement()

    def send_buffer(
        self,
        data: Union[bytes, bytearray, memoryview, str],
        *,
        encoding: str = "latin-1",
        errors: str = "replace",
    ) -> None:
        if isinstance(data, str):
            data = data.encode(encoding, errors=errors)
        for b in bytes(data):
            self.send_data(b)

    def create_custom_char(self, slot: int, glyph: bytes) -> None:
        """Load a 5x8 glyph into CGRAM `slot` (0..7), then return to DDRAM."""
        if not (0 <= slot <= 7):
            raise ConfigurationError(f"CGRAM slot must be 0..7, got {slot}")
        pattern = bytes(glyph)
        if len(pattern) != 8:
            raise ConfigurationError(f"glyph must be exactly 8 bytes, got {len(pattern)}")

        row, col = self._cursor.row, self._cursor.col
        logger.debug("loading glyph into CGRAM slot %d", slot)
        self._bus.send_byte(cmd.set_cgram_address(slot << 3), False)
        for b in pattern:
            self._bus.send_byte(b, True)
        self.set_cursor_pos(row, col)

    # --- backlight ---

    def enable_backlight(self) -> None:
        self._bus.enable_backlight()

    def disable_backlight(self) -> None:
        self._bus.disable_backlight()

    def toggle_backlight(self) -> None:
        self._bus.toggle_backlight()

    def is_backlight_on(self) -> bool:
        return self._bus.is_backlight_on()

    # --- entry mode ---

    def set_cursor_auto_dec(self) -> None:
        self._set_entry_state(cmd.ENTRY_CURSOR_MOVE | cmd.ENTRY_DECREMENT)

    def set_cursor_auto_inc(self) -> None:
        self._set_entry_state(cmd.ENTRY_CURSOR_MOVE | cmd.ENTRY_INCREMENT)

    # Display variants pair "dec" with the increment flag and "inc" with decrement.
    def set_display_auto_dec(self) -> None:
        self._set_entry_state(cmd.ENTRY_DISPLAY_SHIFT | cmd.ENTRY_INCREMENT)

    def set_display_auto_inc(self) -> None:
        self._set_entry_state(cmd.ENTRY_DISPLAY_SHIFT | cmd.ENTRY_DECREMENT)

    def get_entry_mode(self) -> EntryMode:
        return _ENTRY_MODES.get(self._entry_state, EntryMode.CURSOR_INC)

    # --- display ---

    def clear_display(self) -> None:
        self._bus.send_byte(cmd.clear_display(), False)
        self._sleep(INSTRUCTION_DELAY_S)  # clear needs ~1.52ms
        self._cursor.reset()

    def enable_display(self) -> None:
        self._set_display_state(self._display_state | cmd.DISPLAY_ON)

    def disable_display(self) -> None:
        self._set_display_state(self._display_state & ~cmd.DISPLAY_ON)

    def toggle_display(self) -> None:
        self._set_display_state(self._display_state ^ cmd.DISPLAY_ON)

    def is_display_enabled(self) -> bool:
        return bool(self._display_state & cmd.DISPLAY_ON)

    # --- cursor position ---

    def set_cursor_home(self) -> None:
        self._cursor.reset()
        self._bus.send_byte(cmd.return_home(), False)
        self._sleep(INSTRUCTION_DELAY_S)

    def move_cursor_left(self) -> None:
        self._bus.send_byte(cmd.shift(display=False, right=False), False)
        self._cursor.decrement()

    def move_cursor_right(self) -> None:
        self._bus.send_byte(cmd.shift(display=False, right=True), False)
        self._cursor.increment()

    def set_cursor_pos(self, row: int, col: int) -> bool:
        """Move to (row, col). Out-of-range positions are ignored; returns False."""
        if not self._cursor.set_position(row, col):
            logger.debug("ignoring cursor position (%d, %d)", row, col)
            return False
        self._bus.send_byte(cmd.set_ddram_address(self._cursor.address), False)
        return True

    def get_cursor_row(self) -> int:
        return self._cursor.row

    def get_cursor_col(self) -> int:
        return self._cursor.col

    # --- cursor appearance ---

    def enable_cursor_display(self) -> None:
        self._set_display_state(self._display_state | cmd.CURSOR_ON)

    def disable_cursor_display(self) -> None:
        self._set_display_state(self._display_state & ~cmd.CURSOR_ON)

    def toggle_cursor_display(self) -> None:
        self._set_display_state(self._display_state ^ cmd.CURSOR_ON)

    def is_cursor_displayed(self) -> bool:
        return bool(self._display_state & cmd.CURSOR_ON)

    def enable_blinking_cursor(self) -> None:
        self._set_display_state(self._display_state | cmd.BLINK_ON)

    def disable_blinking_cursor(self) -> None:
        self._set_display_state(self._display_state & ~cmd.BLINK_ON)

    def toggle_blinking_cursor(self) -> None:
        self._set_display_state(self._display_state ^ cmd.BLINK_ON)

    def is_blinking_cursor_displayed(self) -> bool:
        return bool(self._display_state & cmd.BLINK_ON)

    # --- display shift ---

    def scroll_display_left(self) -> None:
        self._bus.send_byte(cmd.shift(display=True, right=False), False)

    def scroll_display_right(self) -> None:
        self._bus.send_byte(cmd.shift(display=True, right=True), False)

    def get_stream(self) -> LCDStream:
        """Initialize the controller and return a text sink writing to it."""
        self.initialize()
        return LCDStream(self)

    # --- low level ---

    def _set_display_state(self, state: int) -> None:
        self._display_state = state & (cmd.DISPLAY_ON | cmd.CURSOR_ON | cmd.BLINK_ON)
        self._bus.send_byte(cmd.DISPLAY_CONTROL | self._display_state, False)

    def _set_entry_state(self, state: int) -> None:
        self._entry_state = state
        self._bus.send_byte(cmd.ENTRY_MODE | self._entry_state, False)
