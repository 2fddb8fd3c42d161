"""HD44780 instruction encoding.

Each instruction is a fixed opcode OR'd with its flag bits. These helpers
never touch the bus and never fail: callers pass flags the controller
understands and addresses that fit the opcode.
"""

from __future__ import annotations

# Opcodes
CLEAR_DISPLAY = 0x01
RETURN_HOME = 0x02
ENTRY_MODE = 0x04
DISPLAY_CONTROL = 0x08
SHIFT = 0x10
FUNCTION_SET = 0x20
SET_CGRAM_ADDR = 0x40
SET_DDRAM_ADDR = 0x80

# Entry mode flags
ENTRY_CURSOR_MOVE = 0x00
ENTRY_DISPLAY_SHIFT = 0x01
ENTRY_DECREMENT = 0x00
ENTRY_INCREMENT = 0x02

# Display control flags
BLINK_ON = 0x01
CURSOR_ON = 0x02
DISPLAY_ON = 0x04

# Shift flags
SHIFT_CURSOR = 0x00
SHIFT_DISPLAY = 0x08
SHIFT_LEFT = 0x00
SHIFT_RIGHT = 0x04

# Function set flags
BUS_4BIT = 0x00
BUS_8BIT = 0x10
LINES_1 = 0x00
LINES_2 = 0x08
FONT_5X8 = 0x00
FONT_5X10 = 0x04


def hi_nibble(value: int) -> int:
    return (value >> 4) & 0x0F


def lo_nibble(value: int) -> int:
    return value & 0x0F


def clear_display() -> int:
    return CLEAR_DISPLAY


def return_home() -> int:
    return RETURN_HOME


def entry_mode(*, increment: bool = True, shift_display: bool = False) -> int:
    cmd = ENTRY_MODE
    cmd |= ENTRY_INCREMENT if increment else ENTRY_DECREMENT
    cmd |= ENTRY_DISPLAY_SHIFT if shift_display else ENTRY_CURSOR_MOVE
    return cmd


def display_control(*, display: bool = True, cursor: bool = False, blink: bool = False) -> int:
    cmd = DISPLAY_CONTROL
    if display:
        cmd |= DISPLAY_ON
    if cursor:
        cmd |= CURSOR_ON
    if blink:
        cmd |= BLINK_ON
    return cmd


def shift(*, display: bool = False, right: bool = True) -> int:
    cmd = SHIFT
    cmd |= SHIFT_DISPLAY if display else SHIFT_CURSOR
    cmd |= SHIFT_RIGHT if right else SHIFT_LEFT
    return cmd


def function_set(*, eight_bit: bool = False, two_lines: bool = True, tall_font: bool = False) -> int:
    cmd = FUNCTION_SET
    cmd |= BUS_8BIT if eight_bit else BUS_4BIT
    cmd |= LINES_2 if two_lines else LINES_1
    cmd |= FONT_5X10 if tall_font else FONT_5X8
    return cmd


def set_cgram_address(address: int) -> int:
    return SET_CGRAM_ADDR | (address & 0x3F)


def set_ddram_address(address: int) -> int:
    return SET_DDRAM_ADDR | (address & 0x7F)
