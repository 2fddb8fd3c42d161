# =============================================================================
# test_commands.py - Instruction encoding
# =============================================================================
# Pure functions, no bus: every instruction byte is checked against the
# values the HD44780 datasheet lists.
# =============================================================================

import pytest

from hd44780_i2c import commands as cmd


class TestNibbles:

    def test_split(self):
        assert cmd.hi_nibble(0xAB) == 0x0A
        assert cmd.lo_nibble(0xAB) == 0x0B

    def test_high_bits_ignored(self):
        assert cmd.hi_nibble(0x1F0) == 0x0F
        assert cmd.lo_nibble(0x1F0) == 0x00


class TestFixedInstructions:

    def test_clear_and_home(self):
        assert cmd.clear_display() == 0x01
        assert cmd.return_home() == 0x02


class TestEntryMode:

    @pytest.mark.parametrize(
        "increment, shift_display, expected",
        [
            (False, False, 0x04),
            (True, False, 0x06),
            (False, True, 0x05),
            (True, True, 0x07),
        ],
    )
    def test_flags(self, increment, shift_display, expected):
        assert cmd.entry_mode(increment=increment, shift_display=shift_display) == expected


class TestDisplayControl:

    def test_default_is_display_only(self):
        assert cmd.display_control() == 0x0C

    def test_all_on(self):
        assert cmd.display_control(display=True, cursor=True, blink=True) == 0x0F

    def test_all_off(self):
        assert cmd.display_control(display=False) == 0x08


class TestShift:

    @pytest.mark.parametrize(
        "display, right, expected",
        [
            (False, False, 0x10),
            (False, True, 0x14),
            (True, False, 0x18),
            (True, True, 0x1C),
        ],
    )
    def test_flags(self, display, right, expected):
        assert cmd.shift(display=display, right=right) == expected


class TestFunctionSet:

    def test_four_bit_two_lines_small_font(self):
        assert cmd.function_set() == 0x28

    def test_eight_bit_reset_nibble(self):
        assert cmd.hi_nibble(cmd.function_set(eight_bit=True)) == 0x3

    def test_four_bit_switch_nibble(self):
        assert cmd.hi_nibble(cmd.function_set(eight_bit=False)) == 0x2

    def test_one_line_tall_font(self):
        assert cmd.function_set(two_lines=False, tall_font=True) == 0x24


class TestAddresses:

    def test_cgram(self):
        assert cmd.set_cgram_address(7 << 3) == 0x78
        assert cmd.set_cgram_address(0) == 0x40

    def test_ddram(self):
        assert cmd.set_ddram_address(0x40) == 0xC0
        assert cmd.set_ddram_address(0x67) == 0xE7

    def test_address_masked_to_field_width(self):
        assert cmd.set_cgram_address(0x7F) == 0x7F
        assert cmd.set_ddram_address(0xFF) == 0xFF
