# =============================================================================
# test_transport.py - PCF8574 nibble framing and backlight
# =============================================================================
# Variant A wiring: P0=RS, P2=E, P3=BL, P4..P7=D4..D7.
# =============================================================================

import pytest

from conftest import ADDRESS, BL, E, RS, FakeI2C, FakeSleep
from hd44780_i2c import ConfigurationError, PCF8574Transport, PinMapping, VARIANT_B


class TestSendNibble:

    def test_three_writes(self, transport, i2c):
        transport.send_nibble(0x5, False)
        assert i2c.values == [0x50, 0x50 | E, 0x50]

    def test_rs_for_data(self, transport, i2c):
        transport.send_nibble(0x5, True)
        assert i2c.values == [0x51, 0x51 | E, 0x51]

    def test_each_write_is_one_byte_to_the_expander(self, transport, i2c):
        transport.send_nibble(0xF, False)
        assert [addr for addr, _ in i2c.writes] == [ADDRESS] * 3
        assert all(len(data) == 1 for _, data in i2c.writes)

    def test_settle_after_every_write(self, transport, sleeps):
        transport.send_nibble(0x1, False)
        assert sleeps.calls == [0.001] * 3


class TestSendByte:

    def test_high_nibble_first(self, transport, i2c):
        transport.send_byte(0x12, False)
        assert i2c.values == [0x10, 0x10 | E, 0x10, 0x20, 0x20 | E, 0x20]

    def test_data_byte_with_backlight(self, transport, i2c):
        transport.enable_backlight()
        i2c.clear()

        transport.send_byte(0xAB, True)

        hi = 0xA0 | RS | BL
        lo = 0xB0 | RS | BL
        assert i2c.values == [hi, hi | E, hi, lo, lo | E, lo]

    def test_six_settle_delays(self, transport, sleeps):
        transport.send_byte(0xFF, True)
        assert len(sleeps.calls) == 6


class TestBacklight:

    def test_off_at_start(self, transport, i2c):
        assert not transport.is_backlight_on()
        assert i2c.writes == []

    def test_enable_writes_mask_alone(self, transport, i2c):
        transport.enable_backlight()
        assert transport.is_backlight_on()
        assert i2c.values == [BL]

    def test_disable(self, transport, i2c):
        transport.enable_backlight()
        transport.disable_backlight()
        assert not transport.is_backlight_on()
        assert i2c.values == [BL, 0x00]

    def test_toggle(self, transport, i2c):
        transport.toggle_backlight()
        transport.toggle_backlight()
        assert i2c.values == [BL, 0x00]

    def test_bit_persists_across_transactions(self, transport, i2c):
        transport.enable_backlight()
        transport.send_byte(0x00, False)
        transport.send_nibble(0x0, True)
        assert all(v & BL for v in i2c.values)

    def test_backlight_write_does_not_sleep(self, transport, sleeps):
        transport.enable_backlight()
        assert sleeps.calls == []


class TestBusErrors:

    def test_propagates_unchanged(self, sleeps):
        class Broken(FakeI2C):
            def i2c_write(self, address_7bit, data):
                raise OSError("nack")

        bus = PCF8574Transport(Broken(), ADDRESS, sleep=sleeps)
        with pytest.raises(OSError, match="nack"):
            bus.send_byte(0x41, True)


class TestPinMapping:

    def test_variant_b_strobe_bit(self):
        i2c = FakeI2C()
        bus = PCF8574Transport(i2c, ADDRESS, VARIANT_B, sleep=FakeSleep())
        bus.send_nibble(0x3, False)
        assert i2c.values == [0x30, 0x32, 0x30]

    @pytest.mark.parametrize(
        "pins",
        [
            dict(rs=0, rw=1, e=2, bl=4),
            dict(rs=0, rw=0, e=2, bl=3),
        ],
    )
    def test_rejects_bad_mapping(self, pins):
        with pytest.raises(ConfigurationError):
            PinMapping(**pins)
