# =============================================================================
# conftest.py - Shared fixtures for the HD44780 driver tests
# =============================================================================
# The driver only needs `i2c_write(address, data)` and a `sleep(seconds)`
# callable, so both are replaced with recorders. Bus traffic can then be
# checked byte by byte, or decoded back into (value, is_data) pairs.
# =============================================================================

from __future__ import annotations

import pytest

from hd44780_i2c import HD44780, HD44780Config, PCF8574Transport, VARIANT_A

ADDRESS = 0x27

RS = 0x01
E = 0x04
BL = 0x08


class FakeI2C:
    """Records every single-byte write to the PCF8574."""

    def __init__(self) -> None:
        self.writes: list[tuple[int, bytes]] = []

    def i2c_write(self, address_7bit: int, data: bytes) -> None:
        self.writes.append((address_7bit, bytes(data)))

    @property
    def values(self) -> list[int]:
        out: list[int] = []
        for _, data in self.writes:
            out.extend(data)
        return out

    def clear(self) -> None:
        self.writes.clear()


class FakeSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


def decode_nibbles(values: list[int]) -> list[tuple[int, bool]]:
    """Turn [stable, strobe, stable] triples back into (nibble, is_data)."""
    assert len(values) % 3 == 0, f"{len(values)} writes is not a whole number of nibbles"
    out = []
    for i in range(0, len(values), 3):
        first, strobe, last = values[i : i + 3]
        assert first == last
        assert strobe == first | E
        assert not first & E
        out.append((first >> 4, bool(first & RS)))
    return out


def decode_bytes(values: list[int]) -> list[tuple[int, bool]]:
    """Pair nibble transactions (high first) into (byte, is_data)."""
    nibbles = decode_nibbles(values)
    assert len(nibbles) % 2 == 0
    out = []
    for (hi, hi_rs), (lo, lo_rs) in zip(nibbles[0::2], nibbles[1::2]):
        assert hi_rs == lo_rs
        out.append(((hi << 4) | lo, hi_rs))
    return out


def instructions(i2c: FakeI2C) -> list[int]:
    decoded = decode_bytes(i2c.values)
    assert all(not is_data for _, is_data in decoded)
    return [value for value, _ in decoded]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def i2c():
    return FakeI2C()


@pytest.fixture
def sleeps():
    return FakeSleep()


@pytest.fixture
def transport(i2c, sleeps):
    return PCF8574Transport(i2c, ADDRESS, VARIANT_A, settle_s=0.001, sleep=sleeps)


@pytest.fixture
def lcd(i2c, sleeps):
    return HD44780(i2c, config=HD44780Config(address_7bit=ADDRESS), sleep=sleeps)


@pytest.fixture
def ready_lcd(lcd, i2c, sleeps):
    """An initialized driver with the recorders emptied."""
    lcd.initialize()
    i2c.clear()
    sleeps.calls.clear()
    return lcd
