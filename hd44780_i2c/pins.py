from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class PinMapping:
    """PCF8574 bit mapping for an HD44780 in 4-bit mode.

    Bits are PCF8574 pin indices (0..7). The data lines D4..D7 always sit on
    P4..P7, so a nibble is placed on the bus as `nibble << 4`; only the
    control lines may be rearranged.
    """

    rs: int
    rw: int
    e: int
    bl: int

    def __post_init__(self) -> None:
        bits = (self.rs, self.rw, self.e, self.bl)
        for bit in bits:
            if not 0 <= bit <= 3:
                raise ConfigurationError(f"control lines must use P0..P3, got P{bit}")
        if len(set(bits)) != len(bits):
            raise ConfigurationError(f"control lines must use distinct pins, got {bits}")

    @property
    def rs_mask(self) -> int:
        return bit_mask(self.rs)

    @property
    def e_mask(self) -> int:
        return bit_mask(self.e)

    @property
    def bl_mask(self) -> int:
        return bit_mask(self.bl)


# Variant A (very common): P0=RS, P1=RW, P2=E, P3=BL, P4..P7=D4..D7
VARIANT_A = PinMapping(rs=0, rw=1, e=2, bl=3)

# Variant B (RW/E swapped): P0=RS, P1=E, P2=RW, P3=BL, P4..P7=D4..D7
VARIANT_B = PinMapping(rs=0, rw=2, e=1, bl=3)


def bit_mask(bit: int) -> int:
    if not 0 <= bit <= 7:
        raise ConfigurationError(f"PCF8574 bit must be 0..7, got {bit}")
    return 1 << bit
