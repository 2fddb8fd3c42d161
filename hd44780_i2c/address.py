"""DDRAM address counter for a two-line HD44780.

In two-line mode the controller maps row 0 to 0x00..0x27 and row 1 to
0x40..0x67. The addresses in between are never used, so incrementing off the
end of row 0 jumps to 0x40, and running off the end of row 1 wraps to 0x00.
"""

from __future__ import annotations

from .errors import ConfigurationError

ROW0_BASE = 0x00
ROW1_BASE = 0x40
LINE_WIDTH = 0x28


def is_valid_address(address: int) -> bool:
    return (ROW0_BASE <= address < ROW0_BASE + LINE_WIDTH) or (
        ROW1_BASE <= address < ROW1_BASE + LINE_WIDTH
    )


def row_base(row: int) -> int:
    return ROW1_BASE if row else ROW0_BASE


class AddressCounter:
    """Mirror of the controller's DDRAM address register."""

    def __init__(self, address: int = ROW0_BASE) -> None:
        if not is_valid_address(address):
            raise ConfigurationError(f"DDRAM address out of range: 0x{address:02X}")
        self._address = address

    def __repr__(self) -> str:
        return f"AddressCounter(0x{self._address:02X})"

    @property
    def address(self) -> int:
        return self._address

    @property
    def row(self) -> int:
        return 1 if self._address >= ROW1_BASE else 0

    @property
    def col(self) -> int:
        return self._address - row_base(self.row)

    def reset(self) -> None:
        self._address = ROW0_BASE

    def increment(self) -> None:
        self._address = self._normalize(self._address + 1)

    def decrement(self) -> None:
        if self._address == ROW0_BASE:
            self._address = ROW1_BASE + LINE_WIDTH - 1
        elif self._address == ROW1_BASE:
            self._address = ROW0_BASE + LINE_WIDTH - 1
        else:
            self._address -= 1

    def set_position(self, row: int, col: int) -> bool:
        """Point at (row, col). Returns False and changes nothing when out of range.

        `col == LINE_WIDTH` is accepted and lands where an increment from the
        last column would: the start of the other row.
        """
        if row < 0 or col < 0 or row > 1 or col > LINE_WIDTH:
            return False
        self._address = self._normalize(row_base(row) + col)
        return True

    @staticmethod
    def _normalize(address: int) -> int:
        if address >= ROW1_BASE + LINE_WIDTH:
            return ROW0_BASE
        if ROW0_BASE + LINE_WIDTH <= address < ROW1_BASE:
            return ROW1_BASE
        return address
