from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .lcd import HD44780


class LCDStream:
    """Write-only text sink over an `HD44780`, usable as `print(..., file=stream)`.

    - '\\n' moves to the same column on the other row
    - '\\r' moves to column 0 of the current row
    - anything else is written at the cursor

    No wrapping or layout beyond that; text is encoded one byte per character.
    """

    def __init__(self, lcd: "HD44780", encoding: str = "latin-1", errors: str = "replace") -> None:
        self._lcd = lcd
        self.encoding = encoding
        self.errors = errors

    @property
    def lcd(self) -> "HD44780":
        return self._lcd

    def putc(self, c: int) -> None:
        row = self._lcd.get_cursor_row()
        col = self._lcd.get_cursor_col()
        if c == 0x0A:
            self._lcd.set_cursor_pos(row ^ 1, col)
        elif c == 0x0D:
            self._lcd.set_cursor_pos(row, 0)
        else:
            self._lcd.send_data(c)

    def write(self, text: Union[str, bytes, bytearray]) -> int:
        data = text.encode(self.encoding, errors=self.errors) if isinstance(text, str) else bytes(text)
        for b in data:
            self.putc(b)
        return len(text)

    def flush(self) -> None:
        # Every write is already on the bus.
        pass

    def writable(self) -> bool:
        return True

    def readable(self) -> bool:
        return False
