from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running this file directly via: `python examples/hello_lcd.py`
# by ensuring the project root (parent of `examples/`) is on sys.path.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hd44780_i2c import HD44780, HD44780Config, VARIANT_A, VARIANT_B
from hd44780_i2c.mcp2221a_i2c import MCP2221AI2C

# Bell, drawn as a 5x8 glyph.
BELL = bytes([0x04, 0x0E, 0x0E, 0x0E, 0x1F, 0x00, 0x04, 0x00])


def main() -> None:
    parser = argparse.ArgumentParser(description="HD44780 via PCF8574 over MCP2221A (I2C)")
    parser.add_argument("--address", default="0x27", help="PCF8574 7-bit I2C address (default: 0x27)")
    parser.add_argument("--scan", action="store_true", help="Scan I2C and use the first responding address")
    parser.add_argument("--variant", choices=["A", "B"], default="A", help="pin mapping variant (default: A)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log driver activity")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    address_7bit = int(args.address, 0)

    # MCP2221A via PyMCP2221A, I2C @ 100kHz
    i2c = MCP2221AI2C(i2c_speed_hz=100_000).open()

    if args.scan:
        found = i2c.scan()
        if not found:
            raise SystemExit("No I2C devices found during scan")
        address_7bit = found[0]
        print(f"Using I2C address 0x{address_7bit:02X} (first found)")

    lcd = HD44780(
        i2c,
        mapping={"A": VARIANT_A, "B": VARIANT_B}[args.variant],
        config=HD44780Config(address_7bit=address_7bit),
    )

    lcd.initialize()
    lcd.enable_backlight()
    lcd.create_custom_char(0, BELL)

    lcd.send_buffer("HD44780 via I2C ")
    lcd.send_data(0)
    lcd.set_cursor_pos(1, 0)
    lcd.send_buffer(f"PCF8574 @0x{address_7bit:02X}")


if __name__ == "__main__":
    main()
