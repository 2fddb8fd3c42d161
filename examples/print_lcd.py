from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running directly via: `python examples/print_lcd.py ...`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hd44780_i2c import HD44780, HD44780Config, VARIANT_A, VARIANT_B
from hd44780_i2c.mcp2221a_i2c import MCP2221AI2C


def _maybe_unescape(text: str) -> str:
    # Optional convenience for shells: allows passing "Line1\\nLine2".
    # Keep it conservative: only a few common escapes.
    return (
        text.replace("\\\\", "\\")
        .replace("\\n", "\n")
        .replace("\\r", "\r")
        .replace("\\t", "\t")
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Print text on HD44780 via PCF8574 (MCP2221A)")
    parser.add_argument("text", help="Text to display (use literal newlines or pass --unescape with \\n)")
    parser.add_argument("--address", default="0x27", help="PCF8574 7-bit I2C address (default: 0x27)")
    parser.add_argument("--scan", action="store_true", help="Scan I2C and use first responding address")
    parser.add_argument(
        "--variant",
        choices=["A", "B"],
        default="A",
        help="PCF8574->HD44780 pin mapping variant (default: A)",
    )
    parser.add_argument(
        "--unescape",
        action="store_true",
        help=r"Interpret \\n, \\r, \\t and \\\\ in the input text",
    )
    parser.add_argument("--no-backlight", action="store_true", help="Leave the backlight off")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    text = _maybe_unescape(args.text) if args.unescape else args.text

    address_7bit = int(args.address, 0)
    mapping = {"A": VARIANT_A, "B": VARIANT_B}[args.variant]

    i2c = MCP2221AI2C(i2c_speed_hz=100_000).open()
    if args.scan:
        found = i2c.scan()
        if not found:
            raise SystemExit("No I2C devices found during scan")
        address_7bit = found[0]
        print(f"Using I2C address 0x{address_7bit:02X} (first found)")

    lcd = HD44780(i2c, mapping=mapping, config=HD44780Config(address_7bit=address_7bit))
    out = lcd.get_stream()
    if not args.no_backlight:
        lcd.enable_backlight()

    # '\n' jumps to the other row at the same column, so lead with '\r'.
    print(text.replace("\n", "\r\n"), end="", file=out)


if __name__ == "__main__":
    main()
