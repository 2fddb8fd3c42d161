from .address import LINE_WIDTH, ROW0_BASE, ROW1_BASE, AddressCounter
from .errors import BusError, ConfigurationError, HD44780Error
from .lcd import HD44780, EntryMode, HD44780Config
from .mcp2221a_i2c import I2CDevice, MCP2221AI2C
from .pins import PinMapping, VARIANT_A, VARIANT_B
from .stream import LCDStream
from .transport import PCF8574Transport

__all__ = [
    "AddressCounter",
    "LINE_WIDTH",
    "ROW0_BASE",
    "ROW1_BASE",
    "BusError",
    "ConfigurationError",
    "HD44780Error",
    "HD44780",
    "HD44780Config",
    "EntryMode",
    "I2CDevice",
    "MCP2221AI2C",
    "PinMapping",
    "VARIANT_A",
    "VARIANT_B",
    "LCDStream",
    "PCF8574Transport",
]
