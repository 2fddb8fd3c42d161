"""Exceptions raised by the HD44780 driver and its I2C adapter.

HD44780Error (base)
├── ConfigurationError - bad pin mapping, glyph slot/pattern or I2C address
└── BusError - the I2C backend is not usable

Errors raised by the I2C device itself are not translated: they reach the
caller unchanged.
"""

from __future__ import annotations


class HD44780Error(Exception):
    pass


class ConfigurationError(HD44780Error, ValueError):
    pass


class BusError(HD44780Error, RuntimeError):
    pass
