"""
Table-driven CRC-8.

The table is generated MSB-first from the generator polynomial with no input
or output reflection and no final XOR. Named polynomials live in ``const``;
matching a published CRC-8 variant may also need a starting value, which is
set with ``init``.
"""

from __future__ import annotations

import logging

from const import BYTE_MASK, TABLE_SIZE

logger = logging.getLogger(__name__)


def generate_table(poly: int) -> tuple[int, ...]:
    """Return the 256-entry CRC-8 lookup table for *poly*."""
    poly &= BYTE_MASK
    table = []
    for i in range(TABLE_SIZE):
        crc = i
        for _ in range(8):
            if crc & 0x80:
                crc = ((crc << 1) ^ poly) & BYTE_MASK
            else:
                crc = (crc << 1) & BYTE_MASK
        table.append(crc)
    return tuple(table)


class Check8Crc:
    """CRC-8 over an arbitrary generator polynomial."""

    def __init__(self, poly: int) -> None:
        """Build the lookup table for *poly*; the register starts at zero."""
        self._poly = poly & BYTE_MASK
        self._table = generate_table(self._poly)
        self.accum = 0
        logger.debug("Generated CRC-8 table for polynomial 0x%02X", self._poly)

    def __repr__(self) -> str:
        return f"Check8Crc(poly=0x{self._poly:02X}, accum=0x{self.accum:02X})"

    @property
    def polynomial(self) -> int:
        """Generator polynomial the table was built from."""
        return self._poly

    @property
    def table(self) -> tuple[int, ...]:
        """Lookup table indexed by ``register ^ byte``."""
        return self._table

    def get_accum(self) -> int:
        """Return the CRC register."""
        return self.accum

    def init(self, val: int) -> int:
        """Load *val* into the CRC register."""
        self.accum = val & BYTE_MASK
        return self.accum

    def add(self, val: int) -> int:
        """Feed one byte through the table."""
        self.accum = self._table[(self.accum ^ val) & BYTE_MASK]
        return self.accum
