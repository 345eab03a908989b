"""Wrapping arithmetic sum checksum."""

from const import BYTE_MASK


class Check8Sum:
    """8-bit sum of all bytes, modulo 256."""

    def __init__(self) -> None:
        """Start with an accumulator of zero."""
        self.accum = 0

    def __repr__(self) -> str:
        return f"Check8Sum(accum=0x{self.accum:02X})"

    def get_accum(self) -> int:
        """Return the running sum."""
        return self.accum

    def init(self, val: int) -> int:
        """Reset the running sum to *val*."""
        self.accum = val & BYTE_MASK
        return self.accum

    def add(self, val: int) -> int:
        """Add *val*, wrapping at 256."""
        self.accum = (self.accum + val) & BYTE_MASK
        return self.accum
