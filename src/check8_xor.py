"""XOR checksum."""

from const import BYTE_MASK


class Check8Xor:
    """XOR of all bytes."""

    def __init__(self) -> None:
        """Start with an accumulator of zero."""
        self.accum = 0

    def __repr__(self) -> str:
        return f"Check8Xor(accum=0x{self.accum:02X})"

    def get_accum(self) -> int:
        """Return the running XOR."""
        return self.accum

    def init(self, val: int) -> int:
        """Reset the running XOR to *val*."""
        self.accum = val & BYTE_MASK
        return self.accum

    def add(self, val: int) -> int:
        """XOR *val* into the accumulator."""
        self.accum = (self.accum ^ val) & BYTE_MASK
        return self.accum
