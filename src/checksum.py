"""Checksum capability shared by every 8-bit accumulator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from check8_xor import Check8Xor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


@runtime_checkable
class Check8(Protocol):
    """An 8-bit running checksum.

    Implementations hold a single accumulator in ``0..255``. ``add`` is the
    only primitive that depends on the algorithm; the bulk helpers below are
    written once against these four methods.
    """

    def get_accum(self) -> int:
        """Return the current accumulator value."""
        ...

    def init(self, val: int) -> int:
        """Set the accumulator to *val* and return it."""
        ...

    def add(self, val: int) -> int:
        """Fold one byte into the accumulator and return the new value."""
        ...


def calculate_from_byte_array(check: Check8, data: Iterable[int]) -> int:
    """Add every byte of *data* in order and return the final accumulator.

    The accumulator is not reset first, so consecutive calls continue from
    whatever state *check* is already in.
    """
    for val in data:
        check.add(val)
    return check.get_accum()


def calculate_from_string(check: Check8, text: str) -> int:
    """Checksum the UTF-8 encoding of *text*."""
    return calculate_from_byte_array(check, text.encode("utf-8"))


def calculate_checksum(
    data: bytes, factory: Callable[[], Check8] = Check8Xor
) -> bytes:
    """Calculate a one-byte checksum of *data* with a fresh accumulator."""
    return bytes([calculate_from_byte_array(factory(), data)])
