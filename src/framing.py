"""COBS framing with a trailing one-byte checksum."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cobs import cobs

from check8_xor import Check8Xor
from checksum import calculate_checksum

if TYPE_CHECKING:
    from collections.abc import Callable

    from checksum import Check8

logger = logging.getLogger(__name__)

FRAME_DELIMITER = b"\x00"


class FrameError(ValueError):
    """Frame could not be decoded into payload and checksum."""


class ChecksumMismatchError(FrameError):
    """Checksum carried by the frame does not match its payload."""

    def __init__(self, expected: int, received: int) -> None:
        """Record both checksum values."""
        super().__init__(
            f"Checksum mismatch: expected 0x{expected:02X}, received 0x{received:02X}"
        )
        self.expected = expected
        self.received = received


def encode_frame(
    payload: bytes, factory: Callable[[], Check8] = Check8Xor
) -> bytes:
    """Append the checksum to *payload*, COBS encode it and add the delimiter."""
    payload_with_checksum = payload + calculate_checksum(payload, factory)
    frame = cobs.encode(payload_with_checksum) + FRAME_DELIMITER
    logger.debug("Encoded frame `%s`", frame)
    return frame


def decode_frame(frame: bytes, factory: Callable[[], Check8] = Check8Xor) -> bytes:
    """Decode a frame from encode_frame and return its verified payload."""
    if frame.endswith(FRAME_DELIMITER):
        frame = frame[: -len(FRAME_DELIMITER)]
    if not frame:
        msg = "Empty frame"
        raise FrameError(msg)

    try:
        decoded = cobs.decode(frame)
    except cobs.DecodeError as e:
        msg = f"Invalid COBS frame: {e}"
        raise FrameError(msg) from e

    if len(decoded) < 1:
        msg = "Frame too short to hold a checksum"
        raise FrameError(msg)

    payload, received = decoded[:-1], decoded[-1]
    expected = calculate_checksum(payload, factory)[0]
    if expected != received:
        logger.warning(
            "Checksum mismatch on `%s`: expected 0x%02X, received 0x%02X",
            frame,
            expected,
            received,
        )
        raise ChecksumMismatchError(expected, received)

    logger.debug("Decoded frame payload `%s`", payload)
    return payload
