"""Tests for COBS framing with a checksum trailer."""

from __future__ import annotations

import logging

import pytest
from cobs import cobs
from hypothesis import given
from hypothesis import strategies as st

from check8_crc import Check8Crc
from check8_sum import Check8Sum
from checksum import calculate_checksum
from const import CRC8_POLY_SMBUS
from framing import (
    FRAME_DELIMITER,
    ChecksumMismatchError,
    FrameError,
    decode_frame,
    encode_frame,
)


def _crc() -> Check8Crc:
    return Check8Crc(CRC8_POLY_SMBUS)


def test_encode_appends_checksum_and_delimiter() -> None:
    """The frame is COBS(payload + checksum) followed by a zero byte."""
    payload = bytes([0x00, 0x34, 0x02, 0x01, 0x02])
    frame = encode_frame(payload)

    assert frame.endswith(FRAME_DELIMITER)
    assert FRAME_DELIMITER not in frame[:-1]
    assert cobs.decode(frame[:-1]) == payload + calculate_checksum(payload)


def test_encode_with_crc_factory() -> None:
    """The trailer is produced by whichever accumulator is plugged in."""
    frame = encode_frame(b"\x01\x02\x03", _crc)
    assert cobs.decode(frame[:-1]) == b"\x01\x02\x03" + bytes([72])


@given(st.binary(max_size=512))
def test_decode_returns_payload_property(payload: bytes) -> None:
    """decode_frame(encode_frame(p)) returns p for every accumulator."""
    for factory in (None, Check8Sum, _crc):
        if factory is None:
            assert decode_frame(encode_frame(payload)) == payload
        else:
            assert decode_frame(encode_frame(payload, factory), factory) == payload


def test_decode_without_delimiter() -> None:
    """A frame already stripped of its delimiter is accepted."""
    frame = encode_frame(b"hello")
    assert decode_frame(frame[:-1]) == b"hello"


def test_decode_detects_corrupted_checksum(caplog: pytest.LogCaptureFixture) -> None:
    """A wrong trailer raises ChecksumMismatchError and logs a warning."""
    bad = cobs.encode(b"\x01\x02\x03" + b"\x7f") + FRAME_DELIMITER

    with caplog.at_level(logging.WARNING, logger="framing"):
        with pytest.raises(ChecksumMismatchError) as exc_info:
            decode_frame(bad)

    assert exc_info.value.expected == 0x00
    assert exc_info.value.received == 0x7F
    assert "Checksum mismatch" in caplog.text


def test_decode_with_wrong_algorithm_fails() -> None:
    """A frame made with one checksum does not verify with another."""
    frame = encode_frame(b"\x01\x02\x03", Check8Sum)
    with pytest.raises(ChecksumMismatchError):
        decode_frame(frame)


def test_mismatch_is_a_frame_error() -> None:
    """Callers can catch every framing problem with FrameError or ValueError."""
    assert issubclass(ChecksumMismatchError, FrameError)
    assert issubclass(FrameError, ValueError)


@pytest.mark.parametrize("frame", [b"", FRAME_DELIMITER])
def test_decode_empty_frame(frame: bytes) -> None:
    with pytest.raises(FrameError, match="Empty frame"):
        decode_frame(frame)


def test_decode_invalid_cobs() -> None:
    """A COBS length byte pointing past the end is rejected."""
    with pytest.raises(FrameError, match="Invalid COBS frame"):
        decode_frame(b"\x05\x01" + FRAME_DELIMITER)


def test_decode_frame_without_checksum_byte() -> None:
    """COBS of an empty payload carries no checksum byte."""
    with pytest.raises(FrameError, match="too short"):
        decode_frame(cobs.encode(b"") + FRAME_DELIMITER)
