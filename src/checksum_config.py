"""Configuration schema, JSON loader and factory for checksum accumulators."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, get_args

from check8_crc import Check8Crc
from check8_sum import Check8Sum
from check8_xor import Check8Xor
from const import CRC8_POLY_SMBUS

if TYPE_CHECKING:
    from checksum import Check8

logger = logging.getLogger(__name__)

Algorithm = Literal["sum", "xor", "crc"]
ALGORITHMS: tuple[str, ...] = get_args(Algorithm)


@dataclass(frozen=True)
class ChecksumConfig:
    """Which accumulator to build and where its register starts."""

    algorithm: Algorithm
    # Only used by "crc"
    polynomial: int = CRC8_POLY_SMBUS
    initial: int = 0

    def __post_init__(self) -> None:
        """Reject algorithm names no accumulator exists for."""
        if self.algorithm not in ALGORITHMS:
            msg = (
                f"Unknown checksum algorithm {self.algorithm!r}, "
                f"expected one of {ALGORITHMS}"
            )
            raise ValueError(msg)


def build_checksum(config: ChecksumConfig) -> Check8:
    """Construct the configured accumulator and load its initial value."""
    check: Check8
    if config.algorithm == "sum":
        check = Check8Sum()
    elif config.algorithm == "xor":
        check = Check8Xor()
    else:
        check = Check8Crc(config.polynomial)
    check.init(config.initial)
    return check


# ---------------------------------------------------------------------------
# File I/O helpers
# ---------------------------------------------------------------------------


def _parse_int(key: str, value: Any) -> int:
    # JSON has no hex literals, so "0x31" style strings are accepted too
    if isinstance(value, str):
        return int(value, 0)
    if not isinstance(value, int):
        msg = (
            f"Checksum config {key!r} must be an integer or hex string, "
            f"got {value!r}"
        )
        raise ValueError(msg)
    return value


def _config_from_dict(d: dict[str, Any]) -> ChecksumConfig:
    if not isinstance(d, dict):
        msg = f"Checksum config must be a JSON object, got {type(d).__name__}"
        raise ValueError(msg)
    return ChecksumConfig(
        algorithm=str(d["algorithm"]).lower(),  # type: ignore[arg-type]
        polynomial=_parse_int("polynomial", d.get("polynomial", CRC8_POLY_SMBUS)),
        initial=_parse_int("initial", d.get("initial", 0)),
    )


def load_checksum_config(path: str | Path) -> ChecksumConfig:
    """Load a ChecksumConfig from a JSON file."""
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)
    config = _config_from_dict(data)
    logger.info(
        "Loaded checksum config from %s: %s poly=0x%02X init=0x%02X",
        path,
        config.algorithm,
        config.polynomial,
        config.initial,
    )
    return config
