"""Side-by-side report of several checksums over the same input."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tabulate import tabulate

from checksum import calculate_from_byte_array

if TYPE_CHECKING:
    from collections.abc import Mapping

    from checksum import Check8

logger = logging.getLogger(__name__)

REPORT_HEADERS = ["Checksum", "Hex", "Decimal"]


def checksum_rows(checks: Mapping[str, Check8], data: bytes | str) -> list[list[str]]:
    """Feed *data* to each accumulator and return one row per checksum."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    rows = []
    for name, check in checks.items():
        value = calculate_from_byte_array(check, data)
        rows.append([name, f"0x{value:02X}", str(value)])
    return rows


def checksum_table(checks: Mapping[str, Check8], data: bytes | str) -> str:
    """Return the checksum rows formatted as a grid table."""
    return tabulate(
        checksum_rows(checks, data),
        headers=REPORT_HEADERS,
        tablefmt="simple_grid",
    )


def print_checksums(checks: Mapping[str, Check8], data: bytes | str) -> None:
    """Print the checksum table for *data*."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    logger.debug("Reporting %d checksums over %d bytes", len(checks), len(data))
    print(checksum_table(checks, data))
