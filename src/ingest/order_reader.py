"""Shopify order export reader.

This module loads the order CSV exported from the Shopify admin.
It normalizes rows into typed order records for transforms.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, TextIO

from core.constants import INPUT_ENCODING
from core.errors import ClickpostIOError, ClickpostParseError
from core.types import ShopifyOrder
from store.record_schema import SHOPIFY_ORDER_SCHEMA, shopify_order_from_row


def read_shopify_orders(input_path: str | Path) -> list[ShopifyOrder]:
    """Load orders from a Shopify order export.

    Args:
        input_path: Path to the exported CSV file.

    Returns:
        Orders in file order.

    Raises:
        ClickpostIOError: If the file cannot be opened or decoded.
        ClickpostParseError: If columns are missing or a row is malformed.
    """
    source_path = Path(input_path).expanduser()
    try:
        with source_path.open("r", encoding=INPUT_ENCODING, newline="") as handle:
            return _parse_orders(source_path, handle)
    except OSError as error:
        raise ClickpostIOError(
            f"Failed to read order export at {source_path}: {error.strerror or error}. "
            "Export orders from the Shopify admin and retry."
        ) from error
    except UnicodeDecodeError as error:
        raise ClickpostIOError(
            f"Failed to decode order export at {source_path}: {error.reason}. "
            "Save the export as UTF-8 and retry."
        ) from error


def _parse_orders(source_path: Path, handle: TextIO) -> list[ShopifyOrder]:
    """Parse order rows from an open CSV handle.

    Args:
        source_path: File path for error context.
        handle: Open text handle positioned at the header row.

    Returns:
        Parsed orders.

    Raises:
        ClickpostParseError: If the header or any row is invalid.
    """
    reader = csv.DictReader(handle, strict=True)
    try:
        headers = reader.fieldnames
        if headers is None:
            raise ClickpostParseError(
                f"Order export at {source_path} is empty: expected a header row."
            )
        _require_columns(source_path, headers)
        orders: list[ShopifyOrder] = []
        for row in reader:
            _require_complete_row(source_path, reader.line_num, row.keys(), row.values())
            orders.append(shopify_order_from_row(row))
    except csv.Error as error:
        raise ClickpostParseError(
            f"Failed to parse order export at {source_path}:{reader.line_num}: {error}."
        ) from error
    return orders


def _require_columns(source_path: Path, headers: Iterable[str]) -> None:
    """Fail when the header row lacks a required Shopify column."""
    missing = SHOPIFY_ORDER_SCHEMA.missing_headers(list(headers))
    if missing:
        raise ClickpostParseError(
            f"Order export at {source_path} is missing required columns: "
            f"{', '.join(missing)}. Export orders with shipping address fields."
        )


def _require_complete_row(
    source_path: Path,
    line_number: int,
    keys: Iterable[str | None],
    values: Iterable[object],
) -> None:
    """Fail when a row has more or fewer fields than the header."""
    if None in keys or any(value is None for value in values):
        raise ClickpostParseError(
            f"Malformed order row at {source_path}:{line_number}: "
            "field count does not match the header row."
        )
