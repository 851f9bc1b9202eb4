"""Shared fixture helpers for tests."""

from __future__ import annotations

import csv
from dataclasses import replace
from pathlib import Path
from typing import Iterable

from core.types import ShopifyOrder
from store.record_schema import SHOPIFY_ORDER_SCHEMA, encode_record

_BASE_ORDER = ShopifyOrder(
    name="#1001",
    shipping_name="山田花子",
    shipping_street="丸の内1-1",
    shipping_address1="丸の内1-1",
    shipping_address2="",
    shipping_city="千代田区",
    shipping_zip="100-0005",
    shipping_province="東京都",
)


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def build_order(**overrides: str) -> ShopifyOrder:
    """Return a valid Tokyo order with selected fields replaced."""
    return replace(_BASE_ORDER, **overrides)


def write_order_export(path: Path, orders: Iterable[ShopifyOrder]) -> Path:
    """Write orders as a Shopify-style CSV export."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(SHOPIFY_ORDER_SCHEMA.headers)
        for order in orders:
            writer.writerow(encode_record(SHOPIFY_ORDER_SCHEMA, order))
    return path
