"""Shared CSV schemas for order and label records.

This module maps CSV column names onto record attributes explicitly.
It is reused by the order importer and the label exporter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar

from core.types import ClickpostShippingLabel, ShopifyOrder

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class CsvColumn:
    """One CSV column bound to a record attribute."""

    header: str
    attribute: str


@dataclass(frozen=True)
class CsvSchema:
    """Ordered column list for one record type.

    Attributes:
        columns: Columns in output order.
    """

    columns: tuple[CsvColumn, ...]

    @property
    def headers(self) -> list[str]:
        """Return column headers in schema order."""
        return [column.header for column in self.columns]

    def missing_headers(self, headers: list[str]) -> list[str]:
        """Return schema headers absent from a parsed header row."""
        present = set(headers)
        return [header for header in self.headers if header not in present]


SHOPIFY_ORDER_SCHEMA = CsvSchema(
    columns=(
        CsvColumn("Name", "name"),
        CsvColumn("Shipping Name", "shipping_name"),
        CsvColumn("Shipping Street", "shipping_street"),
        CsvColumn("Shipping Address1", "shipping_address1"),
        CsvColumn("Shipping Address2", "shipping_address2"),
        CsvColumn("Shipping City", "shipping_city"),
        CsvColumn("Shipping Zip", "shipping_zip"),
        CsvColumn("Shipping Province", "shipping_province"),
    )
)

CLICKPOST_LABEL_SCHEMA = CsvSchema(
    columns=(
        CsvColumn("お届け先郵便番号", "shipping_zip"),
        CsvColumn("お届け先氏名", "shipping_name"),
        CsvColumn("お届け先敬称", "shipping_name_title"),
        CsvColumn("お届け先住所1行目", "shipping_address1"),
        CsvColumn("お届け先住所2行目", "shipping_address2"),
        CsvColumn("お届け先住所3行目", "shipping_address3"),
        CsvColumn("お届け先住所4行目", "shipping_address4"),
        CsvColumn("内容品", "shipping_contents"),
    )
)


def decode_record(
    schema: CsvSchema,
    row: Mapping[str, str],
    factory: Callable[..., RecordT],
) -> RecordT:
    """Build a record from a header-keyed CSV row.

    Args:
        schema: Column schema of the record type.
        row: Parsed row keyed by header.
        factory: Record constructor accepting attribute keyword arguments.

    Returns:
        Constructed record.
    """
    values: dict[str, Any] = {column.attribute: row[column.header] for column in schema.columns}
    return factory(**values)


def encode_record(schema: CsvSchema, record: object) -> list[str]:
    """Serialize a record into CSV cells in schema order.

    Args:
        schema: Column schema of the record type.
        record: Record instance.

    Returns:
        Cell values matching ``schema.headers``.
    """
    return [str(getattr(record, column.attribute)) for column in schema.columns]


def shopify_order_from_row(row: Mapping[str, str]) -> ShopifyOrder:
    """Deserialize one Shopify export row."""
    return decode_record(SHOPIFY_ORDER_SCHEMA, row, ShopifyOrder)


def clickpost_label_to_row(label: ClickpostShippingLabel) -> list[str]:
    """Serialize one Click Post label row."""
    return encode_record(CLICKPOST_LABEL_SCHEMA, label)
