"""Shared typed models.

This module defines immutable data models used by the importer,
transforms, and exporter to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ShopifyOrder:
    """One order row from a Shopify order export.

    Attributes:
        name: Order number shown in the store admin, e.g. ``#1001``.
        shipping_name: Recipient full name.
        shipping_street: Town/street part of the shipping address.
        shipping_address1: First free-form address line.
        shipping_address2: Second free-form address line, may be empty.
        shipping_city: Shipping city.
        shipping_zip: Shipping postal code.
        shipping_province: Shipping prefecture.
    """

    name: str
    shipping_name: str
    shipping_street: str
    shipping_address1: str
    shipping_address2: str
    shipping_city: str
    shipping_zip: str
    shipping_province: str


@dataclass(frozen=True)
class ClickpostShippingLabel:
    """One row of a Click Post bulk label upload.

    Attributes:
        shipping_zip: Destination postal code.
        shipping_name: Recipient name.
        shipping_name_title: Honorific printed after the name.
        shipping_address1: First address line.
        shipping_address2: Second address line.
        shipping_address3: Third address line, may be empty.
        shipping_address4: Fourth address line, may be empty.
        shipping_contents: Description of the parcel contents.
    """

    shipping_zip: str
    shipping_name: str
    shipping_name_title: str
    shipping_address1: str
    shipping_address2: str
    shipping_address3: str
    shipping_address4: str
    shipping_contents: str


@dataclass(frozen=True)
class LabelRejection:
    """A label dropped by validation.

    Attributes:
        order_name: Order number the label was built from.
        code: Stable identifier of the violated rule.
        reason: Human-readable rule message.
    """

    order_name: str
    code: str
    reason: str


@dataclass(frozen=True)
class BatchExportResult:
    """Outcome of exporting one batch of orders.

    Attributes:
        batch_index: Zero-based batch number, also used in the file name.
        output_path: Written label file.
        order_count: Orders in the batch.
        label_count: Labels written to the file.
        rejections: Orders dropped by validation.
    """

    batch_index: int
    output_path: Path
    order_count: int
    label_count: int
    rejections: tuple[LabelRejection, ...] = ()


@dataclass(frozen=True)
class ConversionSummary:
    """Result of a full conversion run.

    Attributes:
        input_path: Order export that was read.
        order_count: Orders read from the export.
        batches: Per-batch export results in file order.
    """

    input_path: Path
    order_count: int
    batches: tuple[BatchExportResult, ...]

    @property
    def label_count(self) -> int:
        """Return the number of labels written across all files."""
        return sum(batch.label_count for batch in self.batches)

    @property
    def rejected_count(self) -> int:
        """Return the number of orders dropped by validation."""
        return sum(len(batch.rejections) for batch in self.batches)
