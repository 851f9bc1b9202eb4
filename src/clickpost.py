"""Public SDK surface for the Click Post label converter.

This module provides a stable import path for scripted use.
It re-exports the conversion entry points and typed models.
"""

from __future__ import annotations

from core.config import ClickpostConfig
from core.errors import (
    ClickpostConfigError,
    ClickpostError,
    ClickpostIOError,
    ClickpostParseError,
    ClickpostValidationError,
)
from core.types import (
    BatchExportResult,
    ClickpostShippingLabel,
    ConversionSummary,
    LabelRejection,
    ShopifyOrder,
)
from ingest.order_reader import read_shopify_orders
from ingest.pipeline import convert_orders
from store.label_export import write_clickpost_labels
from transforms.label_mapping import to_clickpost_label
from transforms.label_validation import collect_valid_labels, validate_shipping_label
from transforms.order_batching import chunk_orders

__all__ = [
    "BatchExportResult",
    "ClickpostConfig",
    "ClickpostConfigError",
    "ClickpostError",
    "ClickpostIOError",
    "ClickpostParseError",
    "ClickpostShippingLabel",
    "ClickpostValidationError",
    "ConversionSummary",
    "LabelRejection",
    "ShopifyOrder",
    "chunk_orders",
    "collect_valid_labels",
    "convert_orders",
    "read_shopify_orders",
    "to_clickpost_label",
    "validate_shipping_label",
    "write_clickpost_labels",
]
