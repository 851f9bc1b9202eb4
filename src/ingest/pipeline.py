"""Conversion orchestration for Click Post label runs.

This module coordinates order import, batching, label validation,
and label file writes for a single conversion run.
"""

from __future__ import annotations

from pathlib import Path

from core.config import ClickpostConfig
from core.logging_config import get_logger
from core.types import BatchExportResult, ConversionSummary, ShopifyOrder
from ingest.order_reader import read_shopify_orders
from store.label_export import build_label_file_path, write_clickpost_labels
from transforms.label_validation import collect_valid_labels
from transforms.order_batching import chunk_orders

_LOGGER = get_logger(__name__)


def convert_orders(config: ClickpostConfig) -> ConversionSummary:
    """Convert a Shopify order export into Click Post label files.

    Args:
        config: Runtime configuration.

    Returns:
        Summary of the written files and rejected orders.

    Raises:
        ClickpostIOError: If the export cannot be read or a file cannot be written.
        ClickpostParseError: If the export is malformed.
    """
    orders = read_shopify_orders(config.input_path)
    _LOGGER.info(
        "orders_imported",
        input_path=str(config.input_path),
        order_count=len(orders),
    )
    batches = [
        export_label_batch(config.output_dir, batch_index, batch_orders)
        for batch_index, batch_orders in enumerate(chunk_orders(orders, config.batch_size))
    ]
    summary = ConversionSummary(
        input_path=config.input_path,
        order_count=len(orders),
        batches=tuple(batches),
    )
    _log_conversion_completion(summary)
    return summary


def export_label_batch(
    output_dir: Path,
    batch_index: int,
    orders: list[ShopifyOrder],
) -> BatchExportResult:
    """Validate one batch of orders and write its label file.

    Args:
        output_dir: Directory receiving label files.
        batch_index: Zero-based batch number.
        orders: Orders of the batch.

    Returns:
        Export result for the batch.
    """
    labels, rejections = collect_valid_labels(orders)
    output_path = write_clickpost_labels(build_label_file_path(output_dir, batch_index), labels)
    _LOGGER.info(
        "label_batch_exported",
        batch_index=batch_index,
        output_path=str(output_path),
        order_count=len(orders),
        label_count=len(labels),
        rejected_count=len(rejections),
    )
    return BatchExportResult(
        batch_index=batch_index,
        output_path=output_path,
        order_count=len(orders),
        label_count=len(labels),
        rejections=tuple(rejections),
    )


def _log_conversion_completion(summary: ConversionSummary) -> None:
    """Log run completion with contextual metadata."""
    _LOGGER.info(
        "conversion_completed",
        input_path=str(summary.input_path),
        order_count=summary.order_count,
        file_count=len(summary.batches),
        label_count=summary.label_count,
        rejected_count=summary.rejected_count,
    )
