"""Click Post label converter CLI entry points.

This module maps command-line overrides onto the runtime config
and runs one conversion. Fatal errors exit with status 1.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from core.config import ClickpostConfig
from core.errors import ClickpostError
from core.logging_config import get_logger
from core.types import ConversionSummary
from ingest.pipeline import convert_orders

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="clickpost-labels",
        description="Convert a Shopify order export into Click Post label CSV files",
    )
    parser.add_argument("--input", help="Override CLICKPOST_INPUT_PATH (Shopify order CSV)")
    parser.add_argument("--output-dir", help="Override CLICKPOST_OUTPUT_DIR for label files")
    parser.add_argument(
        "--batch-size",
        type=int,
        help="Override CLICKPOST_BATCH_SIZE (labels per file, at most 40)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args)
        summary = convert_orders(config)
    except ClickpostError as error:
        _LOGGER.error("conversion_failed", error_type=type(error).__name__, error=str(error))
        return 1
    _print_summary(summary)
    return 0


def _build_config(args: argparse.Namespace) -> ClickpostConfig:
    """Build runtime config with optional CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated config.
    """
    config = ClickpostConfig.from_env()
    if args.input:
        config = replace(config, input_path=Path(args.input).expanduser())
    if args.output_dir:
        config = replace(config, output_dir=Path(args.output_dir).expanduser())
    if args.batch_size is not None:
        config = replace(config, batch_size=args.batch_size)
    return config


def _print_summary(summary: ConversionSummary) -> None:
    """Print one line per written label file."""
    for batch in summary.batches:
        print(f"{batch.output_path}\t{batch.label_count}\t{len(batch.rejections)}")
