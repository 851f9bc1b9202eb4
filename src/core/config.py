"""Runtime configuration model for the label converter.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_DIR,
    MAX_CLICKPOST_LABELS,
)
from core.errors import ClickpostConfigError


@dataclass(frozen=True)
class ClickpostConfig:
    """Validated runtime configuration.

    Attributes:
        input_path: Shopify order export to read.
        output_dir: Directory receiving the Click Post label files.
        batch_size: Maximum number of orders per output file.
    """

    input_path: Path = DEFAULT_INPUT_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR
    batch_size: int = DEFAULT_BATCH_SIZE

    def __post_init__(self) -> None:
        validate_batch_size(self.batch_size)

    @classmethod
    def from_env(cls) -> "ClickpostConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ClickpostConfigError: If environment values are invalid.
        """
        input_path_value = os.getenv("CLICKPOST_INPUT_PATH", str(DEFAULT_INPUT_PATH))
        output_dir_value = os.getenv("CLICKPOST_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        batch_size_value = os.getenv("CLICKPOST_BATCH_SIZE", str(DEFAULT_BATCH_SIZE))
        return cls(
            input_path=Path(input_path_value).expanduser(),
            output_dir=Path(output_dir_value).expanduser(),
            batch_size=_parse_batch_size(batch_size_value),
        )


def validate_batch_size(batch_size: int) -> None:
    """Check that a batch size fits the Click Post upload limit.

    Raises:
        ClickpostConfigError: If the size is outside 1..40.
    """
    if batch_size < 1 or batch_size > MAX_CLICKPOST_LABELS:
        raise ClickpostConfigError(
            f"Invalid batch size {batch_size}: expected a value between 1 and "
            f"{MAX_CLICKPOST_LABELS}. Click Post rejects larger uploads."
        )


def _parse_batch_size(raw_value: str) -> int:
    """Parse the batch size environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed integer batch size.

    Raises:
        ClickpostConfigError: If value cannot be parsed into int.
    """
    try:
        return int(raw_value)
    except ValueError as error:
        raise ClickpostConfigError(
            "Invalid CLICKPOST_BATCH_SIZE value: "
            f"expected integer, got '{raw_value}'. "
            "Set CLICKPOST_BATCH_SIZE to a numeric value."
        ) from error
