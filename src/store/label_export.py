"""Click Post label file export.

This module writes validated labels as a Click Post bulk upload CSV.
Files use CRLF line endings and the Shift_JIS family encoding.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable

from core.constants import (
    OUTPUT_ENCODING,
    OUTPUT_FILE_PREFIX,
    OUTPUT_FILE_SUFFIX,
    OUTPUT_LINE_TERMINATOR,
)
from core.errors import ClickpostIOError
from core.types import ClickpostShippingLabel
from store.record_schema import CLICKPOST_LABEL_SCHEMA, clickpost_label_to_row


def write_clickpost_labels(
    output_path: str | Path,
    labels: Iterable[ClickpostShippingLabel],
) -> Path:
    """Write labels to a Click Post upload file.

    An empty label list still produces a file with the header row.

    Args:
        output_path: Destination CSV path.
        labels: Validated labels in output order.

    Returns:
        Path of the written file.

    Raises:
        ClickpostIOError: If the file cannot be encoded, created, or written.
    """
    target_path = Path(output_path).expanduser()
    payload = _encode_payload(target_path, _render_csv(labels))
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_bytes(payload)
    except OSError as error:
        raise ClickpostIOError(
            f"Failed to write label file at {target_path}: {error.strerror or error}. "
            "Check the output directory permissions and retry."
        ) from error
    return target_path


def build_label_file_path(output_dir: str | Path, batch_index: int) -> Path:
    """Return the numbered output path for one batch."""
    file_name = f"{OUTPUT_FILE_PREFIX}-{batch_index}{OUTPUT_FILE_SUFFIX}"
    return Path(output_dir).expanduser() / file_name


def _render_csv(labels: Iterable[ClickpostShippingLabel]) -> str:
    """Render header and label rows as CSV text."""
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, lineterminator=OUTPUT_LINE_TERMINATOR)
    writer.writerow(CLICKPOST_LABEL_SCHEMA.headers)
    for label in labels:
        writer.writerow(clickpost_label_to_row(label))
    return buffer.getvalue()


def _encode_payload(target_path: Path, text: str) -> bytes:
    """Encode CSV text for upload."""
    try:
        return text.encode(OUTPUT_ENCODING)
    except UnicodeEncodeError as error:
        raise ClickpostIOError(
            f"Failed to encode label file at {target_path} as {OUTPUT_ENCODING}: "
            f"unsupported character {error.object[error.start : error.end]!r}."
        ) from error
