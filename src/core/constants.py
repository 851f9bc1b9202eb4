"""Core constants used across converter modules.

This module centralizes fixed file names, limits, and literals.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_INPUT_PATH = Path("shopify-orders.csv")
DEFAULT_OUTPUT_DIR = Path(".")
OUTPUT_FILE_PREFIX = "clickpost-shipping-labels"
OUTPUT_FILE_SUFFIX = ".csv"
# Click Post accepts at most 40 labels per uploaded CSV.
MAX_CLICKPOST_LABELS = 40
DEFAULT_BATCH_SIZE = MAX_CLICKPOST_LABELS
INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "cp932"
OUTPUT_LINE_TERMINATOR = "\r\n"
SHIPPING_NAME_TITLE = "様"
SHIPPING_CONTENTS = "サプリメント"
MAX_NAME_LENGTH = 20
MAX_ADDRESS_LINE_LENGTH = 20
MAX_CONTENTS_LENGTH = 15
