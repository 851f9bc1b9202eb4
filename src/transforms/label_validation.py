"""Click Post label validation transform.

This module enforces the upload form's required fields and length
limits. Invalid labels are dropped and logged, never repaired.
"""

from __future__ import annotations

from dataclasses import astuple
from typing import Iterable
import unicodedata

from core.constants import (
    MAX_ADDRESS_LINE_LENGTH,
    MAX_CONTENTS_LENGTH,
    MAX_NAME_LENGTH,
    OUTPUT_ENCODING,
)
from core.errors import ClickpostValidationError
from core.logging_config import get_logger
from core.types import ClickpostShippingLabel, LabelRejection, ShopifyOrder
from transforms.label_mapping import to_clickpost_label

_LOGGER = get_logger(__name__)


def validate_shipping_label(
    label: ClickpostShippingLabel,
    encoding: str = OUTPUT_ENCODING,
) -> None:
    """Check a label against Click Post field rules.

    Rules are checked in form order and the first violation wins.

    Args:
        label: Label to check.
        encoding: Encoding the label file will be written in.

    Raises:
        ClickpostValidationError: If any rule is violated.
    """
    _require(label.shipping_zip, "zip_required", "お届け先郵便番号は必須です")
    _require(label.shipping_name, "name_required", "お届け先氏名は必須です")
    _limit(
        label.shipping_name,
        MAX_NAME_LENGTH,
        "name_too_long",
        f"お届け先氏名は全角{MAX_NAME_LENGTH}文字までです",
    )
    _require(label.shipping_address1, "address1_required", "お届け先住所1行目は必須です")
    _limit(
        label.shipping_address1,
        MAX_ADDRESS_LINE_LENGTH,
        "address1_too_long",
        f"お届け先住所1行目は全角{MAX_ADDRESS_LINE_LENGTH}文字までです",
    )
    _require(label.shipping_address2, "address2_required", "お届け先住所2行目は必須です")
    _limit(
        label.shipping_address2,
        MAX_ADDRESS_LINE_LENGTH,
        "address2_too_long",
        f"お届け先住所2行目は全角{MAX_ADDRESS_LINE_LENGTH}文字までです",
    )
    _limit(
        label.shipping_address3,
        MAX_ADDRESS_LINE_LENGTH,
        "address3_too_long",
        f"お届け先住所3行目は全角{MAX_ADDRESS_LINE_LENGTH}文字までです",
    )
    _limit(
        label.shipping_address4,
        MAX_ADDRESS_LINE_LENGTH,
        "address4_too_long",
        f"お届け先住所4行目は全角{MAX_ADDRESS_LINE_LENGTH}文字までです",
    )
    _limit(
        label.shipping_contents,
        MAX_CONTENTS_LENGTH,
        "contents_too_long",
        f"内容品は全角{MAX_CONTENTS_LENGTH}文字までです",
    )
    _require_encodable(label, encoding)


def collect_valid_labels(
    orders: Iterable[ShopifyOrder],
) -> tuple[list[ClickpostShippingLabel], list[LabelRejection]]:
    """Map orders to labels and keep only the valid ones.

    Args:
        orders: Orders of one batch.

    Returns:
        Accepted labels in order, and the rejected orders.
    """
    labels: list[ClickpostShippingLabel] = []
    rejections: list[LabelRejection] = []
    for order in orders:
        label = to_clickpost_label(order)
        try:
            validate_shipping_label(label)
        except ClickpostValidationError as error:
            rejection = LabelRejection(order_name=order.name, code=error.code, reason=error.message)
            _LOGGER.warning(
                "shipping_label_rejected",
                order_name=rejection.order_name,
                code=rejection.code,
                reason=rejection.reason,
            )
            rejections.append(rejection)
            continue
        labels.append(label)
    return labels, rejections


def glyph_count(text: str) -> int:
    """Count displayed characters independent of encoded width.

    Args:
        text: Field value.

    Returns:
        Number of code points after NFC composition.
    """
    return len(unicodedata.normalize("NFC", text))


def _require(value: str, code: str, message: str) -> None:
    """Fail when a required field is empty."""
    if value == "":
        raise ClickpostValidationError(code, message)


def _limit(value: str, max_length: int, code: str, message: str) -> None:
    """Fail when a field has more than ``max_length`` characters."""
    if glyph_count(value) > max_length:
        raise ClickpostValidationError(code, message)


def _require_encodable(label: ClickpostShippingLabel, encoding: str) -> None:
    """Fail when a field cannot be written in the label file encoding."""
    for value in astuple(label):
        try:
            value.encode(encoding)
        except UnicodeEncodeError as error:
            unsupported = error.object[error.start : error.end]
            raise ClickpostValidationError(
                "unencodable_text",
                f"送り状の文字コードで表現できない文字が含まれています: {unsupported}",
            ) from error
