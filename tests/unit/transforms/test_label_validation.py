"""Unit tests for Click Post label validation."""

from __future__ import annotations

from dataclasses import replace

import pytest
from structlog.testing import capture_logs

from core.errors import ClickpostValidationError
from core.types import ClickpostShippingLabel
from tests.fixture_paths import build_order
from transforms.label_validation import (
    collect_valid_labels,
    glyph_count,
    validate_shipping_label,
)

_VALID_LABEL = ClickpostShippingLabel(
    shipping_zip="100-0005",
    shipping_name="山田花子",
    shipping_name_title="様",
    shipping_address1="東京都千代田区",
    shipping_address2="丸の内1-1東京都千代田区",
    shipping_address3="",
    shipping_address4="",
    shipping_contents="サプリメント",
)


def _error_code(label: ClickpostShippingLabel) -> str:
    with pytest.raises(ClickpostValidationError) as excinfo:
        validate_shipping_label(label)
    return excinfo.value.code


def test_validate_shipping_label_accepts_optional_lines_empty() -> None:
    """Address lines 3 and 4 may be empty."""
    validate_shipping_label(_VALID_LABEL)


def test_validate_shipping_label_rejects_empty_name_before_other_fields() -> None:
    """An empty name fails regardless of the remaining fields."""
    label = replace(_VALID_LABEL, shipping_name="", shipping_address1="", shipping_address2="")

    assert _error_code(label) == "name_required"


def test_validate_shipping_label_checks_zip_first() -> None:
    """The zip rule runs before every other rule."""
    label = replace(_VALID_LABEL, shipping_zip="", shipping_name="")

    assert _error_code(label) == "zip_required"


def test_validate_shipping_label_counts_full_width_glyphs() -> None:
    """Twenty full-width characters pass and twenty-one fail."""
    validate_shipping_label(replace(_VALID_LABEL, shipping_name="山" * 20))

    assert _error_code(replace(_VALID_LABEL, shipping_name="山" * 21)) == "name_too_long"


def test_validate_shipping_label_rejects_empty_address_line_2() -> None:
    """Address line 2 is required."""
    assert _error_code(replace(_VALID_LABEL, shipping_address2="")) == "address2_required"


@pytest.mark.parametrize(
    ("field_name", "value", "code"),
    [
        ("shipping_address1", "", "address1_required"),
        ("shipping_address1", "都" * 21, "address1_too_long"),
        ("shipping_address2", "都" * 21, "address2_too_long"),
        ("shipping_address3", "都" * 21, "address3_too_long"),
        ("shipping_address4", "都" * 21, "address4_too_long"),
        ("shipping_contents", "品" * 16, "contents_too_long"),
    ],
)
def test_validate_shipping_label_reports_rule_code(field_name: str, value: str, code: str) -> None:
    """Each rule reports its own code."""
    assert _error_code(replace(_VALID_LABEL, **{field_name: value})) == code


def test_validate_shipping_label_uses_japanese_messages() -> None:
    """Rule messages match the upload form wording."""
    with pytest.raises(ClickpostValidationError, match="お届け先氏名は全角20文字までです"):
        validate_shipping_label(replace(_VALID_LABEL, shipping_name="山" * 21))


def test_validate_shipping_label_rejects_unencodable_text() -> None:
    """Characters outside the label file encoding are rejected."""
    label = replace(_VALID_LABEL, shipping_address3="🍣ビル")

    assert _error_code(label) == "unencodable_text"


def test_glyph_count_composes_combining_marks() -> None:
    """A decomposed voiced kana counts as one character."""
    assert glyph_count("\u304b\u3099") == 1
    assert glyph_count("山田花子") == 4


def test_collect_valid_labels_logs_and_skips_rejections() -> None:
    """Rejected orders are logged with their order number and skipped."""
    orders = [
        build_order(name="#1"),
        build_order(name="#2", shipping_name="山" * 21),
        build_order(name="#3"),
    ]

    with capture_logs() as logs:
        labels, rejections = collect_valid_labels(orders)

    assert len(labels) == 2
    assert [r.order_name for r in rejections] == ["#2"]
    assert logs == [
        {
            "event": "shipping_label_rejected",
            "log_level": "warning",
            "order_name": "#2",
            "code": "name_too_long",
            "reason": "お届け先氏名は全角20文字までです",
        }
    ]
