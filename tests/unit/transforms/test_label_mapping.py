"""Unit tests for order to label mapping."""

from __future__ import annotations

from tests.fixture_paths import build_order
from transforms.label_mapping import to_clickpost_label


def test_to_clickpost_label_concatenates_address_lines() -> None:
    """Line 1 is prefecture + city and line 2 prefixes the street to it."""
    order = build_order(
        shipping_province="X",
        shipping_city="Y",
        shipping_street="Z",
        shipping_address2="",
    )

    label = to_clickpost_label(order)

    assert label.shipping_address1 == "XY"
    assert label.shipping_address2 == "ZXY"
    assert label.shipping_address3 == ""


def test_to_clickpost_label_copies_fields_and_fixed_literals() -> None:
    """Zip, name, and line 3 are copied, the rest are fixed values."""
    order = build_order(shipping_address2="丸の内ビル5F")

    label = to_clickpost_label(order)

    assert label.shipping_zip == "100-0005"
    assert label.shipping_name == "山田花子"
    assert label.shipping_name_title == "様"
    assert label.shipping_address2 == "丸の内1-1東京都千代田区"
    assert label.shipping_address3 == "丸の内ビル5F"
    assert label.shipping_address4 == ""
    assert label.shipping_contents == "サプリメント"


def test_to_clickpost_label_is_deterministic() -> None:
    """Equal orders map to equal labels."""
    assert to_clickpost_label(build_order()) == to_clickpost_label(build_order())
