"""Shopify order to Click Post label mapping.

This module encodes the storefront's address conventions into the
Click Post label layout. The mapping is fixed and has no branches.
"""

from __future__ import annotations

from core.constants import SHIPPING_CONTENTS, SHIPPING_NAME_TITLE
from core.types import ClickpostShippingLabel, ShopifyOrder


def to_clickpost_label(order: ShopifyOrder) -> ClickpostShippingLabel:
    """Map one Shopify order onto a Click Post shipping label.

    Address line 1 is prefecture + city, line 2 prefixes the street to
    line 1, and line 3 carries the order's second address line.

    Args:
        order: Source order.

    Returns:
        Label for the order.
    """
    address1 = order.shipping_province + order.shipping_city
    return ClickpostShippingLabel(
        shipping_zip=order.shipping_zip,
        shipping_name=order.shipping_name,
        shipping_name_title=SHIPPING_NAME_TITLE,
        shipping_address1=address1,
        shipping_address2=order.shipping_street + address1,
        shipping_address3=order.shipping_address2,
        shipping_address4="",
        shipping_contents=SHIPPING_CONTENTS,
    )
