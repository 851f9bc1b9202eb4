"""Order batching transform.

This module splits orders into upload-sized chunks.
Each chunk becomes one Click Post label file.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from core.errors import ClickpostConfigError

ItemT = TypeVar("ItemT")


def chunk_orders(orders: Sequence[ItemT], chunk_size: int) -> list[list[ItemT]]:
    """Split orders into contiguous chunks of at most ``chunk_size``.

    The final chunk holds the remainder, so an empty input yields one
    empty chunk and the run still writes a header-only file.

    Args:
        orders: Orders in export order.
        chunk_size: Maximum orders per chunk.

    Returns:
        Ordered chunks whose concatenation equals ``orders``.

    Raises:
        ClickpostConfigError: If ``chunk_size`` is not positive.
    """
    if chunk_size < 1:
        raise ClickpostConfigError(
            f"Invalid chunk size {chunk_size}: expected value >= 1."
        )
    chunks: list[list[ItemT]] = []
    offset = 0
    while len(orders) - offset > chunk_size:
        chunks.append(list(orders[offset : offset + chunk_size]))
        offset += chunk_size
    chunks.append(list(orders[offset:]))
    return chunks
