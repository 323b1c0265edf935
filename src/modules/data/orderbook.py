"""Order book pressure metrics.

Summarizes a depth snapshot into buyer/seller shares by quantity and by
notional amount.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.modules.data.types import OrderBook


@dataclass(frozen=True)
class OrderBookMetrics:
    """Buyer vs seller pressure derived from one depth snapshot.

    Attributes:
        buyer_percentage: Bid quantity as a share of total quantity (0-100).
        seller_percentage: Ask quantity as a share of total quantity (0-100).
        buyer_volume: Total bid quantity.
        seller_volume: Total ask quantity.
        buyer_amount: Total bid notional (price * quantity).
        seller_amount: Total ask notional.
        buyer_weight: 50 + (bid notional share - 0.5) * 100.
        seller_weight: 50 + (ask notional share - 0.5) * 100.
        total_bids: Number of bid levels.
        total_asks: Number of ask levels.
    """

    buyer_percentage: float
    seller_percentage: float
    buyer_volume: float
    seller_volume: float
    buyer_amount: float
    seller_amount: float
    buyer_weight: float
    seller_weight: float
    total_bids: int
    total_asks: int


def orderbook_metrics(book: OrderBook) -> OrderBookMetrics | None:
    """Compute pressure metrics for a depth snapshot.

    Args:
        book: Bid and ask levels as (price, quantity) pairs.

    Returns:
        OrderBookMetrics, or None if either side is empty or carries no
        quantity.
    """
    if not book.bids or not book.asks:
        return None

    bid_volume = sum(qty for _, qty in book.bids)
    ask_volume = sum(qty for _, qty in book.asks)
    bid_amount = sum(price * qty for price, qty in book.bids)
    ask_amount = sum(price * qty for price, qty in book.asks)
    total_volume = bid_volume + ask_volume
    total_amount = bid_amount + ask_amount

    if total_volume <= 0 or total_amount <= 0:
        return None

    return OrderBookMetrics(
        buyer_percentage=bid_volume / total_volume * 100,
        seller_percentage=ask_volume / total_volume * 100,
        buyer_volume=bid_volume,
        seller_volume=ask_volume,
        buyer_amount=bid_amount,
        seller_amount=ask_amount,
        buyer_weight=50 + (bid_amount / total_amount - 0.5) * 100,
        seller_weight=50 + (ask_amount / total_amount - 0.5) * 100,
        total_bids=len(book.bids),
        total_asks=len(book.asks),
    )
