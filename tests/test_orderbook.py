"""Tests for order book pressure metrics."""

import pytest

from src.modules.data.orderbook import orderbook_metrics
from src.modules.data.types import OrderBook


class TestOrderBookMetrics:
    """Tests for orderbook_metrics."""

    def test_shares_by_quantity_and_notional(self) -> None:
        book = OrderBook(bids=[(100.0, 2.0), (99.0, 2.0)], asks=[(101.0, 1.0)])

        metrics = orderbook_metrics(book)

        assert metrics is not None
        assert metrics.buyer_volume == 4.0
        assert metrics.seller_volume == 1.0
        assert metrics.buyer_percentage == pytest.approx(80.0)
        assert metrics.seller_percentage == pytest.approx(20.0)
        assert metrics.buyer_amount == pytest.approx(398.0)
        assert metrics.seller_amount == pytest.approx(101.0)
        assert metrics.buyer_weight == pytest.approx(398.0 / 499.0 * 100)
        assert metrics.buyer_weight + metrics.seller_weight == pytest.approx(100.0)
        assert metrics.total_bids == 2
        assert metrics.total_asks == 1

    def test_balanced_book(self) -> None:
        book = OrderBook(bids=[(10.0, 5.0)], asks=[(10.0, 5.0)])

        metrics = orderbook_metrics(book)

        assert metrics.buyer_percentage == pytest.approx(50.0)
        assert metrics.buyer_weight == pytest.approx(50.0)

    @pytest.mark.parametrize(
        "book",
        [
            OrderBook(bids=[], asks=[(1.0, 1.0)]),
            OrderBook(bids=[(1.0, 1.0)], asks=[]),
            OrderBook(bids=[(1.0, 0.0)], asks=[(1.1, 0.0)]),
        ],
    )
    def test_unusable_book(self, book: OrderBook) -> None:
        assert orderbook_metrics(book) is None
