"""Order auction-type classification.

Decaying-price (Dutch) auction orders are not detected yet: the default
classifier reports every order as a standard limit order. Support for new
auction types plugs in as another AuctionClassifier.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from market_fill.models.orders import Order


class AuctionKind(str, Enum):
    """How an order's price behaves over time."""

    STANDARD = "standard"
    DUTCH = "dutch"


class AuctionClassifier(Protocol):
    """Protocol for detecting special auction orders."""

    def classify(self, order: Order) -> AuctionKind:
        """Return the auction kind of `order`."""
        ...


class StandardOrdersOnly:
    """Classifier that treats every order as a standard limit order."""

    def classify(self, order: Order) -> AuctionKind:  # noqa: ARG002
        return AuctionKind.STANDARD


DEFAULT_AUCTION_CLASSIFIER: AuctionClassifier = StandardOrdersOnly()


def is_special_auction(order: Order, classifier: AuctionClassifier | None = None) -> bool:
    """True if `order` is anything other than a standard limit order."""
    classifier = classifier or DEFAULT_AUCTION_CLASSIFIER
    return classifier.classify(order) != AuctionKind.STANDARD


def is_dutch_auction(order: Order, classifier: AuctionClassifier | None = None) -> bool:
    classifier = classifier or DEFAULT_AUCTION_CLASSIFIER
    return classifier.classify(order) == AuctionKind.DUTCH


__all__ = [
    "AuctionKind",
    "AuctionClassifier",
    "StandardOrdersOnly",
    "DEFAULT_AUCTION_CLASSIFIER",
    "is_special_auction",
    "is_dutch_auction",
]
