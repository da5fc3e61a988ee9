"""Tests for the greedy market order allocator."""

from decimal import Decimal

import pytest

from market_fill.errors import InvalidArgument, UnknownToken
from market_fill.models.orders import FillPlan, OrderSide
from market_fill.orders.allocator import (
    allocate,
    build_market_orders,
    opposite_side,
    rank_candidates,
    to_taker_asset_amount,
)
from tests.helpers import (
    BASE,
    DAI,
    QUOTE,
    TENTHS,
    USDC,
    WETH,
    WHOLE_BASE,
    WHOLE_QUOTE,
    make_candidate,
)


def make_bid(
    price: str,
    size: int,
    salt: int = 1,
    filled: int | None = None,
    side: OrderSide | None = None,
):
    """A bid: the maker offers QUOTE for BASE."""
    return make_candidate(
        price=price,
        size=size,
        filled=filled,
        maker_token=QUOTE,
        taker_token=BASE,
        salt=salt,
        side=side,
    )


class TestRanking:
    """Tests for best-price-first ordering."""

    def test_buy_ranks_ascending(self):
        """BUY takes the cheapest asks first."""
        candidates = [make_candidate("3", 10, salt=1), make_candidate("1", 10, salt=2)]
        ranked = rank_candidates(OrderSide.BUY, candidates)
        assert [c.price for c in ranked] == [Decimal("1"), Decimal("3")]

    def test_sell_ranks_descending(self):
        """SELL takes the highest bids first."""
        candidates = [make_bid("1", 10, salt=1), make_bid("3", 10, salt=2)]
        ranked = rank_candidates(OrderSide.SELL, candidates)
        assert [c.price for c in ranked] == [Decimal("3"), Decimal("1")]

    @pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
    def test_ties_keep_input_order(self, side):
        """Candidates at the same price keep their relative input order."""
        candidates = [
            make_candidate("2", 10, salt=1),
            make_candidate("5", 10, salt=2),
            make_candidate("2", 10, salt=3),
            make_candidate("5", 10, salt=4),
        ]
        ranked = rank_candidates(side, candidates)
        salts = [int(c.raw_order.salt) for c in ranked]
        if side == OrderSide.BUY:
            assert salts == [1, 3, 2, 4]
        else:
            assert salts == [2, 4, 1, 3]

    def test_input_not_mutated(self):
        """Ranking returns a new list and leaves the caller's list alone."""
        candidates = [make_candidate("3", 10, salt=1), make_candidate("1", 10, salt=2)]
        original = list(candidates)
        rank_candidates(OrderSide.BUY, candidates)
        assert candidates == original


class TestAllocateBuy:
    """Tests for BUY-side allocation (amounts returned in taker-asset units)."""

    def test_two_candidates_partial_second(self, tokens):
        """Fill the cheaper ask fully, then 60 of the next one."""
        cheap = make_candidate("2", 40, salt=1)
        dear = make_candidate("3", 80, salt=2)

        plan = allocate(OrderSide.BUY, 100, [dear, cheap], tokens)

        assert plan.orders == (cheap.raw_order, dear.raw_order)
        assert plan.base_amounts == (40, 60)
        assert plan.amounts == (80, 180)
        assert plan.fully_filled

    def test_converts_between_token_decimals(self, tokens):
        """1 WETH at 2500 USDC/WETH becomes 2500 USDC in USDC base units."""
        ask = make_candidate("2500", 10**18, maker_token=WETH, taker_token=USDC)

        plan = allocate(OrderSide.BUY, 10**18, [ask], tokens)

        assert plan.amounts == (2500 * 10**6,)
        assert plan.fully_filled

    def test_dust_rounds_up_to_one_base_unit(self, tokens):
        """1 wei of WETH at 2500 is a fraction of a USDC base unit, rounded up."""
        ask = make_candidate("2500", 10**18, maker_token=WETH, taker_token=USDC)

        plan = allocate(OrderSide.BUY, 1, [ask], tokens)

        assert plan.amounts == (1,)
        assert plan.base_amounts == (1,)

    def test_fractional_quote_rounds_up(self, tokens):
        """3 whole units at 1.5 is 4.5 quote units, ceiled to 5."""
        ask = make_candidate("1.5", 10, maker_token=WHOLE_BASE, taker_token=WHOLE_QUOTE)

        plan = allocate(OrderSide.BUY, 3, [ask], tokens)

        assert plan.amounts == (5,)

    def test_no_intermediate_rounding_before_conversion(self, tokens):
        """The maker->taker conversion is exact; only the result is ceiled.

        5 base units of a 1-decimal token are 0.5 tokens. At price 3 that is
        1.5 quote tokens, returned as 2. Rounding the 0.5 up or down first
        would give 3 or 0.
        """
        ask = make_candidate("3", 100, maker_token=TENTHS, taker_token=WHOLE_QUOTE)

        plan = allocate(OrderSide.BUY, 5, [ask], tokens)

        assert plan.amounts == (2,)

    def test_unknown_token_raises(self, tokens):
        """Missing decimals are an error, never a default."""
        unknown = "0x" + "99" * 20
        ask = make_candidate("2", 10, maker_token=unknown, taker_token=DAI)

        with pytest.raises(UnknownToken):
            allocate(OrderSide.BUY, 5, [ask], tokens)

    def test_uses_available_not_size(self, tokens):
        """Already-filled amounts are not offered again."""
        ask = make_candidate("2", 40, filled=30, salt=1)
        other = make_candidate("3", 80, salt=2)

        plan = allocate(OrderSide.BUY, 20, [ask, other], tokens)

        assert plan.base_amounts == (10, 10)
        assert plan.amounts == (20, 30)
        assert plan.fully_filled


class TestAllocateSell:
    """Tests for SELL-side allocation (amounts in base-asset units)."""

    def test_insufficient_liquidity(self, tokens):
        """Total available 30 against 50 requested: take everything, not filled."""
        bids = [make_bid("2", 10, salt=1), make_bid("3", 20, salt=2)]

        plan = allocate(OrderSide.SELL, 50, bids, tokens)

        assert not plan.fully_filled
        assert plan.orders == (bids[1].raw_order, bids[0].raw_order)
        assert plan.amounts == (20, 10)
        assert sum(plan.amounts) == 30

    def test_stops_once_target_reached(self, tokens):
        """Worse-priced bids are not touched once the target is covered."""
        bids = [make_bid("3", 50, salt=1), make_bid("2", 50, salt=2)]

        plan = allocate(OrderSide.SELL, 50, bids, tokens)

        assert plan.orders == (bids[0].raw_order,)
        assert plan.amounts == (50,)
        assert plan.fully_filled

    def test_sell_needs_no_token_lookup(self):
        """SELL amounts stay in base units, so unknown tokens are fine."""
        unknown = "0x" + "99" * 20
        bid = make_candidate("2", 10, maker_token=unknown, taker_token=unknown)

        plan = allocate(OrderSide.SELL, 5, [bid])

        assert plan.amounts == (5,)


class TestEdgeCases:
    """Tests for empty inputs and invalid arguments."""

    def test_empty_candidates_nonzero_target(self, tokens):
        plan = allocate(OrderSide.BUY, 10, [], tokens)
        assert plan.orders == ()
        assert plan.amounts == ()
        assert not plan.fully_filled

    @pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
    def test_zero_target(self, side, tokens):
        """A zero target is trivially filled by an empty plan."""
        plan = allocate(side, 0, [make_candidate("2", 10)], tokens)
        assert plan.orders == ()
        assert plan.fully_filled

    def test_empty_candidates_zero_target(self, tokens):
        assert allocate(OrderSide.SELL, 0, [], tokens).fully_filled

    def test_negative_target_rejected(self, tokens):
        with pytest.raises(InvalidArgument):
            allocate(OrderSide.BUY, -1, [], tokens)

    def test_plan_unpacks_as_triple(self, tokens):
        """FillPlan unpacks as (orders, amounts, fully_filled)."""
        candidate = make_candidate("2", 40)
        orders, amounts, fully_filled = allocate(OrderSide.BUY, 40, [candidate], tokens)
        assert orders == [candidate.raw_order]
        assert amounts == [80]
        assert fully_filled

    def test_alias(self):
        assert build_market_orders is allocate

    def test_candidates_on_the_book_side_accepted(self, tokens):
        """A BUY takes asks (SELL side); a SELL takes bids (BUY side)."""
        ask = make_candidate("2", 40, side=OrderSide.SELL)
        bid = make_bid("2", 40, side=OrderSide.BUY)

        assert allocate(OrderSide.BUY, 40, [ask], tokens).fully_filled
        assert allocate(OrderSide.SELL, 40, [bid], tokens).fully_filled

    @pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
    def test_candidate_on_same_side_rejected(self, side, tokens):
        candidate = make_candidate("2", 40, side=side)
        with pytest.raises(InvalidArgument, match="cannot take"):
            allocate(side, 40, [candidate], tokens)

    def test_opposite_side(self):
        assert opposite_side(OrderSide.BUY) == OrderSide.SELL
        assert opposite_side(OrderSide.SELL) == OrderSide.BUY

    def test_result_is_plan(self, tokens):
        assert isinstance(allocate(OrderSide.SELL, 0, [], tokens), FillPlan)


BOOKS = [
    [("2", 40), ("3", 80)],
    [("1", 5), ("1", 5), ("1", 5)],
    [("7", 1), ("2", 100), ("4", 3), ("2", 0)],
    [("1.25", 17), ("0.5", 9), ("9", 33), ("3", 2)],
]
TARGETS = [0, 1, 7, 15, 40, 100, 1000]


class TestInvariants:
    """Conservation, best-price-first and exhaustion over a grid of books."""

    @pytest.mark.parametrize("book", BOOKS)
    @pytest.mark.parametrize("target", TARGETS)
    @pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
    def test_conservation(self, side, target, book, tokens):
        """Base fills never exceed the target, and equal it when fully filled."""
        candidates = [make_candidate(p, s, salt=i) for i, (p, s) in enumerate(book)]

        plan = allocate(side, target, candidates, tokens)

        assert plan.total_base_amount <= target
        assert plan.fully_filled == (plan.total_base_amount == target)

    @pytest.mark.parametrize("book", BOOKS)
    @pytest.mark.parametrize("target", TARGETS)
    @pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
    def test_chosen_orders_are_ranked_prefix(self, side, target, book, tokens):
        candidates = [make_candidate(p, s, salt=i) for i, (p, s) in enumerate(book)]

        plan = allocate(side, target, candidates, tokens)

        ranked = [c.raw_order for c in rank_candidates(side, candidates)]
        assert list(plan.orders) == ranked[: len(plan.orders)]

    @pytest.mark.parametrize("book", BOOKS)
    @pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
    def test_exhaustion_takes_everything(self, side, book, tokens):
        """Asking for more than the book holds takes every candidate in full."""
        candidates = [make_candidate(p, s, salt=i) for i, (p, s) in enumerate(book)]
        total = sum(c.available for c in candidates)

        plan = allocate(side, total + 1, candidates, tokens)

        assert not plan.fully_filled
        assert len(plan.orders) == len(candidates)
        ranked = rank_candidates(side, candidates)
        assert plan.base_amounts == tuple(c.available for c in ranked)


class TestTakerAssetConversion:
    """Tests for the per-candidate BUY conversion helper."""

    def test_exact_result(self, tokens):
        ask = make_candidate("2500.5", 10**18, maker_token=WETH, taker_token=USDC)
        assert to_taker_asset_amount(ask, 10**15, tokens) == Decimal("2500500")

    def test_fractional_result_is_not_rounded(self, tokens):
        ask = make_candidate("1.5", 10, maker_token=WHOLE_BASE, taker_token=WHOLE_QUOTE)
        assert to_taker_asset_amount(ask, 3, tokens) == Decimal("4.5")
