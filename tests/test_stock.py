import pytest

from dsakit.stock import (
    max_profit,
    max_profit_k_transactions,
    max_profit_two_transactions,
    max_profit_with_cooldown,
    max_profit_with_fee,
)

SAMPLES = [
    [7, 1, 5, 3, 6, 4],
    [3, 3, 5, 0, 0, 3, 1, 4],
    [1, 2, 3, 4, 5],
    [7, 6, 4, 3, 1],
    [1, 3, 2, 8, 4, 9],
    [2, 4, 1],
]


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices():
    assert max_profit([7, 6, 4, 3, 1]) == max_profit([7])


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


def test_two_transactions_example():
    assert max_profit_two_transactions([3, 3, 5, 0, 0, 3, 1, 4]) == 6


@pytest.mark.parametrize("prices", SAMPLES)
def test_two_transactions_relations(prices):
    two = max_profit_two_transactions(prices)
    assert two == max_profit_k_transactions(2, prices)
    assert two >= max_profit(prices)


@pytest.mark.parametrize("prices", SAMPLES)
def test_one_transaction_matches_single_trade(prices):
    assert max_profit_k_transactions(1, prices) == max_profit(prices)


@pytest.mark.parametrize("prices", SAMPLES)
def test_more_transactions_never_hurt(prices):
    profits = [max_profit_k_transactions(k, prices) for k in range(5)]
    assert profits == sorted(profits)
    assert profits[0] == max_profit_k_transactions(0, [])


def test_k_transactions_empty_prices():
    assert max_profit_k_transactions(3, []) == max_profit_k_transactions(0, [1])


def test_k_transactions_negative_raises():
    with pytest.raises(ValueError):
        max_profit_k_transactions(-1, [1, 2])


def test_cooldown_example():
    assert max_profit_with_cooldown([1, 2, 3, 0, 2]) == 3


@pytest.mark.parametrize("prices", SAMPLES)
def test_cooldown_bounded_by_unlimited(prices):
    cooldown = max_profit_with_cooldown(prices)
    assert max_profit(prices) <= cooldown <= max_profit_k_transactions(len(prices), prices)


def test_cooldown_rising_prices_single_trade():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_with_cooldown(prices) == max_profit(prices)


@pytest.mark.parametrize("prices", SAMPLES)
def test_fee_zero_is_unlimited_trading(prices):
    assert max_profit_with_fee(prices, 0) == max_profit_k_transactions(len(prices), prices)


@pytest.mark.parametrize("prices", SAMPLES)
def test_higher_fee_never_helps(prices):
    profits = [max_profit_with_fee(prices, fee) for fee in range(6)]
    assert profits == sorted(profits, reverse=True)


def test_fee_larger_than_any_gain():
    prices = [1, 3, 2, 8, 4, 9]
    assert max_profit_with_fee(prices, max(prices)) == max_profit_with_fee([], 0)