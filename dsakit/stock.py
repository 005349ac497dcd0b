"""Best time to buy and sell stock, under several trading rules."""

from __future__ import annotations

from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one sale."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    profit = 0
    for price in prices[1:]:
        lowest = min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Return the best profit from at most k buy-and-sell transactions."""
    if k < 0:
        raise ValueError("k must not be negative")
    free = [0] * (k + 1)
    holding = [0] * (k + 1)
    for price in reversed(prices):
        next_free = [0] * (k + 1)
        next_holding = [0] * (k + 1)
        for left in range(1, k + 1):
            next_free[left] = max(free[left], holding[left] - price)
            next_holding[left] = max(holding[left], free[left - 1] + price)
        free, holding = next_free, next_holding
    return free[k]


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Return the best profit from at most two transactions."""
    return max_profit_k_transactions(2, prices)


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Return the best profit when a sale forces a one-day wait before buying."""
    n = len(prices)
    free = [0] * (n + 2)
    holding = [0] * (n + 2)
    for day in reversed(range(n)):
        price = prices[day]
        free[day] = max(free[day + 1], holding[day + 1] - price)
        holding[day] = max(holding[day + 1], free[day + 2] + price)
    return free[0]


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Return the best profit when every sale costs a fixed fee."""
    free = holding = 0
    for price in reversed(prices):
        free, holding = max(free, holding - price), max(holding, free + price - fee)
    return free