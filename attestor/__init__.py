"""Felts, epoch queries, retry budgets and external signing helpers for Starknet staking."""

__version__ = "0.2.7"