"""Services package for the arbitrage engine."""

from .arbitrage_engine import ArbitrageEngine

__all__ = ["ArbitrageEngine"]
