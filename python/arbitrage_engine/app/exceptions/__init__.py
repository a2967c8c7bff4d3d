"""Exceptions package for the arbitrage engine."""

from .exceptions import ConfigurationError, EngineError, ProcessingError

__all__ = ["EngineError", "ConfigurationError", "ProcessingError"]
