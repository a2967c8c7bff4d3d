"""Models package for the arbitrage engine."""

from .process_result import SUCCESS_MESSAGE, ProcessResult

__all__ = ["ProcessResult", "SUCCESS_MESSAGE"]
