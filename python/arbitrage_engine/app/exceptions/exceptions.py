class EngineError(Exception):
    """Base exception for arbitrage engine errors."""
    pass


class ConfigurationError(EngineError):
    """Configuration-related errors."""
    pass


class ProcessingError(EngineError):
    """Errors raised by the inner processing step."""
    pass
