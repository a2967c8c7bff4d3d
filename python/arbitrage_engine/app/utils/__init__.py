from .error_utils import UNKNOWN_ERROR, error_message

__all__ = ["error_message", "UNKNOWN_ERROR"]
