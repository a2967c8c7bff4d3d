UNKNOWN_ERROR = "Unknown error"


def error_message(error: BaseException) -> str:
    """Return the human-readable text an error carries, or a fallback.

    Never raises, even when the error's own ``message`` or ``__str__`` does.
    """
    try:
        message = getattr(error, "message", None)
    except Exception:
        message = None
    if isinstance(message, str) and message:
        return message

    try:
        text = str(error)
    except Exception:
        return UNKNOWN_ERROR
    if text:
        return text

    return UNKNOWN_ERROR
