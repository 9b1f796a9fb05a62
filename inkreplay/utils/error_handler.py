from .log_utils import log_error, log_warning


def handle_error(message, exit_code=1):
    """Standardized error handling (delegates to colored log_error)."""
    log_error(message)  # Always exits; exit_code ignored for simplicity


def report_exception(context, exc, strict=False):
    """Log a failure isolated at the simulator boundary.

    Args:
        context: Short description of what was being processed
        exc: The caught exception
        strict: Re-raise after logging (debug builds fail fast)
    """
    log_warning(f"{context}: {type(exc).__name__}: {exc}")
    if strict:
        raise exc
