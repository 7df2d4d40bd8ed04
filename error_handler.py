"""
Standardized error handling utilities for consistent error management.
"""

import os
from typing import Optional, Any, Callable
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)


class SortHelperError(Exception):
    """Base exception for all table sort helper errors."""
    pass


class ConfigurationError(SortHelperError):
    """
    Sort helpers used without the context they need.

    Raised when no session name can be derived (no controller/action), when a
    template helper runs without an active sort context, or when the sort state
    is read before sort_update().
    """
    pass


class ValidationError(SortHelperError):
    """Request data rejected by validation (e.g. an unknown sort order in strict mode)."""
    pass


def log_and_reraise(
    exc: Exception,
    message: str,
    *args,
    level: str = "error",
    as_type: Optional[type] = None
) -> None:
    """
    Log an exception with context and re-raise it.

    Args:
        exc: The exception to log
        message: Log message with format placeholders
        *args: Arguments for message formatting
        level: Log level (error, warning, critical)
        as_type: Optional exception type to raise instead

    Raises:
        The original exception or as_type if specified
    """
    log_func = getattr(logger, level, logger.error)
    log_func(f"{message}: {exc}", *args)
    logger.debug("Exception details", exc_info=True)

    if as_type:
        raise as_type(f"{message}: {exc}") from exc
    raise


def validate_environment_variable(
    var_name: str,
    default: Any,
    validator: Optional[Callable[[Any], bool]] = None,
    converter: Optional[Callable[[str], Any]] = None
) -> Any:
    """
    Safely get and validate an environment variable.

    Args:
        var_name: Name of the environment variable
        default: Default value if not set or invalid
        validator: Optional validation function
        converter: Optional conversion function (e.g., int, float)

    Returns:
        The validated and converted environment variable value
    """
    raw_value = os.getenv(var_name)

    if raw_value is None:
        logger.debug(f"Environment variable {var_name} not set, using default: {default}")
        return default

    if converter:
        try:
            value = converter(raw_value)
        except (ValueError, TypeError) as exc:
            logger.warning(
                f"Invalid {var_name}='{raw_value}': {exc}. Using default: {default}"
            )
            return default
    else:
        value = raw_value

    if validator and not validator(value):
        logger.warning(
            f"Invalid {var_name}='{value}' failed validation. Using default: {default}"
        )
        return default

    logger.debug(f"Using {var_name}={value}")
    return value
