"""
kitinit logging utilities.

Provides configurable logging for path classification and repository
reference parsing. Ensures authentication tokens are never logged.
"""

import logging
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kitinit.exceptions import InvalidReferenceError
    from kitinit.types.reference import ResolutionResult

# Create package-specific loggers
_root_logger = logging.getLogger("kitinit")
_resolve_logger = logging.getLogger("kitinit.resolve")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # HuggingFace user access tokens
    (re.compile(r"\bhf_[A-Za-z0-9]{8,}\b"), "[TOKEN_REDACTED]"),
    # Bearer credentials in headers
    (re.compile(r"(Bearer\s+)[A-Za-z0-9._\-]+", re.IGNORECASE), r"\1[REDACTED]"),
    # Credentials embedded in URLs
    (re.compile(r"(://)[^/@\s]+@"), r"\1[REDACTED]@"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"]?[^'\"\s,}]+['\"]?", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"token", "secret", "password", "api_key", "authorization"}


def configure_logging(
    level: int = logging.INFO,
    resolve_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure kitinit logging.

    Args:
        level: Default log level for all kitinit loggers (default: INFO)
        resolve_level: Log level for classification/parsing decisions (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from kitinit.logging import configure_logging

        # Show why inputs were treated as local or remote
        configure_logging(level=logging.INFO, resolve_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _resolve_logger.setLevel(resolve_level if resolve_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a kitinit logger.

    Args:
        name: Logger name suffix (e.g., "resolve", "cli"). If None, returns the root kitinit logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"kitinit.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces access tokens, bearer credentials and URL userinfo with
    redacted placeholders.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: token, secret, password, api_key, authorization)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sk in key_lower for sk in sensitive_keys):
            # Unset credentials are not secret
            result[key] = "[REDACTED]" if value else value
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_resolution(value: str, result: "ResolutionResult", reason: str) -> None:
    """Log a classification decision at DEBUG level."""
    if not _resolve_logger.isEnabledFor(logging.DEBUG):
        return

    shown = mask_sensitive_data(value)
    if result.is_remote:
        _resolve_logger.debug(
            "%s -> remote %s %s (%s)", shown, result.kind.value, result.identifier, reason
        )
    else:
        _resolve_logger.debug("%s -> local (%s)", shown, reason)


def log_reference_rejected(value: str, error: "InvalidReferenceError") -> None:
    """Log a rejected repository reference at DEBUG level."""
    if not _resolve_logger.isEnabledFor(logging.DEBUG):
        return

    _resolve_logger.debug(
        "rejected %s as repository reference: %s",
        mask_sensitive_data(value),
        mask_sensitive_data(error.message),
    )


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_resolution",
    "log_reference_rejected",
]
