"""
Certificate cache exceptions.

Every cache backend reports failures through this hierarchy so that the
layered cache can tell a miss apart from a broken layer.
"""

from typing import Optional, Any, Dict


class CacheError(Exception):
    """Base exception for certificate cache errors.

    All cache operations raise this or one of its subclasses.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.key = key
        self.details = details or {}
        super().__init__(self.message)


class CacheMiss(CacheError):
    """Raised by get when the key is not stored in the cache."""

    def __init__(self, key: Optional[str] = None, message: str = "certificate cache miss"):
        if key is not None:
            message = f"{message}: {key}"
        super().__init__(message=message, key=key)


class BackendError(CacheError):
    """Raised when a storage backend fails to complete an operation."""

    def __init__(
        self,
        operation: str,
        key: Optional[str] = None,
        backend: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {"operation": operation}
        if backend:
            details["backend"] = backend
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        message = f"could not {operation} {key!r}"
        if backend:
            message = f"{message} in {backend}"
        if original_error:
            message = f"{message}: {original_error}"

        super().__init__(message=message, key=key, details=details)
        # Keep the driver error reachable for debugging
        if original_error:
            self.__cause__ = original_error


class ConfigurationError(CacheError):
    """Raised when a cache is configured with invalid values."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
    ):
        details: Dict[str, Any] = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)

        super().__init__(message=message, details=details)
