"""Error handling for embedded PostgreSQL resolution and configuration."""
from typing import Any, Dict, Optional

from embedded_postgres.logging import get_logger


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger=None
) -> None:
    """Log an error with context."""
    logger = logger or get_logger(__name__)

    error_info = {
        "event": "embedded_postgres_error",
        "error_type": error.__class__.__name__,
        "error_message": str(error)
    }
    if context:
        error_info["context"] = context
    if isinstance(error, EmbeddedPostgresError):
        error_info["details"] = error.details

    logger.error(error_info)


class EmbeddedPostgresError(Exception):
    """Base error class for embedded PostgreSQL."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ResolutionError(EmbeddedPostgresError, ValueError):
    """Input outside the supported distribution matrix."""


class UnsupportedPlatformError(ResolutionError):
    """Platform with no published binaries."""
    def __init__(self, platform: Any):
        super().__init__(
            f"Unknown platform {platform}",
            details={"platform": str(platform)}
        )


class UnsupportedArchitectureError(ResolutionError):
    """Bit size with no published binaries."""
    def __init__(self, bitsize: Any, platform: Any = None):
        message = f"Unknown bit size {bitsize}"
        if platform is not None:
            message += f" for platform {platform}"
        super().__init__(
            message,
            details={"bitsize": str(bitsize), "platform": str(platform)}
        )


class UnsupportedArchiveFormatError(ResolutionError):
    """Archive container the resolver cannot name."""
    def __init__(self, archive_format: Any):
        super().__init__(
            f"Unknown archive format {archive_format}",
            details={"archive_format": str(archive_format)}
        )


class ConfigurationError(EmbeddedPostgresError, RuntimeError):
    """Host environment refused a launch configuration resource."""


class StorageUnavailableError(ConfigurationError):
    """Database directory could not be allocated or verified."""
    def __init__(self, message: str, directory: Any = None):
        super().__init__(message, details={"directory": str(directory)})


class NetworkUnavailableError(ConfigurationError):
    """Host address or free port could not be obtained."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)
