"""Resolve PostgreSQL binary bundles and describe how to launch them."""
from embedded_postgres.config import (
    Credentials,
    LaunchConfig,
    LaunchConfigBuilder,
    LocaleSpec,
    NetEndpoint,
    StorageSpec,
    TimeoutSpec,
)
from embedded_postgres.distribution import download_url, resolve_artifact
from embedded_postgres.errors import (
    EmbeddedPostgresError,
    NetworkUnavailableError,
    StorageUnavailableError,
    UnsupportedArchitectureError,
    UnsupportedArchiveFormatError,
    UnsupportedPlatformError,
)
from embedded_postgres.settings import Settings, load_settings
from embedded_postgres.types import (
    ArchiveFormat,
    ArtifactDescriptor,
    BitSize,
    Command,
    Distribution,
    Platform,
    Version,
    Versions,
)

__all__ = [
    "ArchiveFormat",
    "ArtifactDescriptor",
    "BitSize",
    "Command",
    "Credentials",
    "Distribution",
    "EmbeddedPostgresError",
    "LaunchConfig",
    "LaunchConfigBuilder",
    "LocaleSpec",
    "NetEndpoint",
    "NetworkUnavailableError",
    "Platform",
    "Settings",
    "StorageSpec",
    "StorageUnavailableError",
    "TimeoutSpec",
    "UnsupportedArchitectureError",
    "UnsupportedArchiveFormatError",
    "UnsupportedPlatformError",
    "Version",
    "Versions",
    "download_url",
    "load_settings",
    "resolve_artifact",
]
