"""Launch configuration model."""
from embedded_postgres.config.launch import (
    Credentials,
    LaunchConfig,
    LaunchConfigBuilder,
    TimeoutSpec,
)
from embedded_postgres.config.locale import LocaleSpec
from embedded_postgres.config.network import NetEndpoint
from embedded_postgres.config.storage import StorageSpec

__all__ = [
    "Credentials",
    "LaunchConfig",
    "LaunchConfigBuilder",
    "LocaleSpec",
    "NetEndpoint",
    "StorageSpec",
    "TimeoutSpec",
]
