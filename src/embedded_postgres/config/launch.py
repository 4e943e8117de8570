"""Launch configuration for the PostgreSQL executables.

A `LaunchConfig` bundles everything a process launcher needs: the version to
run, where it listens, where its data lives, locale, credentials and how long
to wait for startup. All parts are immutable; `with_args` and the builder
return new values rather than changing existing ones.
"""
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from embedded_postgres.config.locale import LocaleSpec
from embedded_postgres.config.network import NetEndpoint
from embedded_postgres.config.storage import StorageSpec
from embedded_postgres.logging import get_logger
from embedded_postgres.types import Command, Version, Versions

logger = get_logger(__name__)

DEFAULT_DATABASE_NAME = "postgres"
DEFAULT_STARTUP_TIMEOUT_MS = 2000


@dataclass(frozen=True)
class Credentials:
    username: str
    password: Optional[str] = None

    def build_command_line(self) -> List[str]:
        return ["-U", self.username]

    def environment(self) -> Dict[str, str]:
        env = {"PGUSER": self.username}
        if self.password is not None:
            env["PGPASSWORD"] = self.password
        return env

    def __repr__(self) -> str:
        masked = None if self.password is None else "***"
        return f"Credentials(username={self.username!r}, password={masked!r})"


@dataclass(frozen=True)
class TimeoutSpec:
    """Startup wait, enforced by the process supervisor"""
    startup_timeout_ms: int = DEFAULT_STARTUP_TIMEOUT_MS


def _as_version(version: Union[Version, Versions]) -> Version:
    if isinstance(version, Versions):
        return version.value
    return version


@dataclass(frozen=True)
class LaunchConfig:
    version: Version
    network: NetEndpoint
    storage: StorageSpec
    locale: LocaleSpec = field(default_factory=LocaleSpec)
    timeout: TimeoutSpec = field(default_factory=TimeoutSpec)
    credentials: Optional[Credentials] = None
    args: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "version", _as_version(self.version))
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def create(
        cls,
        version: Union[Version, Versions],
        network: Optional[NetEndpoint] = None,
        storage: Optional[StorageSpec] = None,
        locale: Optional[LocaleSpec] = None,
        timeout: Optional[TimeoutSpec] = None,
        credentials: Optional[Credentials] = None,
        temp_root: Optional[Path] = None,
    ) -> "LaunchConfig":
        """Config for `version`, building default parts for the ones not given."""
        if storage is None:
            storage = StorageSpec.create(DEFAULT_DATABASE_NAME, temp_root=temp_root)
        if network is None:
            network = NetEndpoint.create()

        config = cls(
            version=version,
            network=network,
            storage=storage,
            locale=locale or LocaleSpec(),
            timeout=timeout or TimeoutSpec(),
            credentials=credentials,
        )

        logger.info({
            "event": "launch_config_created",
            "version": config.version.download_path,
            "host": network.host,
            "port": network.port,
            "data_dir": str(storage.directory),
        })

        return config

    @classmethod
    def defaults(cls, version: Union[Version, Versions]) -> "LaunchConfig":
        return cls.create(version)

    def with_args(self, *args: str) -> "LaunchConfig":
        """Copy of this config with `args` appended to the extra arguments."""
        return replace(self, args=self.args + tuple(args))

    @property
    def working_directory(self) -> Path:
        return self.storage.directory

    def command_line(self, command: Command) -> List[str]:
        """Arguments for running `command` against this configuration."""
        credentials = self.credentials.build_command_line() if self.credentials else []

        match command:
            case Command.POSTGRES:
                cmd = self.network.build_command_line() + self.storage.build_command_line()
            case Command.INIT_DB:
                cmd = (
                    self.storage.build_command_line()
                    + credentials
                    + self.locale.build_command_line()
                )
            case Command.PG_CTL:
                cmd = self.storage.build_command_line()
            case Command.CREATE_DB | Command.PSQL | Command.PG_DUMP | Command.PG_RESTORE:
                cmd = self.network.build_command_line() + credentials
            case _:
                raise ValueError(f"Unknown command: {command}")

        return cmd + list(self.args)

    def environment(self) -> Dict[str, str]:
        """libpq environment variables describing this configuration."""
        env = {
            "PGHOST": self.network.host,
            "PGPORT": str(self.network.port),
            "PGDATA": str(self.storage.directory),
            "PGDATABASE": self.storage.database_name,
        }
        if self.credentials:
            env.update(self.credentials.environment())
        return env


class LaunchConfigBuilder:
    """Fluent construction of a `LaunchConfig`.

    Parts left unset are created with their defaults in `build`. The builder is
    single owner; `build` may be called repeatedly and every call returns an
    independent config.
    """

    def __init__(self, version: Union[Version, Versions] = Versions.PRODUCTION):
        self._version = _as_version(version)
        self._network: Optional[NetEndpoint] = None
        self._storage: Optional[StorageSpec] = None
        self._locale: Optional[LocaleSpec] = None
        self._timeout: Optional[TimeoutSpec] = None
        self._credentials: Optional[Credentials] = None
        self._temp_root: Optional[Path] = None
        self._args: List[str] = []

    def version(self, version: Union[Version, Versions]) -> "LaunchConfigBuilder":
        self._version = _as_version(version)
        return self

    def network(self, network: NetEndpoint) -> "LaunchConfigBuilder":
        self._network = network
        return self

    def storage(self, storage: StorageSpec) -> "LaunchConfigBuilder":
        self._storage = storage
        return self

    def locale(self, locale: LocaleSpec) -> "LaunchConfigBuilder":
        self._locale = locale
        return self

    def timeout(self, timeout: TimeoutSpec) -> "LaunchConfigBuilder":
        self._timeout = timeout
        return self

    def credentials(self, credentials: Optional[Credentials]) -> "LaunchConfigBuilder":
        self._credentials = credentials
        return self

    def temp_root(self, temp_root: Path) -> "LaunchConfigBuilder":
        self._temp_root = temp_root
        return self

    def with_args(self, *args: str) -> "LaunchConfigBuilder":
        self._args.extend(args)
        return self

    def build(self) -> LaunchConfig:
        config = LaunchConfig.create(
            self._version,
            network=self._network,
            storage=self._storage,
            locale=self._locale,
            timeout=self._timeout,
            credentials=self._credentials,
            temp_root=self._temp_root,
        )
        return config.with_args(*self._args)
