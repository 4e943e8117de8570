"""Core type definitions"""

from dataclasses import dataclass
from enum import Enum


class Platform(Enum):
    LINUX = "linux"
    OSX = "osx"
    WINDOWS = "windows"


class BitSize(Enum):
    B32 = 32
    B64 = 64


class ArchiveFormat(Enum):
    """Archive container of a binary bundle, valued by its file extension"""

    TGZ = "tar.gz"
    ZIP = "zip"


class Command(Enum):
    """Executables shipped inside a PostgreSQL binary bundle"""

    POSTGRES = "postgres"
    INIT_DB = "initdb"
    PG_CTL = "pg_ctl"
    CREATE_DB = "createdb"
    PSQL = "psql"
    PG_DUMP = "pg_dump"
    PG_RESTORE = "pg_restore"

    @property
    def command_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class Version:
    """PostgreSQL release as it appears in download paths"""

    download_path: str

    def __str__(self) -> str:
        return self.download_path


class Versions(Enum):
    """Known binary releases"""

    V11_1 = Version("11.1-1")
    V10_6 = Version("10.6-1")
    V9_6_11 = Version("9.6.11-1")
    PRODUCTION = Version("11.1-1")

    @property
    def download_path(self) -> str:
        return self.value.download_path


@dataclass(frozen=True)
class Distribution:
    """Version, platform and architecture identifying one binary bundle"""

    version: Version
    platform: Platform
    bitsize: BitSize

    @classmethod
    def detect(cls, version: "Version | Versions") -> "Distribution":
        """Distribution of `version` for the running host."""
        from embedded_postgres.distribution.platforms import (
            detect_bitsize,
            detect_platform,
        )

        if isinstance(version, Versions):
            version = version.value
        return cls(version=version, platform=detect_platform(), bitsize=detect_bitsize())


@dataclass(frozen=True)
class ArtifactDescriptor:
    """What to download and where the executable sits inside it"""

    archive_path_fragment: str
    archive_format: ArchiveFormat
    in_archive_executable_path: str
