"""Map a distribution onto the binary bundle that ships it.

Everything here is a pure function of its arguments with no filesystem or
network access. Values outside the known enumerations are rejected, never
defaulted.
"""

from embedded_postgres.errors import (
    UnsupportedArchitectureError,
    UnsupportedArchiveFormatError,
    UnsupportedPlatformError,
)
from embedded_postgres.types import (
    ArchiveFormat,
    ArtifactDescriptor,
    BitSize,
    Command,
    Distribution,
    Platform,
    Version,
)

DOWNLOAD_BASE_URL = "https://get.enterprisedb.com/postgresql/"

# Bundles unpack into this directory
BUNDLE_ROOT = "pgsql"
EXECUTABLE_DIR = "bin"


def executable_file_name(command: Command, platform: Platform) -> str:
    """File name of `command` on `platform`."""
    match platform:
        case Platform.LINUX | Platform.OSX:
            return command.command_name
        case Platform.WINDOWS:
            return f"{command.command_name}.exe"
        case _:
            raise UnsupportedPlatformError(platform)


def archive_format(platform: Platform) -> ArchiveFormat:
    """Archive container used for `platform` bundles."""
    match platform:
        case Platform.LINUX:
            return ArchiveFormat.TGZ
        case Platform.OSX | Platform.WINDOWS:
            return ArchiveFormat.ZIP
        case _:
            raise UnsupportedPlatformError(platform)


def archive_extension(fmt: ArchiveFormat) -> str:
    if not isinstance(fmt, ArchiveFormat):
        raise UnsupportedArchiveFormatError(fmt)
    return fmt.value


def platform_tag(platform: Platform) -> str:
    match platform:
        case Platform.LINUX:
            return "linux"
        case Platform.WINDOWS:
            return "windows"
        case Platform.OSX:
            return "osx"
        case _:
            raise UnsupportedPlatformError(platform)


def architecture_suffix(platform: Platform, bitsize: BitSize) -> str:
    """Suffix marking 64 bit bundles.

    Only Linux and Windows publish separate x64 bundles; OS X bundles carry no
    suffix at either width and 32 bit bundles never do.
    """
    match bitsize:
        case BitSize.B32:
            if platform not in (Platform.LINUX, Platform.WINDOWS, Platform.OSX):
                raise UnsupportedPlatformError(platform)
            return ""
        case BitSize.B64:
            match platform:
                case Platform.LINUX | Platform.WINDOWS:
                    return "-x64"
                case Platform.OSX:
                    return ""
                case _:
                    raise UnsupportedPlatformError(platform)
        case _:
            raise UnsupportedArchitectureError(bitsize, platform)


def archive_path_fragment(version: Version, platform: Platform, bitsize: BitSize) -> str:
    """Download path of the bundle, e.g. ``postgresql-9.6.3-linux-x64-binaries.tar.gz``."""
    extension = archive_extension(archive_format(platform))
    suffix = architecture_suffix(platform, bitsize)
    return (
        f"postgresql-{version.download_path}-{platform_tag(platform)}{suffix}"
        f"-binaries.{extension}"
    )


def in_archive_executable_path(command: Command, platform: Platform) -> str:
    """Path of the executable relative to the bundle root."""
    return f"{EXECUTABLE_DIR}/{executable_file_name(command, platform)}"


def archive_entry_path(command: Command, platform: Platform) -> str:
    """Archive member name of the executable."""
    return f"{BUNDLE_ROOT}/{in_archive_executable_path(command, platform)}"


def resolve_artifact(distribution: Distribution, command: Command) -> ArtifactDescriptor:
    """Describe the bundle to fetch for `distribution` and where `command` lives in it."""
    return ArtifactDescriptor(
        archive_path_fragment=archive_path_fragment(
            distribution.version, distribution.platform, distribution.bitsize
        ),
        archive_format=archive_format(distribution.platform),
        in_archive_executable_path=in_archive_executable_path(
            command, distribution.platform
        ),
    )


def download_url(distribution: Distribution, base_url: str = DOWNLOAD_BASE_URL) -> str:
    """Full download URL of the bundle for `distribution`."""
    base = base_url
    if not base.endswith("/"):
        base += "/"
    fragment = archive_path_fragment(
        distribution.version, distribution.platform, distribution.bitsize
    )
    return f"{base}{fragment}"
