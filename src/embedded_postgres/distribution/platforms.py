"""Platform detection and mapping."""
import platform

from embedded_postgres.errors import UnsupportedArchitectureError, UnsupportedPlatformError
from embedded_postgres.types import BitSize, Platform

# platform.system() values
SYSTEM_PLATFORMS = {
    "Linux": Platform.LINUX,
    "Darwin": Platform.OSX,
    "Windows": Platform.WINDOWS,
}

# platform.machine() values, lowercased
MACHINE_BITSIZES = {
    "x86_64": BitSize.B64,
    "amd64": BitSize.B64,
    "x64": BitSize.B64,
    "aarch64": BitSize.B64,
    "arm64": BitSize.B64,
    "i386": BitSize.B32,
    "i686": BitSize.B32,
    "x86": BitSize.B32,
}


def detect_platform(system: str | None = None) -> Platform:
    """Map the host operating system onto a Platform."""
    if system is None:
        system = platform.system()

    if system not in SYSTEM_PLATFORMS:
        raise UnsupportedPlatformError(system)

    return SYSTEM_PLATFORMS[system]


def detect_bitsize(machine: str | None = None) -> BitSize:
    """Map the host machine type onto a BitSize."""
    if machine is None:
        machine = platform.machine()

    bitsize = MACHINE_BITSIZES.get(machine.lower())
    if bitsize is None:
        raise UnsupportedArchitectureError(machine)

    return bitsize


def is_platform_supported() -> bool:
    """Check if current platform is supported."""
    try:
        detect_platform()
        detect_bitsize()
        return True
    except (UnsupportedPlatformError, UnsupportedArchitectureError):
        return False
