"""Binary distribution resolution."""
from embedded_postgres.distribution.platforms import (
    detect_bitsize,
    detect_platform,
    is_platform_supported,
)
from embedded_postgres.distribution.resolver import (
    archive_entry_path,
    archive_format,
    archive_path_fragment,
    download_url,
    executable_file_name,
    in_archive_executable_path,
    resolve_artifact,
)

__all__ = [
    "detect_bitsize",
    "detect_platform",
    "is_platform_supported",
    "archive_entry_path",
    "archive_format",
    "archive_path_fragment",
    "download_url",
    "executable_file_name",
    "in_archive_executable_path",
    "resolve_artifact",
]
