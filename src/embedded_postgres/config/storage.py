"""Database storage location."""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from embedded_postgres.errors import StorageUnavailableError
from embedded_postgres.logging import get_logger
from embedded_postgres.settings import load_settings
from embedded_postgres.utils.fs import create_temp_dir, ensure_dir

logger = get_logger(__name__)

TEMP_DIR_PREFIX = "embedpostgres-db"


@dataclass(frozen=True)
class StorageSpec:
    """Data directory and database name.

    `is_temporary` tells the process lifecycle owner that the directory was
    allocated here and should be removed once the server is gone. A directory
    supplied by the caller is never temporary.
    """
    directory: Path
    database_name: str
    is_temporary: bool

    @classmethod
    def create(
        cls,
        database_name: str,
        directory: Optional[Union[str, Path]] = None,
        temp_root: Optional[Path] = None,
    ) -> "StorageSpec":
        """Allocate a temp data directory, or check/create the given one."""
        if not directory:
            root = temp_root if temp_root is not None else load_settings().temp_root
            try:
                path = create_temp_dir(root, TEMP_DIR_PREFIX)
            except OSError as e:
                raise StorageUnavailableError(
                    f"Failed to create temporary database directory under {root}: {e}",
                    directory=root,
                ) from e
            is_temporary = True
        else:
            try:
                path = ensure_dir(Path(directory))
            except OSError as e:
                raise StorageUnavailableError(
                    f"Database directory {directory} is unavailable: {e}",
                    directory=directory,
                ) from e
            is_temporary = False

        logger.info({
            "event": "storage_created",
            "database": database_name,
            "directory": str(path),
            "temporary": is_temporary,
        })

        return cls(directory=path, database_name=database_name, is_temporary=is_temporary)

    def build_command_line(self) -> List[str]:
        return ["-D", str(self.directory)]
