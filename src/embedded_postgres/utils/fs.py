import tempfile
from pathlib import Path

from fuuid import b58_fuuid

from embedded_postgres.logging import get_logger

logger = get_logger(__name__)


def create_temp_dir(root: Path, prefix: str) -> Path:
    """Create a uniquely named directory under `root` and return its absolute path.

    The directory is not removed automatically; whoever owns it cleans it up.
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    path = Path(tempfile.mkdtemp(prefix=f"{prefix}-{b58_fuuid()}-", dir=root)).resolve()

    logger.debug({"event": "temp_dir_created", "root": str(root), "path": str(path)})

    return path


def ensure_dir(path: Path) -> Path:
    """Make sure `path` is a directory, creating it and its parents if absent."""
    path = Path(path).expanduser()
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(f"{path} exists and is not a directory")

    path.mkdir(parents=True, exist_ok=True)

    logger.debug({"event": "dir_ensured", "path": str(path)})

    return path.resolve()
