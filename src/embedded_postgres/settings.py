"""Download location and filesystem roots."""
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from embedded_postgres.distribution.resolver import DOWNLOAD_BASE_URL, download_url
from embedded_postgres.types import Distribution

TEMP_DIR_ENV = "EMBEDDED_POSTGRES_TEMP_DIR"
DOWNLOAD_URL_ENV = "EMBEDDED_POSTGRES_DOWNLOAD_URL"


@dataclass(frozen=True)
class Settings:
    """Roots handed explicitly to storage allocation and URL building"""
    temp_root: Path
    download_base_url: str = DOWNLOAD_BASE_URL

    def download_url(self, distribution: Distribution) -> str:
        """Bundle URL for `distribution` under the configured download base."""
        return download_url(distribution, self.download_base_url)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment, falling back to platform defaults."""
    if environ is None:
        environ = os.environ

    temp_root = environ.get(TEMP_DIR_ENV) or tempfile.gettempdir()
    base_url = environ.get(DOWNLOAD_URL_ENV) or DOWNLOAD_BASE_URL
    if not base_url.endswith("/"):
        base_url += "/"

    return Settings(temp_root=Path(temp_root), download_base_url=base_url)
