from pathlib import Path
from unittest.mock import patch

from embedded_postgres.settings import DOWNLOAD_BASE_URL, load_settings
from embedded_postgres.types import BitSize, Distribution, Platform


def test_defaults():
    """Test platform defaults when nothing is overridden"""
    with patch("tempfile.gettempdir", return_value="/tmp"):
        settings = load_settings({})

    assert settings.temp_root == Path("/tmp")
    assert settings.download_base_url == DOWNLOAD_BASE_URL


def test_overrides():
    settings = load_settings({
        "EMBEDDED_POSTGRES_TEMP_DIR": "/scratch",
        "EMBEDDED_POSTGRES_DOWNLOAD_URL": "http://mirror.local/pg",
    })

    assert settings.temp_root == Path("/scratch")
    assert settings.download_base_url == "http://mirror.local/pg/"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("EMBEDDED_POSTGRES_TEMP_DIR", "/from-env")

    assert load_settings().temp_root == Path("/from-env")


def test_download_url_uses_configured_base(version):
    """Test the configured mirror is used for bundle URLs"""
    settings = load_settings({"EMBEDDED_POSTGRES_DOWNLOAD_URL": "http://mirror.local/pg"})
    distribution = Distribution(version, Platform.LINUX, BitSize.B64)

    assert settings.download_url(distribution) == (
        "http://mirror.local/pg/postgresql-9.6.3-linux-x64-binaries.tar.gz"
    )


def test_download_url_default_base(version):
    settings = load_settings({})
    distribution = Distribution(version, Platform.WINDOWS, BitSize.B32)

    assert settings.download_url(distribution) == (
        "https://get.enterprisedb.com/postgresql/postgresql-9.6.3-windows-binaries.zip"
    )
