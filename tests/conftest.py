import logging

import pytest
import structlog

from embedded_postgres.types import Version


@pytest.fixture
def version():
    """Release used in the published bundle examples"""
    return Version("9.6.3")


@pytest.fixture
def temp_root(tmp_path):
    """Isolated root for temporary data directories"""
    root = tmp_path / "tmp-root"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration made by a test"""
    root_level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(root_level)
    structlog.reset_defaults()
    logging.getLogger("embedded_postgres").setLevel(logging.NOTSET)
