# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument
# pylint: disable=unused-import

import sys
from pathlib import Path

import mimetype_library
import pytest

CURRENT_DIR = Path(sys.argv[0] if __name__ == "__main__" else __file__).resolve().parent


@pytest.fixture(scope="session")
def package_dir() -> Path:
    pdir = Path(mimetype_library.__file__).resolve().parent
    assert pdir.exists()
    return pdir


@pytest.fixture(scope="session")
def project_slug_dir() -> Path:
    folder = CURRENT_DIR.parent
    assert folder.exists()
    assert any(folder.glob("src/mimetype_library"))
    return folder


@pytest.fixture
def mock_env_devel_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_LEVEL",
        "LOGLEVEL",
        "LOG_FORMAT_LOCAL_DEV_ENABLED",
        "MIMETYPE_LIBRARY_LOGLEVEL",
        "MIMETYPE_LIBRARY_LOG_FORMAT_LOCAL_DEV_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
