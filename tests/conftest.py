import os

import pytest

from enum_toggles.config import reset_settings


# List of environment variables that may be modified by tests
_ENV_VARS_TO_ISOLATE = [
    "TOGGLES_FILE",
    "TOGGLES_LOG_LEVEL",
    "TOGGLES_LOG_JSON",
]


def pytest_addoption(parser):
    """Add --benchmark command line option."""
    parser.addoption(
        "--benchmark",
        action="store_true",
        default=False,
        help="run benchmark tests",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--benchmark"):
        return
    skip_benchmark = pytest.mark.skip(reason="need --benchmark option to run")
    for item in items:
        if "benchmark" in item.keywords:
            item.add_marker(skip_benchmark)


@pytest.fixture(autouse=True)
def env_isolation():
    """Isolate environment variables and cached settings between tests."""
    backup = {k: os.environ.get(k) for k in _ENV_VARS_TO_ISOLATE}
    for k in _ENV_VARS_TO_ISOLATE:
        os.environ.pop(k, None)
    reset_settings()
    try:
        yield
    finally:
        for k, v in backup.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v
        reset_settings()


@pytest.fixture
def toggle_file(tmp_path):
    """Write a toggle state file and return its path."""

    def _write(*lines: str) -> str:
        path = tmp_path / "toggles.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write
