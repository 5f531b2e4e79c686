import sys
from pathlib import Path

import pytest

# Ensure `src` is on sys.path for tests when the package is not installed editable.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from model_presenter.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached process-wide; tests that touch the environment must not leak.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
