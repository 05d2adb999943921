import sys
from pathlib import Path

import pytest

_THIS_DIR = Path(__file__).resolve().parent
_SRC_DIR = _THIS_DIR.parent / "src"

for p in (_SRC_DIR, _THIS_DIR):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from fakes.fake_gateway import FakeGateway  # noqa: E402


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    import os

    for name in list(os.environ):
        if name.upper().startswith("NICCONFIG_"):
            monkeypatch.delenv(name)
