import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from daedalus import logging_utils  # noqa: E402
from daedalus.config import ENV_PREFIX, GenerationConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Drop DAEDALUS_* overrides from the developer's shell so defaults apply."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["info"])
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    yield


@pytest.fixture()
def config():
    return GenerationConfig()
