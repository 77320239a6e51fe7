import json
import logging
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

SAMPLES = Path(__file__).parent.parent / "samples"


@pytest.fixture
def sample_path():
    def _path(name: str) -> str:
        return str(SAMPLES / name)
    return _path


@pytest.fixture
def load_sample():
    def _load(name: str) -> dict:
        return json.loads((SAMPLES / name).read_text())
    return _load


@pytest.fixture(autouse=True)
def drop_cli_log_handlers():
    # the CLI attaches a handler to the captured stdout of the running test
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_tableau_simplex", False):
            root.removeHandler(handler)
