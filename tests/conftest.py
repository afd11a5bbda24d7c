import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from config_store import ConfigStore  # noqa: E402


class FixedClock:
    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def advance(self, seconds: int = 1) -> None:
        self.moment = self.moment + timedelta(seconds=seconds)


@pytest.fixture()
def clock():
    return FixedClock(datetime(2024, 12, 31, 9, 30, 0))


@pytest.fixture()
def config_path(tmp_path):
    return tmp_path / "config" / "application.yml"


@pytest.fixture()
def store(config_path, clock):
    return ConfigStore(config_path, clock=clock)
