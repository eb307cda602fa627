import pytest

from gridtext import Table
from gridtext import config as cfg


@pytest.fixture
def sample_table():
    table = Table(["A", "B"])
    table.add_row(["foo", 123])
    table.add_row(["bar", 456])
    return table


@pytest.fixture
def sort_table():
    table = Table(["A", "B"])
    table.add_row(["foo", 2])
    table.add_row(["bar", 1])
    table.add_row(["baz", 3])
    return table


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against the built-in configuration defaults."""
    monkeypatch.setattr(cfg, "CONFIG", cfg.AppConfig())
