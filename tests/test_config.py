import importlib

import pytest

import config
from constants import BandwidthBound


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_default_bandwidth_bound(reload_config, monkeypatch):
    monkeypatch.setenv('DEFAULT_BANDWIDTH_BOUND', 'minimum')
    assert reload_config().DEFAULT_BANDWIDTH_BOUND == BandwidthBound.MINIMUM


def test_unknown_bandwidth_bound_fails_at_import(reload_config, monkeypatch):
    monkeypatch.setenv('DEFAULT_BANDWIDTH_BOUND', 'maximum')
    with pytest.raises(ValueError):
        reload_config()
