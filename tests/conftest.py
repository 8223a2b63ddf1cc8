"""Pytest configuration for the meeting damage estimator."""
import pytest

import network
from software import Software
from tests.intensity import X_LOWER, X_UPPER


@pytest.fixture
def intensity_table(monkeypatch):
    monkeypatch.setattr(network, 'NETWORK_ENERGETIC_INTENSITY_UPPER', {'operating_one_bit': X_UPPER})
    monkeypatch.setattr(network, 'NETWORK_ENERGETIC_INTENSITY_LOWER', {'operating_one_bit': X_LOWER})


@pytest.fixture
def flat_software():
    return Software.from_description({
        'displayName': 'Flat',
        'fileSize': 2,
        'bandwidth': {'inbound': 500},
    })


@pytest.fixture
def bucketed_software():
    return Software.from_description({
        'displayName': 'Bucketed',
        'fileSize': 10,
        'bandwidth': {'inbound': {'10': 100, '50': {'minimum': 40, 'ideal': 60}}},
    })
