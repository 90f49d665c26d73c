"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import Mock

from evonet.run.config import Config


def _mock_config(num_inputs, num_outputs, activation=None):
    config = Mock(spec=Config)
    config.num_inputs  = num_inputs
    config.num_outputs = num_outputs
    config.activation  = activation
    return config


@pytest.fixture
def make_config():
    """Factory for Config stand-ins with the given numbers of sensors and outputs."""
    return _mock_config


@pytest.fixture
def config_2x1():
    """Configuration with 2 sensors and 1 output."""
    return _mock_config(2, 1)


@pytest.fixture
def config_1x1():
    """Configuration with 1 sensor and 1 output."""
    return _mock_config(1, 1)


@pytest.fixture
def feedforward_genome_dict():
    """Sensors 0,1 feed output 2 directly (weights 1.0 and 2.0)."""
    return {
        'activation': 'identity',
        'nodes': [
            {'id': 0},
            {'id': 1},
            {'id': 2},
        ],
        'connections': [
            {'from': 0, 'to': 2, 'weight': 1.0},
            {'from': 1, 'to': 2, 'weight': 2.0},
        ]
    }


@pytest.fixture
def recurrent_genome_dict():
    """Sensor X(0) => output Y(1) => hidden H(2); H is read before Y is updated."""
    return {
        'activation': 'identity',
        'nodes': [
            {'id': 0},
            {'id': 1},
            {'id': 2},
        ],
        'connections': [
            {'from': 0, 'to': 1, 'weight': 1.0},
            {'from': 1, 'to': 2, 'weight': 1.0},
        ]
    }


@pytest.fixture
def hidden_genome_dict():
    """Sensors 0,1 => hidden 3,4 => output 2, with one disabled and one dangling connection."""
    return {
        'activation': 'identity',
        'nodes': [
            {'id': 4, 'activation': 'relu'},
            {'id': 0},
            {'id': 2},
            {'id': 3, 'activation': 'relu'},
            {'id': 1},
        ],
        'connections': [
            {'from': 0, 'to': 3, 'weight':  1.0},
            {'from': 1, 'to': 4, 'weight': -1.0},
            {'from': 3, 'to': 2, 'weight':  0.5},
            {'from': 4, 'to': 2, 'weight':  2.0},
            {'from': 1, 'to': 3, 'weight':  5.0, 'enabled': False},
            {'from': 9, 'to': 2, 'weight':  7.0},
        ]
    }
