import importlib
from unittest.mock import patch

import pytest

from stop_routing import config


@pytest.fixture(autouse=True)
def restore_config():
    # Other modules hold the original class, keep it in place after reloading
    original = config.Config
    yield
    config.Config = original


def reload_config(env):
    with patch.dict('os.environ', env, clear=True), patch('dotenv.load_dotenv'):
        return importlib.reload(config).Config


def test_defaults():
    Config = reload_config({})
    assert Config.DEBUG is False
    assert Config.LOG_LEVEL == 'INFO'
    assert Config.DISTANCE_METRIC == 'manhattan'
    assert Config.STRICT_NEIGHBOURS is True


def test_values_from_environment():
    Config = reload_config({
        'DEBUG': 'True',
        'DISTANCE_METRIC': 'Euclidean',
        'STRICT_NEIGHBOURS': 'False',
    })
    assert Config.DEBUG is True
    assert Config.LOG_LEVEL == 'DEBUG'
    assert Config.DISTANCE_METRIC == 'euclidean'
    assert Config.STRICT_NEIGHBOURS is False
