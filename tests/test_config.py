"""Test the configuration module."""

from ringpath.config import FINDER_CONFIG, PathFinderConfig
from ringpath.types import ComparisonMode


def test_path_finder_config_defaults():
    config = PathFinderConfig()

    assert config.comparison == ComparisonMode.CAPACITY
    assert config.strict is False
    assert config.validate_structure is False


def test_global_config_instance():
    assert isinstance(FINDER_CONFIG, PathFinderConfig)
    assert FINDER_CONFIG == PathFinderConfig()
