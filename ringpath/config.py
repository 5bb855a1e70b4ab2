"""Configuration for the minimum-stop path finder."""

from dataclasses import dataclass

from ringpath.types import ComparisonMode


@dataclass
class PathFinderConfig:
    """Behavior switches for path selection and validation."""

    # How the two candidate walks are compared
    comparison: ComparisonMode = ComparisonMode.CAPACITY

    # Raise PathNotFoundError instead of returning a path with unset slots
    strict: bool = False

    # Run whole-graph structural validation when a session is constructed
    validate_structure: bool = False


# Global configuration instance
FINDER_CONFIG = PathFinderConfig()
