"""
Feature flag package.

- EnvironmentReader: view of the host process environment
- FlagRegistry: known flags, their defaults and typed lookup in a variable store
- FeatureManager: feature decisions combining flags and environment
"""

from .environment import (
    EnvironmentReader,
    MappingEnvironmentReader,
    OsEnvironmentReader,
    create_environment_reader,
)
from .flag_registry import FlagRegistry
from .feature_manager import FeatureManager, is_container_hooks_enabled

__all__ = [
    "EnvironmentReader",
    "MappingEnvironmentReader",
    "OsEnvironmentReader",
    "create_environment_reader",
    "FlagRegistry",
    "FeatureManager",
    "is_container_hooks_enabled",
]
