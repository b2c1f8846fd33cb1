"""
Flag registry defining the runner feature flags.

Feature flags are delivered as variables in the final scope. This module lists
the known flags with their defaults and reads them from a variable store.
"""

from typing import Dict, Optional, TYPE_CHECKING

from .. import constants
from ..scope import SecretScope

if TYPE_CHECKING:
    from ..store import VariableStore


class FlagRegistry:
    """
    Registry of the known feature flags and their defaults.

    A flag that is missing from the store, or whose value is not a boolean,
    reads as its default.
    """

    _FLAG_DEFINITIONS = {
        constants.ALLOW_RUNNER_CONTAINER_HOOKS: False,
    }

    @classmethod
    def get_flag_default(cls, flag_name: str) -> bool:
        """Get the default value for a flag."""
        if flag_name not in cls._FLAG_DEFINITIONS:
            raise ValueError(f"Unknown flag: {flag_name}")
        return cls._FLAG_DEFINITIONS[flag_name]

    @classmethod
    def get_all_flag_names(cls) -> list[str]:
        return list(cls._FLAG_DEFINITIONS.keys())

    @classmethod
    def is_valid_flag(cls, flag_name: str) -> bool:
        return flag_name in cls._FLAG_DEFINITIONS

    @classmethod
    def get_flag(cls, variables: Optional["VariableStore"], flag_name: str) -> bool:
        """
        Read a flag from the final scope of ``variables``.

        Args:
            variables: Variable store, may be None
            flag_name: Name of a registered flag

        Returns:
            bool: The flag value, or its default when absent or unparsable
        """
        default = cls.get_flag_default(flag_name)
        if variables is None:
            return default
        value = variables.get_boolean(flag_name, SecretScope.FINAL)
        return default if value is None else value

    @classmethod
    def allow_runner_container_hooks(cls, variables: Optional["VariableStore"]) -> bool:
        return cls.get_flag(variables, constants.ALLOW_RUNNER_CONTAINER_HOOKS)

    @classmethod
    def get_all_flags(cls, variables: Optional["VariableStore"]) -> Dict[str, bool]:
        """Get current state of all feature flags."""
        return {name: cls.get_flag(variables, name) for name in cls._FLAG_DEFINITIONS}
