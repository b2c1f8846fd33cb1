"""
Feature gate for optional runner behavior.

Container step hooks need two independent keys: the feature flag delivered as
a final-scope variable, and the hooks path provisioned in the host
environment. Either one alone leaves the feature off.
"""

import logging
from typing import Optional, TYPE_CHECKING

from .. import constants
from .environment import EnvironmentReader, create_environment_reader
from .flag_registry import FlagRegistry

if TYPE_CHECKING:
    from ..store import VariableStore

logger = logging.getLogger(__name__)


class FeatureManager:
    """Stateless feature decisions over a variable store and an environment."""

    @classmethod
    def is_container_hooks_enabled(
        cls,
        variables: Optional["VariableStore"],
        environment: Optional[EnvironmentReader] = None,
    ) -> bool:
        """
        Check whether container hooks should be used for this job.

        Args:
            variables: Variable store queried at final scope; None reads as flag off.
            environment: Environment to check for the hooks path. Defaults to
                the process environment.

        Returns:
            bool: True only when the flag is true and the hooks path is set
        """
        if environment is None:
            environment = create_environment_reader()
        flag_set = FlagRegistry.allow_runner_container_hooks(variables)
        path_set = environment.is_set(constants.CONTAINER_HOOKS_PATH)
        return flag_set and path_set

    @classmethod
    def log_current_flags(
        cls,
        variables: Optional["VariableStore"],
        environment: Optional[EnvironmentReader] = None,
    ) -> None:
        """Log current state of all feature flags for debugging."""
        logger.info("Current feature flag state:")
        for flag_name, flag_value in FlagRegistry.get_all_flags(variables).items():
            logger.info(f"  {flag_name}: {flag_value}")
        logger.info(
            f"  container hooks enabled: {cls.is_container_hooks_enabled(variables, environment)}"
        )


def is_container_hooks_enabled(
    variables: Optional["VariableStore"], environment: Optional[EnvironmentReader] = None
) -> bool:
    """Convenience wrapper for FeatureManager.is_container_hooks_enabled."""
    return FeatureManager.is_container_hooks_enabled(variables, environment)
