"""Package initializer for scoped_variables.

Exports the variable store, its value types and the feature gate.
"""

from .exceptions import ConfigurationError, VariableNameError
from .feature_flags import FeatureManager, is_container_hooks_enabled
from .masking import RecordingSecretMasker, SecretMasker
from .scope import SecretScope
from .store import VariableStore
from .variable import Variable, VariableValue

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FeatureManager",
    "RecordingSecretMasker",
    "SecretMasker",
    "SecretScope",
    "Variable",
    "VariableNameError",
    "VariableStore",
    "VariableValue",
    "is_container_hooks_enabled",
]
