"""
Scoped variable store.

Holds the variables of one unit of work, partitioned into the org, repo and
final scopes. Names are case-insensitive within a scope and the scopes are
never merged: every lookup names the scope it reads from.
"""

import logging
import sys
import threading
import uuid
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple, Type, TypeVar

from . import constants
from .exceptions import VariableNameError
from .masking import SecretMasker
from .parsing import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    try_parse_bool,
    try_parse_enum,
    try_parse_guid,
    try_parse_integer,
)
from .scope import SecretScope
from .variable import Variable, VariableValue, is_blank

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_RESERVED_SECRET_KEYS = frozenset(name.casefold() for name in constants.RESERVED_SECRET_NAMES)


def _key(name: str) -> str:
    return name.casefold()


class VariableStore:
    """
    Typed, scope-aware access to configuration and secret values.

    The store is seeded once from a per-scope snapshot. Afterwards values are
    read through the typed accessors and occasionally written with ``set``.
    Writes and snapshot reads are serialized by a lock; point lookups go
    straight to the scope table, where a record only appears once it is fully
    constructed.
    """

    def __init__(
        self,
        copy: Mapping[SecretScope, Mapping[str, object]],
        secret_masker: Optional[SecretMasker] = None,
    ):
        """
        Initialize the store from a per-scope snapshot.

        Args:
            copy: Mapping of scope to ``{name: value}``. Values may be
                VariableValue instances, plain strings or ``{"value", "secret"}``
                mappings. Entries with an empty or whitespace name are dropped.
            secret_masker: Optional masker. When given, every seeded secret is
                registered with it before the constructor returns; otherwise the
                caller must have registered the secrets already.

        Raises:
            ValueError: If ``copy`` is None.
        """
        if copy is None:
            raise ValueError("copy must not be None")

        self._set_lock = threading.RLock()
        self._variables: Dict[SecretScope, Dict[str, Variable]] = {
            scope: {} for scope in SecretScope
        }

        for scope, entries in copy.items():
            scope = SecretScope.coerce(scope)
            blank = sum(1 for name in entries if is_blank(name))
            if blank:
                logger.info(f"Remove {blank} variables with empty variable name.")

            table = self._variables[scope]
            for name, raw in entries.items():
                if is_blank(name):
                    continue
                seeded = VariableValue.coerce(raw)
                variable = Variable(name, seeded.value, seeded.is_secret)
                if variable.secret and secret_masker is not None:
                    secret_masker.register(variable.value)
                table[_key(name)] = variable

    # Convenience accessors. File path variables do not belong here: they need
    # container path translation by the caller.
    @property
    def build_number(self) -> Optional[str]:
        return self.get(constants.BUILD_NUMBER, SecretScope.FINAL)

    @property
    def retain_default_encoding(self) -> bool:
        return not sys.platform.startswith("win")

    @property
    def step_debug(self) -> Optional[bool]:
        return self.get_boolean(constants.STEP_DEBUG, SecretScope.FINAL)

    @property
    def system_phase_display_name(self) -> Optional[str]:
        return self.get(constants.PHASE_DISPLAY_NAME, SecretScope.FINAL)

    @property
    def all_variables(self) -> List[Variable]:
        """Snapshot of every variable in every scope, in no particular order."""
        with self._set_lock:
            output: List[Variable] = []
            for table in self._variables.values():
                output.extend(table.values())
            return output

    def scope_variables(self, scope: SecretScope) -> List[Variable]:
        """Snapshot of the variables of one scope."""
        with self._set_lock:
            return list(self._variables[SecretScope.coerce(scope)].values())

    def count(self, scope: SecretScope) -> int:
        with self._set_lock:
            return len(self._variables[SecretScope.coerce(scope)])

    def __len__(self) -> int:
        with self._set_lock:
            return sum(len(table) for table in self._variables.values())

    def _lookup(self, name: str, scope: SecretScope) -> Optional[Variable]:
        if name is None:
            return None
        variable = self._variables[SecretScope.coerce(scope)].get(_key(name))
        if variable is None:
            logger.debug(f"Get '{name}' (not found)")
            return None
        shown = "***" if variable.secret else variable.value
        logger.debug(f"Get '{name}': '{shown}'")
        return variable

    def get(self, name: str, scope: SecretScope) -> Optional[str]:
        """Return the value of ``name`` in ``scope``, or None when absent."""
        variable = self._lookup(name, scope)
        return variable.value if variable is not None else None

    def try_get_value(self, name: str, scope: SecretScope) -> Tuple[bool, Optional[str]]:
        """
        Look up ``name`` in ``scope`` as a found/value pair.

        Returns:
            Tuple[bool, Optional[str]]: ``(True, value)`` when found, even for an
            empty value, ``(False, None)`` otherwise.
        """
        variable = self._lookup(name, scope)
        if variable is None:
            return False, None
        return True, variable.value

    def get_boolean(self, name: str, scope: SecretScope) -> Optional[bool]:
        return try_parse_bool(self.get(name, scope))

    def get_enum(self, enum_type: Type[E], name: str) -> Optional[E]:
        return try_parse_enum(enum_type, self.get(name, SecretScope.FINAL))

    def get_guid(self, name: str) -> Optional[uuid.UUID]:
        return try_parse_guid(self.get(name, SecretScope.FINAL))

    def get_int(self, name: str) -> Optional[int]:
        return try_parse_integer(self.get(name, SecretScope.FINAL), INT32_MIN, INT32_MAX)

    def get_long(self, name: str) -> Optional[int]:
        return try_parse_integer(self.get(name, SecretScope.FINAL), INT64_MIN, INT64_MAX)

    def set(self, name: str, value: Optional[str], scope: SecretScope) -> None:
        """
        Insert or overwrite ``name`` in ``scope``.

        Values written this way are never secret, and registering them with a
        masker is left to the caller.

        Raises:
            VariableNameError: If ``name`` is None, empty or whitespace.
        """
        if is_blank(name):
            raise VariableNameError("Variable name must not be empty or whitespace")
        variable = Variable(name, value, False)
        with self._set_lock:
            self._variables[SecretScope.coerce(scope)][_key(name)] = variable

    def to_secrets_context(self, scope: SecretScope) -> Dict[str, str]:
        """
        Project the secret variables of ``scope`` into a name to value mapping.

        The access token names are left out even when marked secret since they
        reach execution contexts through their own channel.
        """
        variables = self.scope_variables(scope)
        return {
            variable.name: variable.value
            for variable in variables
            if variable.secret and _key(variable.name) not in _RESERVED_SECRET_KEYS
        }
