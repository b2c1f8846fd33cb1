"""
Load variable snapshots from YAML files.

A snapshot file has one optional section per scope. Each entry is either a
plain scalar (a non-secret value) or a mapping with ``value`` and ``secret``::

    org:
      ORG_NAME: acme
    repo:
      DEPLOY_KEY: {value: "abc", secret: true}
    final:
      build.number: "42"
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from . import constants
from .exceptions import ConfigurationError
from .masking import SecretMasker
from .scope import SecretScope
from .store import VariableStore
from .variable import VariableValue

logger = logging.getLogger(__name__)

Snapshot = Dict[SecretScope, Dict[str, VariableValue]]


_BOOL_TAG = "tag:yaml.org,2002:bool"
_TEXT_TAGS = {
    _BOOL_TAG,
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class VariablesLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps plain scalars as written.

    Numbers and dates stay strings (``1.10`` is not ``1.1``, ``010`` is not
    ``8``). Only the literals true/false resolve to booleans, for the
    ``secret`` flag.
    """


VariablesLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
VariablesLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def default_variables_file() -> Optional[Path]:
    """Return the snapshot path named by SCOPED_VARIABLES_FILE, if set."""
    value = os.environ.get(constants.VARIABLES_FILE_ENV, "").strip()
    return Path(value) if value else None


def _scalar_to_text(value: Any, where: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigurationError(f"{where}: expected a scalar value, got {type(value).__name__}")


def _parse_entry(raw: Any, where: str) -> VariableValue:
    if isinstance(raw, dict):
        unknown = set(raw) - {"value", "secret"}
        if unknown:
            raise ConfigurationError(f"{where}: unknown keys {sorted(unknown)}")
        secret = raw.get("secret", False)
        if not isinstance(secret, bool):
            raise ConfigurationError(f"{where}: 'secret' must be true or false")
        return VariableValue(_scalar_to_text(raw.get("value"), where), secret)
    return VariableValue(_scalar_to_text(raw, where), False)


def parse_snapshot(data: Any, source: str = "<snapshot>") -> Snapshot:
    """
    Convert parsed YAML data into a per-scope snapshot.

    Args:
        data: Parsed YAML document
        source: Name used in error messages

    Returns:
        Snapshot: Mapping of scope to ``{name: VariableValue}``

    Raises:
        ConfigurationError: If the data does not have the snapshot layout
    """
    snapshot: Snapshot = {}
    if data is None:
        return snapshot
    if not isinstance(data, dict):
        raise ConfigurationError(f"{source}: top level must be a mapping of scopes")

    for scope_key, section in data.items():
        try:
            scope = SecretScope.parse(str(scope_key))
        except ValueError as e:
            raise ConfigurationError(f"{source}: {e}") from e
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"{source}: scope '{scope_key}' must be a mapping")

        entries = snapshot.setdefault(scope, {})
        for name, raw in section.items():
            entries[str(name) if name is not None else ""] = _parse_entry(
                raw, f"{source}: {scope.value}.{name}"
            )
    return snapshot


def load_variables_file(path: Union[str, Path]) -> Snapshot:
    """
    Load a snapshot from a YAML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed.
    """
    path = Path(path)
    logger.info(f"Loading variables from file: {path}")
    if not path.is_file():
        raise ConfigurationError(f"Variables file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=VariablesLoader)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in variables file {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read variables file {path}: {e}") from e

    return parse_snapshot(data, str(path))


def load_store(
    path: Union[str, Path], secret_masker: Optional[SecretMasker] = None
) -> VariableStore:
    """Load a snapshot file and seed a new VariableStore from it."""
    return VariableStore(load_variables_file(path), secret_masker=secret_masker)
