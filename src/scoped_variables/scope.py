from enum import Enum
from typing import Union


class SecretScope(Enum):
    """Visibility scopes a variable value can live in."""

    ORG = "org"
    REPO = "repo"
    FINAL = "final"

    @classmethod
    def parse(cls, text: str) -> "SecretScope":
        """Resolve a scope from its member name or value, ignoring case."""
        key = (text or "").strip().lower()
        for scope in cls:
            if key in (scope.value, scope.name.lower()):
                return scope
        raise ValueError(f"Unknown scope: {text!r} (expected one of org, repo, final)")

    @classmethod
    def coerce(cls, scope: Union["SecretScope", str]) -> "SecretScope":
        """Accept a member or its textual form; raise ValueError for anything else."""
        if isinstance(scope, cls):
            return scope
        if isinstance(scope, str):
            return cls.parse(scope)
        raise ValueError(f"Unknown scope: {scope!r} (expected one of org, repo, final)")
