"""
Common test strategies for Hypothesis-based property testing.

This package provides reusable strategies for generating variable names,
values and seeding snapshots for the variable store.
"""

from .variable_strategies import (
    NAME_ALPHABET,
    blank_names,
    case_variants,
    scope_sections,
    snapshots,
    variable_names,
    variable_text,
    variable_values,
)

__all__ = [
    "NAME_ALPHABET",
    "blank_names",
    "case_variants",
    "scope_sections",
    "snapshots",
    "variable_names",
    "variable_text",
    "variable_values",
]
