"""
Global test configuration and fixtures for the scoped variables test suite.

This module provides:
- Path setup so tests import the package from ``src`` and shared strategies from ``tests``
- Pytest collection hooks for automatic test categorization based on file location
- Common fixtures for seeded stores and snapshot files
"""

import os
import sys
from pathlib import Path

import pytest

# Add src and the project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from scoped_variables import RecordingSecretMasker, SecretScope, VariableStore, VariableValue


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (moderate speed)"
    )
    config.addinivalue_line("markers", "properties: marks property-based tests")
    config.addinivalue_line("markers", "feature_flags: marks tests of the feature gate")


def pytest_collection_modifyitems(config, items):
    """Automatically add markers to tests based on path and file name."""
    tests_root = Path(__file__).parent

    for item in items:
        try:
            test_file = Path(item.fspath).relative_to(tests_root)
        except ValueError:
            test_file = Path(item.fspath)
        parts = test_file.parts

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in parts:
            item.add_marker(pytest.mark.integration)
        if "feature_flags" in parts:
            item.add_marker(pytest.mark.feature_flags)
        if "properties" in test_file.name:
            item.add_marker(pytest.mark.properties)


@pytest.fixture
def seed_snapshot():
    """A small snapshot covering all three scopes, secrets and a blank name."""
    return {
        SecretScope.ORG: {
            "ORG_NAME": VariableValue("acme"),
            "ORG_TOKEN": VariableValue("org-secret", is_secret=True),
        },
        SecretScope.REPO: {
            "DEPLOY_KEY": VariableValue("repo-secret", is_secret=True),
            "  ": VariableValue("dropped"),
        },
        SecretScope.FINAL: {
            "build.number": VariableValue("42"),
            "system.phaseDisplayName": VariableValue("Build and test"),
            "ACTIONS_STEP_DEBUG": VariableValue("TRUE"),
            "system.accessToken": VariableValue("access-token", is_secret=True),
            "System.GitHub.Token": VariableValue("github-token", is_secret=True),
            "NPM_TOKEN": VariableValue("npm-secret", is_secret=True),
        },
    }


@pytest.fixture
def secret_masker():
    return RecordingSecretMasker()


@pytest.fixture
def variables(seed_snapshot, secret_masker):
    return VariableStore(seed_snapshot, secret_masker=secret_masker)


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "variables.yaml"
    path.write_text(
        "org:\n"
        "  ORG_NAME: acme\n"
        "repo:\n"
        "  DEPLOY_KEY: {value: repo-secret, secret: true}\n"
        "final:\n"
        "  build.number: 42\n"
        "  DistributedTask.AllowRunnerContainerHooks: true\n"
        "  NPM_TOKEN:\n"
        "    value: npm-secret\n"
        "    secret: true\n",
        encoding="utf-8",
    )
    return path
