"""
Pytest plugin for kitinit testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["kitinit.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from kitinit.testing.fixtures import (
    classifier,
    directory_lister,
    manifest_generator,
    path_checker,
    remote_lister,
    sample_dataset_reference,
    sample_model_reference,
)

__all__ = [
    "path_checker",
    "classifier",
    "directory_lister",
    "remote_lister",
    "manifest_generator",
    "sample_model_reference",
    "sample_dataset_reference",
]
