"""Shared fixtures for the kitinit test suite."""

from kitinit.testing.fixtures import (  # noqa: F401
    classifier,
    directory_lister,
    manifest_generator,
    path_checker,
    remote_lister,
    sample_dataset_reference,
    sample_model_reference,
)
