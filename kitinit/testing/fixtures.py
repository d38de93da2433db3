"""
Pytest fixtures for kitinit testing.

Provides common fixtures for testing code that resolves sources with kitinit.
"""

from collections.abc import Generator

import pytest

from kitinit.classify import PathClassifier
from kitinit.testing.fakes import (
    RecordingDirectoryLister,
    RecordingManifestGenerator,
    RecordingRemoteLister,
    StaticPathChecker,
)
from kitinit.types.reference import RepositoryKind, RepositoryReference

# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def path_checker() -> StaticPathChecker:
    """
    Provide an empty StaticPathChecker; add paths to make them "exist".

    Example:
        ```python
        def test_local_dir(path_checker, classifier):
            path_checker.add("models/my-model")
            assert not classifier.classify("models/my-model").is_remote
        ```
    """
    return StaticPathChecker()


@pytest.fixture
def classifier(path_checker: StaticPathChecker) -> PathClassifier:
    """Provide a PathClassifier backed by ``path_checker``."""
    return PathClassifier(exists=path_checker)


# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def directory_lister() -> RecordingDirectoryLister:
    """Provide a recording directory lister."""
    return RecordingDirectoryLister()


@pytest.fixture
def remote_lister() -> Generator[RecordingRemoteLister, None, None]:
    """Provide a recording remote lister."""
    lister = RecordingRemoteLister()
    yield lister
    lister.calls.clear()


@pytest.fixture
def manifest_generator() -> RecordingManifestGenerator:
    """Provide a recording manifest generator."""
    return RecordingManifestGenerator()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_model_reference() -> RepositoryReference:
    """Provide a sample model reference."""
    return RepositoryReference(identifier="myorg/mymodel", kind=RepositoryKind.MODEL)


@pytest.fixture
def sample_dataset_reference() -> RepositoryReference:
    """Provide a sample dataset reference."""
    return RepositoryReference(identifier="myorg/mydataset", kind=RepositoryKind.DATASET)
