"""
Contracts for the collaborators that list sources and generate manifests.

kitinit decides *what* to list and *which* defaults to use; walking
directories, calling the HuggingFace API and rendering the manifest are
left to implementations of these protocols.
"""

from typing import Any, Protocol, runtime_checkable

from kitinit.types.manifest import ManifestDefaults
from kitinit.types.reference import RepositoryReference

# Structured description of a directory's contents; opaque to kitinit
DirectoryContents = Any
Manifest = Any


@runtime_checkable
class DirectoryLister(Protocol):
    """Produces a contents listing for a local directory."""

    def list_directory(self, path: str) -> DirectoryContents:
        ...


@runtime_checkable
class RemoteLister(Protocol):
    """Produces a contents listing for a HuggingFace repository at a ref."""

    def list_repository(
        self, reference: RepositoryReference, ref: str, token: str | None
    ) -> DirectoryContents:
        ...


@runtime_checkable
class ManifestGenerator(Protocol):
    """Builds a manifest from a contents listing and optional package defaults."""

    def generate(
        self, contents: DirectoryContents, defaults: ManifestDefaults | None
    ) -> Manifest:
        ...


__all__ = [
    "DirectoryContents",
    "DirectoryLister",
    "Manifest",
    "ManifestGenerator",
    "RemoteLister",
]
