"""kitinit type definitions.

This module exports all value types used by the resolver.
"""

from kitinit.types.manifest import ManifestDefaults
from kitinit.types.reference import (
    TRUSTED_HOST,
    RepositoryKind,
    RepositoryReference,
    ResolutionResult,
)

__all__ = [
    "TRUSTED_HOST",
    # Repository references
    "RepositoryKind",
    "RepositoryReference",
    "ResolutionResult",
    # Manifest
    "ManifestDefaults",
]
