"""kitinit - resolve directories and HuggingFace repositories into ModelKit package defaults."""

from kitinit.classify import PathClassifier, classify, is_local_path, path_exists
from kitinit.defaults import build_defaults
from kitinit.exceptions import (
    ConfigurationError,
    FilesystemAccessError,
    HostMismatchError,
    InvalidReferenceError,
    KitInitError,
    OutputExistsError,
    SourceNotFoundError,
)
from kitinit.interfaces import DirectoryLister, ManifestGenerator, RemoteLister
from kitinit.logging import configure_logging, get_logger
from kitinit.options import InitOptions
from kitinit.parse import is_valid_repo_format, parse_repository_reference
from kitinit.types import (
    TRUSTED_HOST,
    ManifestDefaults,
    RepositoryKind,
    RepositoryReference,
    ResolutionResult,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Resolution
    "PathClassifier",
    "classify",
    "is_local_path",
    "path_exists",
    "parse_repository_reference",
    "is_valid_repo_format",
    "build_defaults",
    "InitOptions",
    # Types
    "TRUSTED_HOST",
    "RepositoryKind",
    "RepositoryReference",
    "ResolutionResult",
    "ManifestDefaults",
    # Collaborators
    "DirectoryLister",
    "RemoteLister",
    "ManifestGenerator",
    # Exceptions
    "KitInitError",
    "ConfigurationError",
    "InvalidReferenceError",
    "HostMismatchError",
    "FilesystemAccessError",
    "OutputExistsError",
    "SourceNotFoundError",
    # Logging
    "configure_logging",
    "get_logger",
]
