"""
Local path vs. remote repository classification.

Decides whether a user-supplied string names a local directory or a
HuggingFace repository. Explicit path forms always win, then anything that
exists on disk, and only then is the string parsed as a repository
reference.
"""

import errno
import os
from collections.abc import Callable

from kitinit.exceptions import FilesystemAccessError, InvalidReferenceError
from kitinit.logging import log_reference_rejected, log_resolution
from kitinit.parse import parse_repository_reference
from kitinit.types.reference import ResolutionResult

PathExists = Callable[[str], bool]

# stat failures that mean "nothing is there"
_NOT_FOUND_ERRNOS = {errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG}

_LOCAL_PREFIXES = ("./", "../", "~/", "~\\", "/", "\\")


def is_local_path(path: str) -> bool:
    """Check for explicit local path forms, including Windows drives and UNC paths."""
    if path in (".", "..", "~"):
        return True
    if path.startswith(_LOCAL_PREFIXES):
        return True
    # Windows drive letter, e.g. C:\models or C:models
    return len(path) >= 2 and path[1] == ":"


def path_exists(path: str) -> bool:
    """
    Check whether ``path`` names an existing file or directory.

    Raises:
        FilesystemAccessError: If the check fails for a reason other than
            the path not existing (e.g. permission denied)
    """
    try:
        os.stat(path)
    except ValueError:
        # Embedded NUL bytes cannot name a file
        return False
    except OSError as e:
        if e.errno in _NOT_FOUND_ERRNOS:
            return False
        raise FilesystemAccessError(path, e) from e
    return True


class PathClassifier:
    """
    Classifies inputs as local paths or remote HuggingFace repositories.

    Example:
        ```python
        from kitinit.classify import PathClassifier

        classifier = PathClassifier()
        result = classifier.classify("https://huggingface.co/datasets/org/repo")
        assert result.is_remote and result.identifier == "org/repo"
        ```
    """

    def __init__(self, exists: PathExists = path_exists) -> None:
        """
        Initialize the classifier.

        Args:
            exists: Existence check used for strings that are not explicit
                local paths (default: a single ``os.stat``)
        """
        self.exists = exists

    def classify(self, value: str) -> ResolutionResult:
        """
        Classify ``value`` as local or remote.

        An input that is neither an existing path nor a valid reference is
        returned as an unresolved local result; using it as a directory
        later surfaces the error.

        Raises:
            FilesystemAccessError: If the existence check cannot be completed
        """
        if is_local_path(value):
            result = ResolutionResult.local()
            log_resolution(value, result, "explicit local path")
            return result

        if self.exists(value):
            result = ResolutionResult.local()
            log_resolution(value, result, "exists on filesystem")
            return result

        try:
            reference = parse_repository_reference(value)
        except InvalidReferenceError as e:
            log_reference_rejected(value, e)
            result = ResolutionResult.local()
            log_resolution(value, result, "not a repository reference")
            return result

        result = ResolutionResult.remote(reference)
        log_resolution(value, result, "repository reference")
        return result


def classify(value: str) -> ResolutionResult:
    """Classify ``value`` using the real filesystem."""
    return PathClassifier().classify(value)


__all__ = [
    "PathClassifier",
    "PathExists",
    "classify",
    "is_local_path",
    "path_exists",
]
