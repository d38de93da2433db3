"""
Options for generating a manifest from a directory or remote repository.

Carries the user-facing settings (overrides, output handling, ref and
token), resolves the input path and hands the work to the listing and
manifest collaborators.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from kitinit.classify import PathClassifier, PathExists, path_exists
from kitinit.defaults import build_defaults
from kitinit.exceptions import ConfigurationError, OutputExistsError, SourceNotFoundError
from kitinit.interfaces import DirectoryLister, Manifest, ManifestGenerator, RemoteLister
from kitinit.logging import get_logger, safe_log_dict
from kitinit.types.manifest import ManifestDefaults
from kitinit.types.reference import RepositoryReference, ResolutionResult

DEFAULT_REF = "main"
DEFAULT_KITFILE_NAME = "Kitfile"

logger = get_logger()


def expand_home(path: str) -> str:
    """
    Expand a leading ``~``, ``~/`` or ``~\\`` to the user's home directory.

    Raises:
        ConfigurationError: If the home directory cannot be determined
    """
    if path != "~" and not path.startswith(("~/", "~\\")):
        return path
    try:
        home = str(Path.home())
    except RuntimeError as e:
        raise ConfigurationError(f"cannot determine home directory: {e}") from e
    if path == "~":
        return home
    return os.path.join(home, path[2:])


@dataclass
class InitOptions:
    """Settings for a single manifest generation run."""

    path: str
    name: str = ""
    description: str = ""
    author: str = ""
    output_path: str = ""
    force: bool = False
    ref: str = DEFAULT_REF
    token: str | None = None
    resolution: ResolutionResult | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.path:
            raise ConfigurationError("a path or repository reference is required")
        if not self.ref:
            raise ConfigurationError("ref must not be empty")

    @classmethod
    def from_env(
        cls,
        path: str,
        ref: str | None = None,
        token: str | None = None,
        **kwargs: Any,
    ) -> "InitOptions":
        """
        Create options, filling ref and token from the environment.

        Environment variables:
            HF_TOKEN: HuggingFace access token (optional)
            KITINIT_REF: Branch or tag for remote repositories (optional, default: main)

        Raises:
            ConfigurationError: If the resulting options are invalid
        """
        if ref is None:
            ref = os.environ.get("KITINIT_REF", DEFAULT_REF)
        if not token:
            token = os.environ.get("HF_TOKEN") or None
        return cls(path=path, ref=ref, token=token, **kwargs)

    def complete(self, classifier: PathClassifier | None = None) -> ResolutionResult:
        """Expand the home directory in ``path`` and classify it."""
        self.path = expand_home(self.path)
        if classifier is None:
            classifier = PathClassifier()
        self.resolution = classifier.classify(self.path)
        return self.resolution

    @property
    def is_remote(self) -> bool:
        return self.resolution is not None and self.resolution.is_remote

    @property
    def reference(self) -> RepositoryReference | None:
        if self.resolution is None:
            return None
        return self.resolution.reference

    def manifest_defaults(self) -> ManifestDefaults | None:
        """
        Package defaults for the manifest.

        Remote repositories derive name and author from the identifier.
        Local directories only use what the user supplied, and get None
        when nothing was supplied.
        """
        reference = self.reference
        if reference is not None:
            return build_defaults(reference.identifier, self.name, self.description, self.author)
        defaults = build_defaults("", self.name, self.description, self.author)
        return None if defaults.is_empty() else defaults

    def check_source(self, exists: PathExists = path_exists) -> None:
        """
        Require a local source to exist.

        Inputs that resolved to a repository reference are not checked.

        Raises:
            SourceNotFoundError: If the local path does not exist
            FilesystemAccessError: If the path cannot be checked
        """
        if not self.is_remote and not exists(self.path):
            raise SourceNotFoundError(self.path)

    def kitfile_path(self) -> str | None:
        """Where the manifest is written; None means standard output."""
        if self.output_path:
            return self.output_path
        if self.is_remote:
            return None
        return os.path.join(self.path, DEFAULT_KITFILE_NAME)

    def check_output(self, path: str) -> None:
        """
        Refuse to overwrite ``path`` unless ``force`` is set.

        Raises:
            OutputExistsError: If the file exists and force is not set
            FilesystemAccessError: If the path cannot be checked
        """
        if path_exists(path) and not self.force:
            raise OutputExistsError(path)

    def run(
        self,
        directory_lister: DirectoryLister,
        remote_lister: RemoteLister,
        generator: ManifestGenerator,
    ) -> Manifest:
        """
        List the source and generate its manifest.

        Returns:
            Whatever ``generator`` produces
        """
        resolution = self.resolution if self.resolution is not None else self.complete()
        logger.debug("init options: %s", safe_log_dict(self.to_dict()))
        self.check_source()

        target = self.kitfile_path()
        if target is not None:
            self.check_output(target)

        reference = resolution.reference
        if reference is not None:
            logger.info(
                "Fetching file listing from remote repository %s (ref: %s)",
                reference.identifier,
                self.ref,
            )
            contents = remote_lister.list_repository(reference, self.ref, self.token)
        else:
            contents = directory_lister.list_directory(self.path)

        return generator.generate(contents, self.manifest_defaults())

    def summary(self) -> dict[str, Any]:
        """Describe the resolved source and package defaults."""
        reference = self.reference
        defaults = self.manifest_defaults()
        return {
            "source": self.path,
            "is_remote": reference is not None,
            "repository": reference.identifier if reference else None,
            "kind": reference.kind.value if reference else None,
            "url": reference.url if reference else None,
            "ref": self.ref if reference else None,
            "package": defaults.to_dict() if defaults else {},
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "description": self.description,
            "author": self.author,
            "output_path": self.output_path,
            "force": self.force,
            "ref": self.ref,
            "token": self.token,
        }
