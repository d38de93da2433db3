"""Repository reference and resolution result models."""

from dataclasses import dataclass
from enum import Enum

TRUSTED_HOST = "huggingface.co"


class RepositoryKind(str, Enum):
    """Kind of HuggingFace repository a reference points at."""

    UNKNOWN = "unknown"
    MODEL = "model"
    DATASET = "dataset"


@dataclass(frozen=True)
class RepositoryReference:
    """A validated ``owner/name`` identifier plus its repository kind."""

    identifier: str
    kind: RepositoryKind

    @property
    def url(self) -> str:
        """Canonical web URL of the repository."""
        if self.kind is RepositoryKind.DATASET:
            return f"https://{TRUSTED_HOST}/datasets/{self.identifier}"
        return f"https://{TRUSTED_HOST}/{self.identifier}"


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of classifying a user-supplied path or reference.

    A local result never carries repository metadata: ``identifier`` is
    empty and ``kind`` is ``UNKNOWN`` whenever ``is_remote`` is false.
    """

    is_remote: bool
    identifier: str = ""
    kind: RepositoryKind = RepositoryKind.UNKNOWN

    def __post_init__(self) -> None:
        if self.is_remote:
            if not self.identifier or self.kind is RepositoryKind.UNKNOWN:
                raise ValueError("remote resolution requires an identifier and a known kind")
        elif self.identifier or self.kind is not RepositoryKind.UNKNOWN:
            raise ValueError("local resolution cannot carry repository metadata")

    @classmethod
    def local(cls) -> "ResolutionResult":
        return cls(is_remote=False)

    @classmethod
    def remote(cls, reference: RepositoryReference) -> "ResolutionResult":
        return cls(is_remote=True, identifier=reference.identifier, kind=reference.kind)

    @property
    def reference(self) -> RepositoryReference | None:
        """The embedded repository reference, or None for local results."""
        if not self.is_remote:
            return None
        return RepositoryReference(identifier=self.identifier, kind=self.kind)
