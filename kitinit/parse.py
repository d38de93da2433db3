"""
HuggingFace repository reference parsing.

Supported formats:
    - Full URL: https://huggingface.co/org/repo
    - Full URL (dataset): https://huggingface.co/datasets/org/repo
    - Scheme-less URL: huggingface.co/org/repo
    - Short form: org/repo (defaults to model)
    - Dataset short form: datasets/org/repo
"""

import re
from urllib.parse import urlsplit

from kitinit.exceptions import HostMismatchError, InvalidReferenceError
from kitinit.types.reference import TRUSTED_HOST, RepositoryKind, RepositoryReference

DATASET_PREFIX = "datasets/"

# RFC 3986 userinfo: unreserved / pct-encoded / sub-delims / ":"
_USERINFO_RE = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=:]|%[0-9A-Fa-f]{2})*")


def is_valid_repo_format(value: str) -> bool:
    """Check if a string is in ``org/repo`` format."""
    parts = value.split("/")
    return len(parts) == 2 and parts[0] != "" and parts[1] != ""


def validate_host(hostname: str, value: str) -> None:
    """
    Require ``hostname`` to be exactly the trusted host.

    Lookalikes such as ``huggingface.co.evil.com`` or ``evilhuggingface.co``
    must fail, so this is a plain equality test and nothing else.

    Raises:
        HostMismatchError: If the hostname is anything other than huggingface.co
    """
    if hostname != TRUSTED_HOST:
        raise HostMismatchError(hostname, value)


def parse_repository_reference(value: str) -> RepositoryReference:
    """
    Parse a HuggingFace repository path or URL.

    Args:
        value: User-supplied reference in any of the supported formats

    Returns:
        RepositoryReference with the normalized ``org/repo`` identifier and kind

    Raises:
        HostMismatchError: If a URL points at a host other than huggingface.co
        InvalidReferenceError: If the value matches no supported format
    """
    if value.startswith(DATASET_PREFIX):
        repo = value[len(DATASET_PREFIX):]
        if not is_valid_repo_format(repo):
            raise InvalidReferenceError(f"invalid dataset repository format: {value}", value)
        return RepositoryReference(identifier=repo, kind=RepositoryKind.DATASET)

    if "://" in value or value.startswith(f"{TRUSTED_HOST}/"):
        return _parse_url(value)

    if is_valid_repo_format(value):
        return RepositoryReference(identifier=value, kind=RepositoryKind.MODEL)

    raise InvalidReferenceError(f"invalid repository format: {value}", value)


def _parse_url(value: str) -> RepositoryReference:
    # urlsplit silently drops tabs/newlines and leading blanks; refuse them instead
    if value != value.strip() or any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        raise InvalidReferenceError(f"invalid URL format: {value!r}", value)

    url = value if "://" in value else f"https://{value}"
    try:
        parts = urlsplit(url)
        _ = parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidReferenceError(f"invalid URL format: {e}", value) from e

    _validate_authority(parts.netloc, value)
    validate_host(_hostname(parts.netloc), value)

    segments = parts.path.strip("/").split("/")

    if segments[0] == "datasets":
        repo = "/".join(segments[1:3])
        if len(segments) < 3 or not is_valid_repo_format(repo):
            raise InvalidReferenceError(
                f"invalid dataset URL: expected datasets/org/repo, got {parts.path!r}", value
            )
        return RepositoryReference(identifier=repo, kind=RepositoryKind.DATASET)

    repo = "/".join(segments)
    if len(segments) == 2:
        return RepositoryReference(identifier=repo, kind=RepositoryKind.MODEL)

    raise InvalidReferenceError(f"unrecognized HuggingFace URL pattern: {value}", value)


def _validate_authority(netloc: str, value: str) -> None:
    """
    Reject authorities that other URL parsers could read with a different host.

    Browsers treat ``\\`` like ``/``, so ``evil.com\\@huggingface.co`` is
    host ``evil.com`` to them. Userinfo must stay within RFC 3986 characters.

    Raises:
        HostMismatchError: If the host cannot be determined unambiguously
    """
    userinfo, _, _ = netloc.rpartition("@")
    if "\\" in netloc or not _USERINFO_RE.fullmatch(userinfo):
        raise HostMismatchError(netloc, value)


def _hostname(netloc: str) -> str:
    """Host part of a URL authority, without userinfo or port and with case preserved."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[1:].partition("]")[0]
    return host.partition(":")[0]


__all__ = [
    "DATASET_PREFIX",
    "is_valid_repo_format",
    "parse_repository_reference",
    "validate_host",
]
