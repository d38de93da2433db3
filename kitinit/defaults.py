"""Default manifest metadata derived from a repository identifier."""

from kitinit.types.manifest import ManifestDefaults


def build_defaults(
    identifier: str,
    name: str | None = None,
    description: str | None = None,
    author: str | None = None,
) -> ManifestDefaults:
    """
    Derive package name, description and authors for a repository.

    User-supplied values win field by field. Otherwise the name is the last
    segment of ``org/repo`` and the author is the segment before it. An
    identifier without a ``/`` (including the empty identifier of a local
    source) contributes nothing.

    Args:
        identifier: Repository identifier, e.g. "myorg/mymodel"
        name: Name override
        description: Description override
        author: Author override

    Returns:
        ManifestDefaults for seeding the generated manifest
    """
    sections = identifier.split("/")
    derivable = len(sections) >= 2

    if name:
        resolved_name = name
    elif derivable:
        resolved_name = sections[-1]
    else:
        resolved_name = ""

    authors: tuple[str, ...] = ()
    if author:
        authors = (author,)
    elif derivable:
        authors = (sections[-2],)

    return ManifestDefaults(
        name=resolved_name,
        description=description or "",
        authors=authors,
    )
