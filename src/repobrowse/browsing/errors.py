# Repository browsing errors.
# Created: 2026-10-19


class RepoBrowseError(Exception):
    """Base class for errors raised by the browsing core."""


class PathTraversalRejected(RepoBrowseError):
    """A relative path tried to leave the configured root folder."""

    def __init__(self, path: str, reason: str = "path escapes the repository root"):
        self.path = path
        self.reason = reason
        super().__init__(f"Rejected path {path!r}: {reason}")


class MissingMetadataError(RepoBrowseError):
    """The departing directory is missing from its parent's listing.

    Recoverable: the listing is still returned, without its exit row.
    """

    def __init__(self, parent_path: str, name: str):
        self.parent_path = parent_path
        self.name = name
        super().__init__(f"No metadata for directory {name!r} under {parent_path!r}")


class BackendQueryFailure(RepoBrowseError):
    """The revision store raised while answering a query."""

    def __init__(self, operation: str, path: str):
        self.operation = operation
        self.path = path
        super().__init__(f"Revision store query {operation}({path!r}) failed")


class RevisionNotFound(RepoBrowseError):
    """The store has no such repository or revision."""

    def __init__(self, repository: str, revision_number: int | None = None):
        self.repository = repository
        self.revision_number = revision_number
        which = "latest revision" if revision_number is None else f"revision {revision_number}"
        super().__init__(f"Repository {repository!r} has no {which}")
