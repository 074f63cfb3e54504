# Revision store protocol - the read-only interface the browsing core queries.
# Created: 2026-10-19

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from repobrowse.browsing.models import DirectoryEntry, FileEntry


class RevisionProtocol(Protocol):
    """An immutable snapshot of a versioned file tree.

    Implement this to plug a real backend (git, Subversion, ...) into the
    browsing core. Paths are absolute, forward-slash separated.
    """

    revision_number: int

    async def path_exists(self, path: str) -> bool:
        """Whether ``path`` exists at this revision."""
        ...

    async def files_at_path(self, path: str) -> Mapping[str, FileEntry]:
        """Files directly under ``path``, keyed by name, in backend order."""
        ...

    async def directories_at_path(self, path: str) -> Mapping[str, DirectoryEntry]:
        """Directories directly under ``path``, keyed by name, in backend order."""
        ...


@runtime_checkable
class DirectMetadataRevision(Protocol):
    """Revisions that can answer a directory's own metadata directly."""

    async def metadata_at_path(self, path: str) -> DirectoryEntry | None:
        """Metadata for the directory at ``path``, or None if it is absent."""
        ...


class RevisionStoreProtocol(Protocol):
    """Resolves repositories and revision numbers to revisions."""

    async def get_revision(
        self, repository: str, revision_number: int | None = None
    ) -> RevisionProtocol | None:
        """Get a revision, the latest one when ``revision_number`` is None."""
        ...
