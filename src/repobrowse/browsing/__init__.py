# Repository browsing core.
# Created: 2026-10-19

from repobrowse.browsing.binder import bind_directory, bind_exit, bind_file, row_identity
from repobrowse.browsing.errors import (
    BackendQueryFailure,
    MissingMetadataError,
    PathTraversalRejected,
    RepoBrowseError,
    RevisionNotFound,
)
from repobrowse.browsing.listing import build_listing
from repobrowse.browsing.models import (
    DirectoryEntry,
    ExitTarget,
    FileEntry,
    Listing,
    ListingContext,
    ListingRow,
    NavigationTarget,
    RowKind,
)
from repobrowse.browsing.paths import compose, exit_target, join_relative, normalize_relative, split
from repobrowse.browsing.protocol import (
    DirectMetadataRevision,
    RevisionProtocol,
    RevisionStoreProtocol,
)
from repobrowse.browsing.sanitize import sanitize_file_name

__all__ = [
    # Models
    "DirectoryEntry",
    "ExitTarget",
    "FileEntry",
    "Listing",
    "ListingContext",
    "ListingRow",
    "NavigationTarget",
    "RowKind",
    # Errors
    "BackendQueryFailure",
    "MissingMetadataError",
    "PathTraversalRejected",
    "RepoBrowseError",
    "RevisionNotFound",
    # Protocols
    "DirectMetadataRevision",
    "RevisionProtocol",
    "RevisionStoreProtocol",
    # Operations
    "bind_directory",
    "bind_exit",
    "bind_file",
    "build_listing",
    "compose",
    "exit_target",
    "join_relative",
    "normalize_relative",
    "row_identity",
    "sanitize_file_name",
    "split",
]
