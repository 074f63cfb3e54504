# Entry metadata binding - raw backend entries to listing rows.
# Created: 2026-10-19

from __future__ import annotations

import hashlib
from collections.abc import Mapping

from repobrowse.browsing.errors import MissingMetadataError
from repobrowse.browsing.models import (
    DirectoryEntry,
    ExitTarget,
    FileEntry,
    ListingContext,
    ListingRow,
    NavigationTarget,
    RowKind,
)
from repobrowse.browsing.paths import join_relative

DOWNLOAD_ACTION = "download"
BROWSE_ACTION = "repo_browser"
EXIT_LABEL = "go up"


def row_identity(path: str, revision_number: int, name: str) -> str:
    """Stable row id derived from path, revision and name."""
    key = f"{path}\x00{revision_number}\x00{name}".encode()
    return hashlib.sha256(key).hexdigest()[:16]


def bind_file(
    entry: FileEntry, context: ListingContext, action: str = DOWNLOAD_ACTION
) -> ListingRow:
    """Row for a file, linking to its download."""
    return ListingRow(
        kind=RowKind.FILE,
        id=row_identity(context.absolute_path, context.revision_number, entry.name),
        name=entry.name,
        raw_name=entry.name,
        target=NavigationTarget(
            action=action,
            params={
                "id": context.assignment_id,
                "revision_number": context.revision_number,
                "file_name": entry.name,
                "path": context.relative_path,
                "grouping_id": context.grouping_id,
            },
        ),
        last_revised_date=entry.last_modified_date,
        last_modified_revision=entry.last_modified_revision,
        revision_by=entry.user_id,
    )


def bind_directory(
    entry: DirectoryEntry, context: ListingContext, action: str = BROWSE_ACTION
) -> ListingRow:
    """Row for a subdirectory, linking one level down."""
    return ListingRow(
        kind=RowKind.DIRECTORY,
        id=row_identity(context.absolute_path, context.revision_number, entry.name + "/"),
        name=f"{entry.name}/",
        raw_name=entry.name,
        target=NavigationTarget(
            action=action,
            params={
                "id": context.grouping_id,
                "revision_number": context.revision_number,
                "path": join_relative(context.relative_path, entry.name),
            },
        ),
        last_revised_date=entry.last_modified_date,
        last_modified_revision=entry.last_modified_revision,
        revision_by=entry.user_id,
    )


def bind_exit(
    target: ExitTarget,
    metadata: DirectoryEntry | Mapping[str, DirectoryEntry] | None,
    context: ListingContext,
    action: str = BROWSE_ACTION,
    label: str = EXIT_LABEL,
) -> ListingRow | None:
    """Synthetic "go up" row, or None when the previous path was root.

    ``metadata`` is either the departing directory's own entry or its
    parent's directory listing, in which it is looked up by name.

    Raises:
        MissingMetadataError: the departing directory has no metadata.
    """
    if target.is_root:
        return None

    if isinstance(metadata, DirectoryEntry):
        entry = metadata
    elif metadata is not None:
        entry = metadata.get(target.current_dir_name)
    else:
        entry = None
    if entry is None:
        raise MissingMetadataError(target.parent_path, target.current_dir_name)

    return ListingRow(
        kind=RowKind.EXIT,
        id=None,
        name=label,
        raw_name="..",
        target=NavigationTarget(
            action=action,
            params={
                "id": context.grouping_id,
                "revision_number": context.revision_number,
                "path": target.previous_relative_path,
            },
        ),
        last_revised_date=entry.last_modified_date,
        last_modified_revision=entry.last_modified_revision,
        revision_by=entry.user_id,
    )
