# Listing builder - one ordered page of rows for a path at a revision.
# Created: 2026-10-19

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Mapping
from typing import TYPE_CHECKING, TypeVar

from repobrowse.browsing import paths
from repobrowse.browsing.binder import bind_directory, bind_exit, bind_file
from repobrowse.browsing.errors import BackendQueryFailure, MissingMetadataError
from repobrowse.browsing.models import (
    DirectoryEntry,
    ExitTarget,
    FileEntry,
    Listing,
    ListingContext,
    ListingRow,
)
from repobrowse.browsing.protocol import DirectMetadataRevision, RevisionProtocol

if TYPE_CHECKING:
    from repobrowse.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _query(operation: str, path: str, awaitable: Awaitable[T]) -> T:
    """Await a store query, wrapping any failure in BackendQueryFailure."""
    try:
        return await awaitable
    except Exception as exc:
        raise BackendQueryFailure(operation, path) from exc


async def _exit_metadata(
    revision: RevisionProtocol, target: ExitTarget, prefer_direct: bool
) -> DirectoryEntry | Mapping[str, DirectoryEntry] | None:
    if prefer_direct and isinstance(revision, DirectMetadataRevision):
        departing = paths.compose(target.parent_path, target.current_dir_name)
        return await _query("metadata_at_path", departing, revision.metadata_at_path(departing))
    return await _query(
        "directories_at_path",
        target.parent_path,
        revision.directories_at_path(target.parent_path),
    )


async def _entries_at(
    revision: RevisionProtocol, path: str
) -> tuple[Mapping[str, FileEntry], Mapping[str, DirectoryEntry]]:
    """Files and directories at ``path``, queried concurrently.

    Either both queries succeed or the first failure is raised and the
    other query is cancelled.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            files_task = tg.create_task(_query("files_at_path", path, revision.files_at_path(path)))
            dirs_task = tg.create_task(
                _query("directories_at_path", path, revision.directories_at_path(path))
            )
    except ExceptionGroup as group:
        raise group.exceptions[0]
    return files_task.result(), dirs_task.result()


async def build_listing(
    revision: RevisionProtocol,
    root_folder: str,
    relative_path: str | None,
    previous_relative_path: str | None,
    grouping_id: str,
    action: str | None = None,
    assignment_id: str = "",
    settings: Settings | None = None,
) -> Listing:
    """Build the ordered listing for ``relative_path`` at ``revision``.

    Order is: exit row (if any), files, then directories, each in the order
    the backend returned them. A path missing at this revision yields only
    the exit row.

    Raises:
        PathTraversalRejected: before any backend query, if either path
            tries to leave the root folder.
        BackendQueryFailure: if the store fails on any query.
    """
    if settings is None:
        from repobrowse.config import get_settings

        settings = get_settings()
    action = action or settings.browse_action

    relative = paths.normalize_relative(relative_path)
    previous = paths.normalize_relative(previous_relative_path)
    absolute = paths.compose(root_folder, relative)

    context = ListingContext(
        assignment_id=assignment_id,
        grouping_id=grouping_id,
        revision_number=revision.revision_number,
        relative_path=relative,
        absolute_path=absolute,
    )
    listing = Listing()

    if relative != paths.ROOT:
        target = paths.exit_target(previous, root_folder)
        if not target.is_root:
            metadata = await _exit_metadata(revision, target, settings.prefer_direct_metadata)
            try:
                row = bind_exit(
                    target, metadata, context, action=action, label=settings.exit_row_label
                )
            except MissingMetadataError as exc:
                listing.error = exc
            else:
                if row is not None:
                    listing.rows.append(row)

    if not await _query("path_exists", absolute, revision.path_exists(absolute)):
        logger.debug("Path %s missing at revision %s", absolute, revision.revision_number)
        return listing

    files, directories = await _entries_at(revision, absolute)

    file_rows: list[ListingRow] = [
        bind_file(entry, context, action=settings.download_action) for entry in files.values()
    ]
    dir_rows: list[ListingRow] = [
        bind_directory(entry, context, action=action) for entry in directories.values()
    ]
    listing.rows.extend(file_rows)
    listing.rows.extend(dir_rows)

    logger.debug(
        "Listed %s at revision %s: %d files, %d directories",
        absolute,
        revision.revision_number,
        len(file_rows),
        len(dir_rows),
    )
    return listing
