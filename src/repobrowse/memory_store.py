"""In-memory revision store.

Created: 2026-10-19

A small commit-driven versioned tree used by the development server and the
tests. Every commit produces a new immutable ``MemoryRevision``; touched
entries and all their ancestor directories take the commit's revision
number, author and timestamp, the way Subversion attributes directory
changes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from repobrowse.browsing.models import DirectoryEntry, FileEntry
from repobrowse.browsing.paths import ROOT, normalize_relative, split

logger = logging.getLogger(__name__)

Node = FileEntry | DirectoryEntry


class MemoryRevision:
    """One immutable snapshot of a ``MemoryRepository``."""

    def __init__(self, revision_number: int, nodes: Mapping[str, Node], timestamp: datetime):
        self.revision_number = revision_number
        self.timestamp = timestamp
        self._nodes = dict(nodes)

    def __repr__(self) -> str:
        return f"MemoryRevision({self.revision_number}, {len(self._nodes)} entries)"

    def _children(self, path: str, kind: type) -> dict[str, Any]:
        parent = normalize_relative(path)
        return {
            node.name: node
            for node_path, node in sorted(self._nodes.items())
            if isinstance(node, kind) and split(node_path)[0] == parent
        }

    async def path_exists(self, path: str) -> bool:
        normalized = normalize_relative(path)
        return normalized == ROOT or normalized in self._nodes

    async def files_at_path(self, path: str) -> dict[str, FileEntry]:
        return self._children(path, FileEntry)

    async def directories_at_path(self, path: str) -> dict[str, DirectoryEntry]:
        return self._children(path, DirectoryEntry)

    async def metadata_at_path(self, path: str) -> DirectoryEntry | None:
        node = self._nodes.get(normalize_relative(path))
        return node if isinstance(node, DirectoryEntry) else None


class MemoryRepository:
    """A versioned tree kept entirely in memory.

    Revision 0 is the empty tree.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._revisions: list[MemoryRevision] = [
            MemoryRevision(0, {}, datetime.now(UTC)),
        ]

    @property
    def latest(self) -> MemoryRevision:
        return self._revisions[-1]

    def get_revision(self, revision_number: int | None = None) -> MemoryRevision | None:
        if revision_number is None:
            return self.latest
        if 0 <= revision_number < len(self._revisions):
            return self._revisions[revision_number]
        return None

    def commit(
        self,
        user_id: str,
        files: Mapping[str, Any] | None = None,
        removals: Iterable[str] | None = None,
        directories: Iterable[str] | None = None,
        timestamp: datetime | None = None,
    ) -> int:
        """Apply changes as a new revision and return its number.

        Raises:
            KeyError: a removed path does not exist.
            ValueError: a path would be both a file and a directory.
        """
        nodes: dict[str, Node] = dict(self.latest._nodes)
        number = len(self._revisions)
        when = timestamp or datetime.now(UTC)
        touched: set[str] = set()

        removed = [normalize_relative(raw) for raw in removals or ()]
        for path in removed:
            if path not in self.latest._nodes:
                raise KeyError(f"Cannot remove missing path {path!r}")

        def _is_removed(path: str) -> bool:
            return any(path == r or path.startswith(r + "/") for r in removed)

        for key in [k for k in nodes if _is_removed(k)]:
            del nodes[key]
        # Parents inside a removed subtree stay gone unless re-added below.
        touched.update(
            parent for parent in (split(path)[0] for path in removed) if not _is_removed(parent)
        )

        for raw in directories or ():
            path = normalize_relative(raw)
            if isinstance(nodes.get(path), FileEntry):
                raise ValueError(f"{path!r} is a file")
            touched.add(path)

        for raw, content in (files or {}).items():
            path = normalize_relative(raw)
            if path == ROOT or isinstance(nodes.get(path), DirectoryEntry):
                raise ValueError(f"{path!r} is a directory")
            nodes[path] = FileEntry(
                name=split(path)[1],
                user_id=user_id,
                last_modified_date=when,
                last_modified_revision=number,
                content=content,
            )
            touched.add(split(path)[0])

        for path in touched:
            while path and path != ROOT:
                if isinstance(nodes.get(path), FileEntry):
                    raise ValueError(f"{path!r} is a file")
                parent, name = split(path)
                nodes[path] = DirectoryEntry(
                    name=name,
                    user_id=user_id,
                    last_modified_date=when,
                    last_modified_revision=number,
                )
                path = parent

        self._revisions.append(MemoryRevision(number, nodes, when))
        logger.debug("Committed revision %d to %r by %s", number, self.name, user_id)
        return number


class MemoryRevisionStore:
    """Named ``MemoryRepository`` instances behind the store protocol."""

    def __init__(self) -> None:
        self._repositories: dict[str, MemoryRepository] = {}

    def repository(self, name: str) -> MemoryRepository:
        """Get or create the repository called ``name``."""
        if name not in self._repositories:
            self._repositories[name] = MemoryRepository(name)
        return self._repositories[name]

    async def get_revision(
        self, repository: str, revision_number: int | None = None
    ) -> MemoryRevision | None:
        repo = self._repositories.get(repository)
        if repo is None:
            return None
        return repo.get_revision(revision_number)
