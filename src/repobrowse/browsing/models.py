"""Repository browsing data models.

Created: 2026-10-19

Entries returned by a revision are frozen dataclasses: the core never
mutates them and recomputes every listing per request.

Design notes:
- ``ListingRow`` is a tagged variant (``RowKind``) covering files,
  directories and the synthetic exit row
- Navigation targets carry an action name plus query parameters, leaving
  URL building to the presentation layer
- Timestamps are timezone-aware datetimes
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

# ============================================================================
# Backend entries
# ============================================================================


@dataclass(frozen=True)
class FileEntry:
    """A file as seen at one revision."""

    name: str
    user_id: str
    last_modified_date: datetime
    last_modified_revision: int
    content: Any = field(default=None, repr=False, compare=False)  # opaque handle


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory as seen at one revision."""

    name: str
    user_id: str
    last_modified_date: datetime
    last_modified_revision: int


# ============================================================================
# Listing rows
# ============================================================================


class RowKind(str, Enum):
    """Discriminator for listing rows."""

    EXIT = "exit"  # Synthetic "go up" row
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class NavigationTarget:
    """Where a row leads: an action and its parameters."""

    action: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> str | None:
        return self.params.get("path")

    def to_dict(self) -> dict[str, Any]:
        return {"action": self.action, "params": dict(self.params)}


@dataclass(frozen=True)
class ListingRow:
    """One display-ready entry of a repository listing."""

    kind: RowKind
    id: str | None
    name: str
    raw_name: str
    target: NavigationTarget
    last_revised_date: datetime
    last_modified_revision: int
    revision_by: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "id": self.id,
            "name": self.name,
            "raw_name": self.raw_name,
            "target": self.target.to_dict(),
            "last_revised_date": self.last_revised_date.isoformat(),
            "last_modified_revision": self.last_modified_revision,
            "revision_by": self.revision_by,
        }


# ============================================================================
# Request context and results
# ============================================================================


@dataclass(frozen=True)
class ListingContext:
    """Per-request values every bound row needs."""

    assignment_id: str
    grouping_id: str
    revision_number: int
    relative_path: str
    absolute_path: str


@dataclass(frozen=True)
class ExitTarget:
    """Parent location of the directory a "go up" row returns to."""

    parent_path: str
    current_dir_name: str
    previous_relative_path: str

    @property
    def is_root(self) -> bool:
        return self.current_dir_name == ""


@dataclass
class Listing:
    """Ordered rows for one path, plus any recoverable error."""

    rows: list[ListingRow] = field(default_factory=list)
    error: Exception | None = None

    def __iter__(self):
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def exit_row(self) -> ListingRow | None:
        if self.rows and self.rows[0].kind == RowKind.EXIT:
            return self.rows[0]
        return None
