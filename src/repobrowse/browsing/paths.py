"""Forward-slash path composition for repository browsing.

Relative paths are canonicalized to a leading ``/`` form where ``"/"`` is the
root. A leading slash never overrides the root folder: ``compose("/sub", "/a")``
is ``"/sub/a"``. Parent references are rejected rather than resolved.
"""

from __future__ import annotations

import posixpath

from repobrowse.browsing.errors import PathTraversalRejected
from repobrowse.browsing.models import ExitTarget

ROOT = "/"


def normalize_relative(path: str | None) -> str:
    """Canonical relative path: ``"/"`` for root, otherwise ``"/a/b"``.

    Raises:
        PathTraversalRejected: on ``..`` segments, backslashes or NUL bytes.
    """
    if not path:
        return ROOT
    if "\x00" in path:
        raise PathTraversalRejected(path, "NUL byte in path")
    if "\\" in path:
        raise PathTraversalRejected(path, "backslash in path")

    segments = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            raise PathTraversalRejected(path)
        segments.append(segment)
    return ROOT + "/".join(segments)


def is_root(path: str | None) -> bool:
    return normalize_relative(path) == ROOT


def compose(root_folder: str | None, relative_path: str | None) -> str:
    """Join a root folder and a relative path into an absolute path."""
    root = normalize_relative(root_folder)
    relative = normalize_relative(relative_path)
    if relative == ROOT:
        return root
    if root == ROOT:
        return relative
    return root + relative


def split(path: str) -> tuple[str, str]:
    """Split ``path`` into ``(parent, last_segment)``.

    The root (``"/"`` or ``""``) splits into ``("", "")``.
    """
    stripped = path.rstrip("/")
    if not stripped:
        return "", ""
    parent, last = posixpath.split(stripped)
    return parent or ROOT, last


def join_relative(relative_path: str | None, name: str) -> str:
    """Relative path of child ``name`` under ``relative_path``."""
    base = normalize_relative(relative_path)
    return normalize_relative(posixpath.join(base, name))


def exit_target(previous_relative_path: str | None, root_folder: str | None) -> ExitTarget:
    """Locate the directory a "go up" row returns to.

    ``current_dir_name`` is empty when the previous path is the root; callers
    must then skip the metadata lookup.
    """
    previous = normalize_relative(previous_relative_path)
    if previous == ROOT:
        return ExitTarget(parent_path="", current_dir_name="", previous_relative_path=previous)

    parent_path, current_dir_name = split(compose(root_folder, previous))
    return ExitTarget(
        parent_path=parent_path,
        current_dir_name=current_dir_name,
        previous_relative_path=previous,
    )
