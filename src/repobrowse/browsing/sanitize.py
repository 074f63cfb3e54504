# File name sanitization for user-supplied upload names.
# Created: 2026-10-19

from __future__ import annotations

import re

FILENAME_SANITIZATION_PATTERN = r"[^0-9a-zA-Z.\-_]"
SUBSTITUTION_CHAR = "_"

_SEPARATORS = ("/", "\\")


def compile_unsafe_pattern(pattern: str | re.Pattern[str], substitution: str) -> re.Pattern[str]:
    """Compile ``pattern``, checking that ``substitution`` is itself a safe character."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if len(substitution) != 1:
        raise ValueError(f"Substitution must be a single character, got {substitution!r}")
    if substitution in (*_SEPARATORS, ".") or compiled.fullmatch(substitution):
        raise ValueError(f"Substitution character {substitution!r} is itself unsafe")
    if compiled.fullmatch(""):
        raise ValueError(f"Unsafe pattern {compiled.pattern!r} matches the empty string")
    return compiled


def sanitize_file_name(
    name: str | None,
    pattern: str | re.Pattern[str] | None = None,
    substitution: str | None = None,
) -> str:
    """Map an arbitrary file name to a safe leaf name.

    Keeps only the last path segment and replaces every unsafe character.
    Defaults come from settings when ``pattern``/``substitution`` are omitted.

    >>> sanitize_file_name("../../etc/passwd")
    'passwd'
    """
    if not name:
        return ""

    if pattern is None or substitution is None:
        from repobrowse.config import get_settings

        settings = get_settings()
        pattern = settings.filename_sanitization_pattern if pattern is None else pattern
        substitution = settings.filename_substitution_char if substitution is None else substitution
    compiled = compile_unsafe_pattern(pattern, substitution)

    leaf = name.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
    if leaf in (".", ".."):
        return substitution * len(leaf)

    # Replacements can form new multi-character matches; repeat until stable.
    safe = compiled.sub(substitution, leaf)
    while safe != leaf:
        if len(safe) > len(leaf):
            raise ValueError(f"Unsafe pattern {compiled.pattern!r} grows the name")
        leaf, safe = safe, compiled.sub(substitution, safe)
    return safe
