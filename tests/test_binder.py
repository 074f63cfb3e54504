# Tests for browsing/binder.py
# Created: 2026-10-19

from datetime import UTC, datetime

import pytest

from repobrowse.browsing.binder import bind_directory, bind_exit, bind_file, row_identity
from repobrowse.browsing.errors import MissingMetadataError
from repobrowse.browsing.models import (
    DirectoryEntry,
    FileEntry,
    ListingContext,
    RowKind,
)
from repobrowse.browsing.paths import exit_target

WHEN = datetime(2021, 2, 2, tzinfo=UTC)


@pytest.fixture
def context():
    return ListingContext(
        assignment_id="A1",
        grouping_id="g42",
        revision_number=7,
        relative_path="/a/b",
        absolute_path="/A1/a/b",
    )


class TestRowIdentity:
    def test_deterministic(self):
        assert row_identity("/A1/a", 3, "x") == row_identity("/A1/a", 3, "x")

    def test_varies_with_each_component(self):
        base = row_identity("/A1/a", 3, "x")
        assert row_identity("/A1/b", 3, "x") != base
        assert row_identity("/A1/a", 4, "x") != base
        assert row_identity("/A1/a", 3, "y") != base


class TestBindFile:
    def test_row_fields(self, context):
        entry = FileEntry("x.txt", "U2", WHEN, 7, content=b"hello")
        row = bind_file(entry, context)

        assert row.kind == RowKind.FILE
        assert row.id == row_identity("/A1/a/b", 7, "x.txt")
        assert row.name == "x.txt"
        assert row.raw_name == "x.txt"
        assert row.last_revised_date == WHEN
        assert row.last_modified_revision == 7
        assert row.revision_by == "U2"

    def test_download_target(self, context):
        row = bind_file(FileEntry("x.txt", "U2", WHEN, 7), context)
        assert row.target.action == "download"
        assert row.target.params == {
            "id": "A1",
            "revision_number": 7,
            "file_name": "x.txt",
            "path": "/a/b",
            "grouping_id": "g42",
        }


class TestBindDirectory:
    def test_row_fields(self, context):
        row = bind_directory(DirectoryEntry("c", "U3", WHEN, 8), context, "repo_browser")

        assert row.kind == RowKind.DIRECTORY
        assert row.name == "c/"
        assert row.raw_name == "c"
        assert row.revision_by == "U3"
        assert row.last_modified_revision == 8
        assert row.target.action == "repo_browser"
        assert row.target.params == {"id": "g42", "revision_number": 7, "path": "/a/b/c"}

    def test_identity_differs_from_same_named_file(self, context):
        d = bind_directory(DirectoryEntry("c", "U3", WHEN, 8), context)
        f = bind_file(FileEntry("c", "U3", WHEN, 8), context)
        assert d.id != f.id


class TestBindExit:
    def test_root_previous_gives_no_row(self, context):
        assert bind_exit(exit_target("/", "A1"), {}, context) is None

    def test_looks_up_name_in_parent_listing(self, context):
        parent = {"a": DirectoryEntry("a", "U1", WHEN, 5)}
        row = bind_exit(exit_target("a", "A1"), parent, context)

        assert row.kind == RowKind.EXIT
        assert row.id is None
        assert row.name == "go up"
        assert row.revision_by == "U1"
        assert row.last_modified_revision == 5
        assert row.target.params == {"id": "g42", "revision_number": 7, "path": "/a"}

    def test_accepts_entry_directly(self, context):
        row = bind_exit(
            exit_target("a", "A1"),
            DirectoryEntry("a", "U1", WHEN, 5),
            context,
            action="browse",
            label="..",
        )
        assert row.name == ".."
        assert row.target.action == "browse"

    def test_missing_metadata(self, context):
        with pytest.raises(MissingMetadataError) as exc_info:
            parent = {"other": DirectoryEntry("other", "U", WHEN, 1)}
            bind_exit(exit_target("a", "A1"), parent, context)
        assert exc_info.value.parent_path == "/A1"
        assert exc_info.value.name == "a"

    def test_missing_direct_metadata(self, context):
        with pytest.raises(MissingMetadataError):
            bind_exit(exit_target("a", "A1"), None, context)
