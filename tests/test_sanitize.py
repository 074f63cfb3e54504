# Tests for browsing/sanitize.py
# Created: 2026-10-19

import re

import pytest

from repobrowse.browsing.sanitize import sanitize_file_name

PATTERN = r"[^0-9a-zA-Z.\-_]"


def sanitize(name):
    return sanitize_file_name(name, pattern=PATTERN, substitution="_")


class TestSanitizeFileName:
    @pytest.mark.parametrize("name", [None, ""])
    def test_blank_input(self, name):
        assert sanitize(name) == ""

    def test_strips_directory_components(self):
        assert sanitize("../../etc/passwd") == "passwd"

    def test_strips_windows_components(self):
        assert sanitize("C:\\Users\\me\\report.pdf") == "report.pdf"

    def test_substitutes_unsafe_characters(self):
        assert sanitize("my file (1).txt") == "my_file__1_.txt"

    def test_keeps_safe_characters(self):
        assert sanitize("Main-v2_final.java") == "Main-v2_final.java"

    def test_trailing_separator_ignored(self):
        assert sanitize("dir/sub/") == "sub"

    def test_only_separators(self):
        assert sanitize("///") == ""

    @pytest.mark.parametrize("name,expected", [(".", "_"), ("..", "__"), ("a/..", "__")])
    def test_dot_leaves_replaced(self, name, expected):
        assert sanitize(name) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "../../etc/passwd",
            "weird name?.py",
            "..",
            "a\\b/c d",
            "über.txt",
            "/",
            "tab\there",
        ],
    )
    def test_idempotent_and_separator_free(self, name):
        once = sanitize(name)
        assert sanitize(once) == once
        assert "/" not in once
        assert "\\" not in once

    def test_custom_substitution(self):
        assert sanitize_file_name("a b", pattern=r"\s", substitution="-") == "a-b"

    def test_compiled_pattern(self):
        assert sanitize_file_name("a b", pattern=re.compile(r" "), substitution="+") == "a+b"

    @pytest.mark.parametrize("substitution", ["", "__", "/", "\\", ".", " "])
    def test_rejects_unsafe_substitution(self, substitution):
        with pytest.raises(ValueError):
            sanitize_file_name("a b", pattern=PATTERN, substitution=substitution)

    def test_defaults_come_from_settings(self, monkeypatch, tmp_path):
        from repobrowse.config import get_settings

        monkeypatch.setenv("REPOBROWSE_CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("REPOBROWSE_FILENAME_SUBSTITUTION_CHAR", "-")
        get_settings.cache_clear()
        try:
            assert sanitize_file_name("a b/c d") == "c-d"
        finally:
            get_settings.cache_clear()


class TestMultiCharacterPatterns:
    def test_replacement_forming_new_match_is_resanitized(self):
        once = sanitize_file_name("xx_", pattern=r"x_", substitution="_")
        assert once == "_"
        assert sanitize_file_name(once, pattern=r"x_", substitution="_") == once

    @pytest.mark.parametrize("name", ["xx_", "xxxx_", "ax_x_b", "x_x_x_"])
    def test_idempotent(self, name):
        once = sanitize_file_name(name, pattern=r"x_", substitution="_")
        assert sanitize_file_name(once, pattern=r"x_", substitution="_") == once

    def test_rejects_pattern_matching_empty_string(self):
        with pytest.raises(ValueError):
            sanitize_file_name("abc", pattern=r"x*", substitution="_")

    def test_rejects_pattern_that_grows_name(self):
        with pytest.raises(ValueError):
            sanitize_file_name("abc", pattern=r"(?=b)", substitution="_")
