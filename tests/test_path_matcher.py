"""Tests for component-aligned exclusion matching."""

import pytest

from core.services.path_matcher import find_exclusion, is_excluded_by_any, is_path_excluded


class TestIsPathExcluded:
    @pytest.mark.parametrize(
        "path",
        ["temp", "temp/file.c", "src/temp/x.c", "src/temp", "./temp/a.h", "src\\temp\\x.c"],
    )
    def test_component_matches(self, path):
        assert is_path_excluded(path, "temp")

    @pytest.mark.parametrize(
        "path",
        ["template.c", "src/template/x.c", "mytemp/x.c", "src/temp.c", "attempt"],
    )
    def test_fragment_does_not_match(self, path):
        assert not is_path_excluded(path, "temp")

    def test_underscore_is_not_a_separator(self):
        assert not is_path_excluded("item_post.c", "post")
        assert not is_path_excluded("src/item_post/x.c", "post")

    def test_dot_is_not_a_separator(self):
        assert not is_path_excluded("src/vendor.old/x.c", "vendor")

    def test_later_occurrence_is_found_after_a_mid_token_one(self):
        assert is_path_excluded("template/temp/x.c", "temp")
        assert is_path_excluded("attempt/src/temp", "temp")

    def test_overlapping_occurrences(self):
        assert is_path_excluded("aa/aaa/aa", "aa")
        assert not is_path_excluded("aaa", "aa")

    def test_multi_component_pattern(self):
        assert is_path_excluded("./src/gen/out.c", "src/gen")
        assert not is_path_excluded("./src/generated/out.c", "src/gen")

    def test_case_sensitive(self):
        assert not is_path_excluded("src/Temp/x.c", "temp")

    def test_no_globbing(self):
        assert not is_path_excluded("src/temp/x.c", "t*p")
        assert is_path_excluded("src/t*p/x.c", "t*p")

    def test_empty_pattern_never_matches(self):
        assert not is_path_excluded("src/x.c", "")


class TestPatternLists:
    def test_first_matching_pattern_in_list_order(self):
        patterns = ["build", "vendor", "src"]
        assert find_exclusion("src/vendor/x.c", patterns) == "vendor"

    def test_later_patterns_are_tried(self):
        assert find_exclusion("third_party/lib/x.c", ["build", "vendor", "lib"]) == "lib"

    def test_no_match(self):
        assert find_exclusion("src/main.c", ["build", "vendor"]) is None
        assert not is_excluded_by_any("src/main.c", ["build", "vendor"])

    def test_empty_list(self):
        assert not is_excluded_by_any("src/main.c", [])
