"""
Unit Tests for Tag Normalization.
"""

import pytest

from beehively.backend.core.exceptions import ValidationError
from beehively.backend.services.tags import normalize_tags


class TestNormalizeTags:
    def test_none_is_empty(self):
        assert normalize_tags(None) == []

    def test_comma_separated_string(self):
        assert normalize_tags("python, web ,api") == ["python", "web", "api"]

    def test_list_is_trimmed(self):
        assert normalize_tags([" python ", "web"]) == ["python", "web"]

    def test_empty_entries_dropped(self):
        assert normalize_tags(",, ,python,") == ["python"]
        assert normalize_tags(["", "  "]) == []

    def test_duplicates_keep_first_position(self):
        assert normalize_tags(["b", "a", "b", " a"]) == ["b", "a"]

    def test_case_is_preserved(self):
        assert normalize_tags("Python,python") == ["Python", "python"]

    def test_empty_string(self):
        assert normalize_tags("") == []

    @pytest.mark.parametrize("value", [42, {"a": 1}, ["ok", 3]])
    def test_invalid_types_rejected(self, value):
        with pytest.raises(ValidationError):
            normalize_tags(value)
