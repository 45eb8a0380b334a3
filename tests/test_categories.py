"""
Tests for category style tags.
"""

from learning_journey.categories import (
    CATEGORY_CLASSES,
    DEFAULT_CATEGORY_CLASS,
    get_category_class,
)


class TestGetCategoryClass:
    """Tests for get_category_class."""

    def test_maps_known_categories(self):
        assert get_category_class("Critical Thinking") == "critical"
        assert get_category_class("Natural Science") == "natural"
        assert get_category_class("Applied Science") == "applied"
        assert get_category_class("Technology") == "technology"
        assert get_category_class("Science") == "science"
        assert get_category_class("Mathematics") == "mathematics"
        assert get_category_class("Psychology") == "psychology"

    def test_unknown_category_defaults_to_critical(self):
        assert get_category_class("Unknown") == "critical"
        assert DEFAULT_CATEGORY_CLASS == "critical"

    def test_match_is_case_sensitive(self):
        assert get_category_class("technology") == DEFAULT_CATEGORY_CLASS
        assert get_category_class("Natural science") == DEFAULT_CATEGORY_CLASS

    def test_empty_and_non_string_labels_use_default(self):
        assert get_category_class("") == DEFAULT_CATEGORY_CLASS
        assert get_category_class(None) == DEFAULT_CATEGORY_CLASS

    def test_table_has_seven_categories(self):
        assert len(CATEGORY_CLASSES) == 7
