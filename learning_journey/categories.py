"""
Category style tags for timeline cards.
"""

DEFAULT_CATEGORY_CLASS = "critical"

CATEGORY_CLASSES = {
    "Critical Thinking": "critical",
    "Natural Science": "natural",
    "Applied Science": "applied",
    "Technology": "technology",
    "Science": "science",
    "Mathematics": "mathematics",
    "Psychology": "psychology",
}


def get_category_class(category: str) -> str:
    """
    Get the style tag for a topic category.

    Matching is exact and case-sensitive. Unknown labels fall back to
    the default tag.

    Args:
        category: Category label from the learning data

    Returns:
        Style tag such as "natural" or "technology"
    """
    if not isinstance(category, str):
        return DEFAULT_CATEGORY_CLASS
    return CATEGORY_CLASSES.get(category, DEFAULT_CATEGORY_CLASS)
