"""
Tag Normalization.

Every entry point that accepts tags passes them through normalize_tags,
which accepts either a list of strings or one comma-separated string.
"""

from collections.abc import Sequence

from beehively.backend.core.exceptions import ValidationError


def normalize_tags(value: Sequence[str] | str | None) -> list[str]:
    """
    Normalize tag input into an ordered list of unique, non-empty tags.

    Each tag is trimmed, empty tags are dropped and duplicates are removed,
    keeping the position of the first occurrence.

    Args:
        value: None, a sequence of strings, or a comma-separated string

    Returns:
        Normalized tag list

    Raises:
        ValidationError: If value is neither a string nor a sequence of strings

    Example:
        >>> normalize_tags(" python, web ,,python")
        ['python', 'web']
    """
    if value is None:
        return []

    if isinstance(value, str):
        candidates = value.split(",")
    elif isinstance(value, Sequence) and all(isinstance(tag, str) for tag in value):
        candidates = list(value)
    else:
        raise ValidationError(
            "tags must be a list of strings or a comma-separated string",
            details={"tags": "invalid type"},
        )

    # dict preserves insertion order, so fromkeys dedupes keeping first occurrence
    return list(dict.fromkeys(tag.strip() for tag in candidates if tag.strip()))
