# src/rfc822_like/binding/values.py

"""Value text conventions used by Debian control files."""

PARAGRAPH_MARKER = "."


def expand_paragraph_markers(value: str) -> str:
    """Turn continuation lines consisting of a lone `.` into empty lines.

    The first line is the field's own value and is never a marker. The
    scanner has already stripped each continuation line's leading whitespace
    run, so `"  ."` and `"\\t."` count as markers as well as `" ."`.

    Example:
        >>> expand_paragraph_markers("Synopsis\\nFirst paragraph.\\n.\\nSecond.")
        'Synopsis\\nFirst paragraph.\\n\\nSecond.'
    """
    first, *rest = value.split("\n")
    return "\n".join([first, *("" if line == PARAGRAPH_MARKER else line for line in rest)])


def split_list(value: str, separator: str = ",") -> list[str]:
    """Split a list-valued field such as `Depends: a, b (>= 1.0)`.

    Items are trimmed. An empty value is an empty list.
    """
    if not value.strip():
        return []
    return [item.strip() for item in value.split(separator)]
