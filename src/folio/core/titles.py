# ABOUTME: Display cleanup for book titles derived from download file names.
# ABOUTME: Collapses "Title -- Author -- Hash -- Source" names and underscore-joined names.

_PART_SEPARATOR = " -- "


def clean_book_title(title: str) -> str:
    """Return a readable version of a catalog title for display.

    "Title -- Author -- hash -- source" becomes "Title — Author", and a
    name made only of underscore-joined words gets spaces instead. The
    stored title is never changed; it stays the book's key.
    """
    if not title:
        return ""

    if _PART_SEPARATOR in title:
        parts = title.split(_PART_SEPARATOR)
        return f"{parts[0]} — {parts[1]}"

    if "_" in title and " " not in title:
        return title.replace("_", " ")

    return title
