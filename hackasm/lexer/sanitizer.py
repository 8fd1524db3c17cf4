"""Removal of comments and surrounding whitespace from raw source lines."""

SINGLE_LINE_COMMENT = "//"
COMMENT_MARK_SYMBOL = "/"


def sanitize_line(line: str) -> str | None:
    """Strip comment and whitespace from raw source line.

    :returns sanitized: Text of an instruction or None if that line must be skipped (blank or comment only)
    """
    if not line or line.startswith(SINGLE_LINE_COMMENT):
        return None

    # Only first slash is considered, so `D/A // comment` keeps its comment.
    mark_at = line.find(COMMENT_MARK_SYMBOL)
    if mark_at != -1 and line.startswith(SINGLE_LINE_COMMENT, mark_at):
        line = line[:mark_at]

    return line.strip() or None
