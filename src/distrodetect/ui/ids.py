"""Widget ID constants for the viewer.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from distrodetect.ui.ids import css, SUMMARY
        self.query_one(css(SUMMARY), Static)
    """
    return f"#{widget_id}"

SUMMARY = "summary"
IDENTITY_TABLE = "identity-table"
RAW_LABEL = "raw-label"
RAW_SCROLL = "raw-scroll"
RAW_TEXT = "raw-text"
