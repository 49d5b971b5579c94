"""HTML wrapping of rendered Markdown pages."""

from __future__ import annotations

import html

import markdown

_HTML_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def wrap_html(markdown_text: str, title: str) -> str:
    """Convert a Markdown page to a standalone HTML document."""
    body = markdown.markdown(markdown_text, extensions=["extra"])
    return _HTML_PAGE_TEMPLATE.format(title=html.escape(title), body=body)
