"""Index page generation."""

from __future__ import annotations

from html import escape

from src.generators.comic_page import STYLESHEET_NAME, page_href


def generate_redirect_page(latest_date: str, site_title: str = "Comics") -> str:
    """Generate an index page that redirects to the latest comic.

    Args:
        latest_date: Date of the most recent comic
        site_title: Site name used as the page title

    Returns:
        HTML document as string
    """
    target = page_href(latest_date)
    content = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8">',
        f'  <meta http-equiv="refresh" content="0; url={target}">',
        f'  <link rel="canonical" href="{target}">',
        f"  <title>{escape(site_title)}</title>",
        "</head>",
        "<body>",
        f'  <p>Redirecting to the <a href="{target}">latest comic</a>.</p>',
        "</body>",
        "</html>",
    ]
    return "\n".join(content) + "\n"


def generate_placeholder_page(site_title: str = "Comics") -> str:
    """Generate the index page shown when no comics are published."""
    content = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8">',
        f"  <title>{escape(site_title)}</title>",
        f'  <link rel="stylesheet" href="{STYLESHEET_NAME}">',
        "</head>",
        "<body>",
        f"  <h1>{escape(site_title)}</h1>",
        '  <p class="placeholder">No comics have been published yet.</p>',
        "</body>",
        "</html>",
    ]
    return "\n".join(content) + "\n"


def generate_index_page(dates: list[str], site_title: str = "Comics") -> str:
    """Generate the site index: a redirect to the latest date, or a placeholder."""
    if not dates:
        return generate_placeholder_page(site_title)
    return generate_redirect_page(dates[-1], site_title)
