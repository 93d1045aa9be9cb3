"""
Comic page generator for creating static HTML pages.
"""

from __future__ import annotations

from html import escape
from urllib.parse import quote, unquote

from src.models.comic import Comic, Panel

STYLESHEET_NAME = "style.css"
ASSETS_DIRNAME = "comics"


def page_filename(date: str) -> str:
    """Return the output file name of the page for a date."""
    return f"{date}.html"


def page_href(date: str) -> str:
    """Return the link target of the page for a date."""
    return escape(quote(page_filename(date)))


def local_image_path(image_path: str) -> str | None:
    """Resolve a markdown image reference to a path inside the comic folder.

    Percent-escapes such as ``%20`` are decoded, so the result names the
    file on disk. Absolute URLs are not local and give None.

    Args:
        image_path: Image path as written in the comic markdown

    Returns:
        Relative file path, or None for absolute URLs
    """
    if "://" in image_path:
        return None
    relative = unquote(image_path).lstrip("/")
    while relative.startswith("./"):
        relative = relative[2:]
    return relative


def find_neighbors(date: str, dates: list[str]) -> tuple[str | None, str | None]:
    """Find the previous and next dates around a date.

    Args:
        date: The current date
        dates: All dates, sorted ascending

    Returns:
        Tuple of (previous, next); either may be None at the ends
    """
    position = dates.index(date)
    previous = dates[position - 1] if position > 0 else None
    following = dates[position + 1] if position + 1 < len(dates) else None
    return previous, following


class ComicPageGenerator:
    """Generator for one HTML page per comic with navigation and archive."""

    def __init__(self, site_title: str = "Comics") -> None:
        """Initialize the comic page generator.

        Args:
            site_title: Site name shown in every page header
        """
        self.site_title = site_title

    def image_url(self, comic_name: str, image_path: str) -> str:
        """Build the image URL relative to the generated page.

        Args:
            comic_name: Comic folder name
            image_path: Image path as written in the comic markdown

        Returns:
            URL of the copied image under the assets directory
        """
        relative = local_image_path(image_path)
        if relative is None:
            return image_path
        return quote(f"{ASSETS_DIRNAME}/{comic_name}/{relative}", safe="/:")

    def render_panel(self, panel: Panel, comic_name: str, number: int) -> list[str]:
        """Render a single panel block.

        Args:
            panel: Panel to render
            comic_name: Comic folder name the panel images live under
            number: One-based panel position

        Returns:
            HTML lines for the panel
        """
        lines = [f'    <figure class="panel" id="panel-{number}">']
        if panel.image_path is None:
            lines.append('      <div class="image-missing">Image missing</div>')
        else:
            src = escape(self.image_url(comic_name, panel.image_path))
            lines.append(f'      <img src="{src}" alt="Panel {number}">')
        kind = panel.caption_kind.value
        lines.append(
            f'      <p class="caption {kind}" data-kind="{kind}">{escape(panel.caption)}</p>'
        )
        lines.append("    </figure>")
        return lines

    def _nav_item(self, css_class: str, label: str, target: str | None) -> str:
        if target is None:
            return f'    <span class="{css_class} disabled" aria-disabled="true">{label}</span>'
        href = page_href(target)
        return f'    <a class="{css_class}" href="{href}">{label}</a>'

    def render_navigation(
        self,
        previous: str | None,
        following: str | None,
        first: str | None = None,
        latest: str | None = None,
    ) -> list[str]:
        """Render the first/previous/next/latest navigation bar.

        Args:
            previous: Date of the previous comic, or None
            following: Date of the next comic, or None
            first: Date of the first comic, or None on the first page
            latest: Date of the latest comic, or None on the latest page

        Returns:
            HTML lines for the navigation bar
        """
        return [
            '  <nav class="comic-nav">',
            self._nav_item("nav-first", "&laquo; First", first),
            self._nav_item("nav-prev", "&lsaquo; Previous", previous),
            self._nav_item("nav-next", "Next &rsaquo;", following),
            self._nav_item("nav-latest", "Latest &raquo;", latest),
            "  </nav>",
        ]

    def render_archive(self, dates: list[str], current: str | None = None) -> list[str]:
        """Render the archive list with one link per date.

        Args:
            dates: All dates, sorted ascending
            current: Date of the page being rendered, marked in the list

        Returns:
            HTML lines for the archive section
        """
        lines = [
            '  <section class="archive">',
            "    <h2>Archive</h2>",
            "    <ul>",
        ]
        for date in dates:
            marker = ' class="current" aria-current="page"' if date == current else ""
            href = page_href(date)
            lines.append(f'      <li{marker}><a href="{href}">{escape(date)}</a></li>')
        lines.append("    </ul>")
        lines.append("  </section>")
        return lines

    def generate_page(
        self,
        date: str,
        comic: Comic,
        comic_name: str,
        dates: list[str],
    ) -> str:
        """Generate the complete HTML document for one comic.

        Args:
            date: Publication date of the comic
            comic: Parsed comic
            comic_name: Comic folder name, used to locate its images
            dates: All dates, sorted ascending

        Returns:
            HTML document as string
        """
        previous, following = find_neighbors(date, dates)
        first = dates[0] if previous is not None else None
        latest = dates[-1] if following is not None else None

        page_title = f"{comic.title} - {date}" if comic.title else date

        content = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '  <meta charset="utf-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1">',
            f"  <title>{escape(page_title)} | {escape(self.site_title)}</title>",
            f'  <link rel="stylesheet" href="{STYLESHEET_NAME}">',
            "</head>",
            "<body>",
            '  <header class="comic-header">',
            f'    <p class="site-title"><a href="index.html">{escape(self.site_title)}</a></p>',
            f'    <h1 class="comic-title">{escape(comic.title)}</h1>',
            f'    <time class="comic-date" datetime="{escape(date)}">{escape(date)}</time>',
            "  </header>",
        ]
        content.extend(self.render_navigation(previous, following, first, latest))
        content.append('  <main class="comic">')
        for number, panel in enumerate(comic.panels, 1):
            content.extend(self.render_panel(panel, comic_name, number))
        content.append("  </main>")
        content.extend(self.render_navigation(previous, following, first, latest))
        content.extend(self.render_archive(dates, current=date))
        content.append("</body>")
        content.append("</html>")

        return "\n".join(content) + "\n"
