"""Comic markdown parsing utilities."""

from __future__ import annotations

import re

from src.models.comic import CaptionKind, Comic, Panel

# Inline markdown image: ![alt](path) or ![alt](path "title")
IMAGE_PATTERN = re.compile(r"""!\[([^\]]*)\]\(\s*([^)\s]+)(?:\s+(?:"[^"]*"|'[^']*'))?\s*\)""")

HEADING_MARKER = "#"


def split_lines(markdown: str) -> list[str]:
    """Return the non-empty, trimmed lines of a markdown document."""
    return [line.strip() for line in markdown.splitlines() if line.strip()]


def parse_title_line(line: str) -> str:
    """
    Extract the comic title from the first line of a comic document.

    A leading heading marker (one or more ``#``) is stripped; any other
    line is used as the title verbatim.

    Args:
        line: The first non-empty line of the document

    Returns:
        str: The comic title
    """
    if line.startswith(HEADING_MARKER):
        return line.lstrip(HEADING_MARKER).strip()
    return line


def extract_image_path(line: str) -> str | None:
    """
    Extract the image path from a line containing an inline image reference.

    Args:
        line: A line expected to contain ``![alt](path)``

    Returns:
        str | None: The referenced path, or None when the line has no image
    """
    match = IMAGE_PATTERN.search(line)
    if match is None:
        return None
    return match.group(2)


def classify_caption(caption: str) -> CaptionKind:
    """Classify a caption as a quote when it is wrapped in double quotes."""
    if len(caption) >= 2 and caption[0] == '"' and caption[-1] == '"':
        return CaptionKind.QUOTE
    return CaptionKind.NARRATION


def parse_comic(markdown: str, source: str = "<comic>") -> tuple[Comic, list[str]]:
    """
    Parse a comic markdown document into a Comic.

    The first line is the title. Remaining lines are read in pairs: an
    image reference line followed by its caption line.

    Args:
        markdown: Raw markdown text
        source: Name used to identify the document in warnings

    Returns:
        tuple: (comic, warnings) where warnings lists non-fatal problems
    """
    warnings: list[str] = []
    lines = split_lines(markdown)

    if not lines:
        warnings.append(f"{source}: document is empty")
        return Comic(), warnings

    title = parse_title_line(lines[0])
    body = lines[1:]

    if len(body) % 2:
        warnings.append(
            f"{source}: dropping unpaired trailing line {body[-1]!r}"
        )
        body = body[:-1]

    panels: list[Panel] = []
    for index in range(0, len(body), 2):
        image_line, caption = body[index], body[index + 1]
        image_path = extract_image_path(image_line)
        if image_path is None:
            warnings.append(
                f"{source}: panel {index // 2 + 1} has no image reference in {image_line!r}"
            )
        panels.append(
            Panel(
                caption=caption,
                caption_kind=classify_caption(caption),
                image_path=image_path,
            )
        )

    return Comic(title=title, panels=panels), warnings
