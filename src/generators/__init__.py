"""HTML page generators."""

from .comic_page import ComicPageGenerator, find_neighbors, local_image_path, page_filename, page_href
from .index_page import generate_index_page

__all__ = [
    "ComicPageGenerator",
    "find_neighbors",
    "generate_index_page",
    "local_image_path",
    "page_filename",
    "page_href",
]
