"""Comic source parsing utilities."""

from .comic_parser import classify_caption, extract_image_path, parse_comic, parse_title_line
from .date_index import DateIndexError, load_date_index, parse_date_index
from .image_collector import collect_image_files

__all__ = [
    "DateIndexError",
    "classify_caption",
    "collect_image_files",
    "extract_image_path",
    "load_date_index",
    "parse_comic",
    "parse_date_index",
    "parse_title_line",
]
