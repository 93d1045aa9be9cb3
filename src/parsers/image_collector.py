"""Image file collection utilities."""

from __future__ import annotations

from pathlib import Path

# Supported image file extensions
SUPPORTED_IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.tiff', '.tif', '.svg', '.avif'}


def collect_image_files(folder_path: Path, recursive: bool = False) -> list[Path]:
    """
    Collect all image files from a comic folder with supported extensions.

    Args:
        folder_path: Path to the folder to scan
        recursive: Whether images in subfolders are collected too

    Returns:
        list[Path]: List of image file paths, sorted by relative path
    """
    if not folder_path.is_dir():
        return []

    candidates = folder_path.rglob("*") if recursive else folder_path.iterdir()
    image_files = [
        file_path
        for file_path in candidates
        if file_path.is_file() and file_path.suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS
    ]

    # Sort files by path for consistent ordering
    image_files.sort(key=lambda x: x.relative_to(folder_path).as_posix().lower())
    return image_files
