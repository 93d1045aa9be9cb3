"""Tests for comic page generation."""

from __future__ import annotations

import pytest

from src.generators.comic_page import (
    ComicPageGenerator,
    find_neighbors,
    local_image_path,
    page_filename,
    page_href,
)
from src.generators.index_page import generate_index_page
from src.models.comic import CaptionKind, Comic, Panel

DATES = ["2024-01-01", "2024-01-02", "2024-01-03"]


@pytest.fixture
def generator() -> ComicPageGenerator:
    return ComicPageGenerator("Test Comics")


@pytest.fixture
def comic() -> Comic:
    return Comic(
        title="Cats & Dogs",
        panels=[
            Panel('"Hello"', CaptionKind.QUOTE, "a.png"),
            Panel("Later <that day>.", CaptionKind.NARRATION, None),
        ],
    )


def test_find_neighbors():
    assert find_neighbors("2024-01-01", DATES) == (None, "2024-01-02")
    assert find_neighbors("2024-01-02", DATES) == ("2024-01-01", "2024-01-03")
    assert find_neighbors("2024-01-03", DATES) == ("2024-01-02", None)
    assert find_neighbors("2024-01-01", ["2024-01-01"]) == (None, None)


def test_middle_page_links_both_neighbors(generator, comic):
    html = generator.generate_page("2024-01-02", comic, "cats", DATES)

    assert '<a class="nav-prev" href="2024-01-01.html">' in html
    assert '<a class="nav-next" href="2024-01-03.html">' in html
    assert '<a class="nav-first" href="2024-01-01.html">' in html
    assert '<a class="nav-latest" href="2024-01-03.html">' in html
    assert "disabled" not in html


def test_first_page_has_disabled_previous(generator, comic):
    html = generator.generate_page("2024-01-01", comic, "cats", DATES)

    assert '<span class="nav-prev disabled" aria-disabled="true">' in html
    assert '<span class="nav-first disabled" aria-disabled="true">' in html
    assert '<a class="nav-next" href="2024-01-02.html">' in html


def test_last_page_has_disabled_next(generator, comic):
    html = generator.generate_page("2024-01-03", comic, "cats", DATES)

    assert '<span class="nav-next disabled" aria-disabled="true">' in html
    assert '<span class="nav-latest disabled" aria-disabled="true">' in html
    assert '<a class="nav-prev" href="2024-01-02.html">' in html


def test_panels_render_images_captions_and_placeholder(generator, comic):
    html = generator.generate_page("2024-01-02", comic, "cats", DATES)

    assert '<img src="comics/cats/a.png" alt="Panel 1">' in html
    assert '<p class="caption quote" data-kind="quote">&quot;Hello&quot;</p>' in html
    assert '<div class="image-missing">Image missing</div>' in html
    assert '<p class="caption narration" data-kind="narration">Later &lt;that day&gt;.</p>' in html
    assert html.index("panel-1") < html.index("panel-2")


def test_archive_lists_every_date_and_marks_current(generator, comic):
    html = generator.generate_page("2024-01-02", comic, "cats", DATES)

    for date in DATES:
        assert f'<a href="{date}.html">{date}</a>' in html
    assert '<li class="current" aria-current="page"><a href="2024-01-02.html">' in html


def test_document_head(generator, comic):
    html = generator.generate_page("2024-01-02", comic, "cats", DATES)

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Cats &amp; Dogs - 2024-01-02 | Test Comics</title>" in html
    assert '<link rel="stylesheet" href="style.css">' in html
    assert html.endswith("</html>\n")


def test_untitled_comic_uses_date_as_title(generator):
    html = generator.generate_page("2024-01-01", Comic(), "empty", DATES)

    assert "<title>2024-01-01 | Test Comics</title>" in html
    assert '<main class="comic">\n  </main>' in html


def test_rendering_is_deterministic(generator, comic):
    first = generator.generate_page("2024-01-02", comic, "cats", DATES)
    second = ComicPageGenerator("Test Comics").generate_page("2024-01-02", comic, "cats", DATES)

    assert first == second


@pytest.mark.parametrize(
    ("image_path", "url"),
    [
        ("a.png", "comics/cats/a.png"),
        ("./a.png", "comics/cats/a.png"),
        ("img/my%20pic.png", "comics/cats/img/my%20pic.png"),
        ("https://example.com/a.png", "https://example.com/a.png"),
    ],
)
def test_image_url(generator, image_path, url):
    assert generator.image_url("cats", image_path) == url


def test_page_filename():
    assert page_filename("2024-01-02") == "2024-01-02.html"


def test_index_page_redirects_to_latest():
    html = generate_index_page(DATES, "Test Comics")

    assert '<meta http-equiv="refresh" content="0; url=2024-01-03.html">' in html
    assert '<a href="2024-01-03.html">latest comic</a>' in html


def test_index_page_placeholder_when_empty():
    html = generate_index_page([], "Test Comics")

    assert "refresh" not in html
    assert "No comics have been published yet." in html


@pytest.mark.parametrize(
    ("image_path", "relative"),
    [
        ("a.png", "a.png"),
        ("./art/a.png", "art/a.png"),
        ("/a.png", "a.png"),
        ("my%20pic.png", "my pic.png"),
        ("https://example.com/a.png", None),
    ],
)
def test_local_image_path(image_path, relative):
    assert local_image_path(image_path) == relative


def test_page_href_quotes_unsafe_characters():
    assert page_href("2024-01-02") == "2024-01-02.html"
    assert page_href("extra #1?") == "extra%20%231%3F.html"


def test_links_to_unusual_keys_are_url_quoted(generator, comic):
    dates = ["2024-01-01", "2024-01-01 bonus?"]

    html = generator.generate_page("2024-01-01", comic, "cats", dates)

    assert '<a class="nav-next" href="2024-01-01%20bonus%3F.html">' in html
    assert '<a href="2024-01-01%20bonus%3F.html">2024-01-01 bonus?</a>' in html
    assert "url=2024-01-01%20bonus%3F.html" in generate_index_page(dates)
