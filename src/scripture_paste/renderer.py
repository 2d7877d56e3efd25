"""Render parsed verses as HTML in the same shape as API.Bible passage content."""

import html
from collections.abc import Iterable

from .models import Verse

VERSE_WRAPPER_CLASS = "p"
VERSE_NUMBER_CLASS = "v"
VERSE_ID_ATTRIBUTE = "data-vid"


def escape_html(text: str) -> str:
    """Escape &, <, >, double and single quotes for safe embedding in HTML."""
    return html.escape(text, quote=True).replace("&#x27;", "&#039;")


def verse_id(book_abbreviation: str, chapter: int, verse_number: int) -> str:
    """Build a verse identifier such as "Phl.2.1"."""
    return f"{book_abbreviation}.{chapter}.{verse_number}"


def verses_to_html(verses: Iterable[Verse], book_abbreviation: str, chapter: int) -> str:
    """
    Convert verses into a single paragraph of verse-tagged spans.

    Each verse becomes
    ``<span data-vid="Book.Chapter.Verse"><span class="v">N</span> text </span>``
    so the study UI can attach observations to custom passages exactly as it
    does for passages fetched from API.Bible.

    Args:
        verses: Verses in display order
        book_abbreviation: Book abbreviation used in the verse identifiers
        chapter: Chapter used in every verse identifier

    Returns:
        HTML fragment wrapped in one ``<p class="p">`` element
    """
    spans = []
    for verse in verses:
        vid = escape_html(verse_id(book_abbreviation, chapter, verse.number))
        spans.append(
            f'<span {VERSE_ID_ATTRIBUTE}="{vid}">'
            f'<span class="{VERSE_NUMBER_CLASS}">{verse.number}</span> '
            f"{escape_html(verse.text)} </span>"
        )

    return f'<p class="{VERSE_WRAPPER_CLASS}">{"".join(spans)}</p>'
