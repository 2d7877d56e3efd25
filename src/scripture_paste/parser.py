"""Parse Bible text pasted from external sources into structured passages.

Expected input looks like::

    [Phl 2:1-11 ESV] 1 So if there is any encouragement in Christ, 2 complete my joy

The bracketed header carries the reference and translation; the body carries
the verses, each introduced by its number.
"""

import re

from .book_mapping import get_book_name
from .models import ParsedBiblePassage, PassageHeader, Verse
from .renderer import verses_to_html

SUPPORTED_FORMATS = (
    "[Phl 2:1-11 ESV] 1 text 2 text...",
    "[John 3:16 NIV] 16 text...",
    "[Gen 1:1-2:3 KJV] 1 text 2 text...",
)

PARSE_ERROR_MESSAGE = (
    "Could not parse the text. Expected format: "
    "[Book Chapter:Verse-Verse Version] 1 text 2 text..."
)

# Header must be the very first token of the (trimmed) input
HEADER_PATTERN = re.compile(r"^\[([^\]]+)\]")

# Digits and word characters are ASCII only; whitespace includes Unicode
# spaces such as the no-break space web pages put after verse numbers.
_NUM = r"([0-9]+)"
_WORD = r"([A-Za-z0-9_]+)"

# Book: optional leading digit, optional space, then a word ("John", "1Cor", "2 Sam")
_BOOK = r"([0-9]?\s*[A-Za-z0-9_]+)"

# Tried in order; the first full match wins
CROSS_CHAPTER_PATTERN = re.compile(
    rf"{_BOOK}\s+{_NUM}:{_NUM}-{_NUM}:{_NUM}\s+{_WORD}", re.IGNORECASE
)
CHAPTER_RANGE_PATTERN = re.compile(rf"{_BOOK}\s+{_NUM}:{_NUM}-{_NUM}\s+{_WORD}", re.IGNORECASE)
SINGLE_VERSE_PATTERN = re.compile(rf"{_BOOK}\s+{_NUM}:{_NUM}\s+{_WORD}", re.IGNORECASE)

# Any integer followed by whitespace starts a new verse. This also splits on
# numbers inside verse text ("in 3 days"); stored passages depend on it.
VERSE_MARKER_PATTERN = re.compile(r"([0-9]+)\s+")

# Whitespace plus the byte-order mark Notepad writes at the start of a file
_EDGE_WHITESPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(text: str) -> str:
    """Remove leading and trailing whitespace and byte-order marks."""
    return _EDGE_WHITESPACE.sub("", text)


def extract_header(text: str) -> tuple[str, str] | None:
    """
    Split trimmed input into its bracketed header and the text after it.

    Args:
        text: Trimmed pasted text

    Returns:
        Tuple of (header including brackets, remaining text), or None if the
        text does not start with a bracketed header
    """
    match = HEADER_PATTERN.match(text)
    if not match:
        return None
    return match.group(0), text[match.end():]


def parse_header(header: str) -> PassageHeader | None:
    """
    Parse a reference header such as "[Phl 2:1-11 ESV]".

    Supported shapes:
        [Gen 1:1-2:3 KJV]  - range across chapters
        [Phl 2:1-11 ESV]   - range within one chapter
        [John 3:16 NIV]    - single verse

    Args:
        header: Header text, with or without the surrounding brackets

    Returns:
        PassageHeader, or None if the header matches none of the shapes
    """
    inner = trim(header)
    if inner.startswith("["):
        inner = inner[1:]
    if inner.endswith("]"):
        inner = inner[:-1]
    inner = trim(inner)

    match = CROSS_CHAPTER_PATTERN.fullmatch(inner)
    if match:
        return PassageHeader(
            book_abbreviation=trim(match.group(1)),
            start_chapter=int(match.group(2)),
            start_verse=int(match.group(3)),
            end_chapter=int(match.group(4)),
            end_verse=int(match.group(5)),
            version_name=match.group(6),
        )

    match = CHAPTER_RANGE_PATTERN.fullmatch(inner)
    if match:
        chapter = int(match.group(2))
        return PassageHeader(
            book_abbreviation=trim(match.group(1)),
            start_chapter=chapter,
            start_verse=int(match.group(3)),
            end_chapter=chapter,
            end_verse=int(match.group(4)),
            version_name=match.group(5),
        )

    match = SINGLE_VERSE_PATTERN.fullmatch(inner)
    if match:
        chapter = int(match.group(2))
        verse = int(match.group(3))
        return PassageHeader(
            book_abbreviation=trim(match.group(1)),
            start_chapter=chapter,
            start_verse=verse,
            end_chapter=chapter,
            end_verse=verse,
            version_name=match.group(4),
        )

    return None


def parse_verses(content: str, start_verse: int) -> list[Verse]:
    """
    Split passage text into numbered verses.

    Args:
        content: Text following the header, e.g. "1 text 2 more text"
        start_verse: Verse number to use when the text carries no verse numbers

    Returns:
        List of Verse objects in input order (verses with no text are skipped)
    """
    markers = list(VERSE_MARKER_PATTERN.finditer(content))

    if not markers:
        return [Verse(number=start_verse, text=trim(content))]

    verses = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(content)
        text = trim(content[marker.end():end])
        if text:
            verses.append(Verse(number=int(marker.group(1)), text=text))

    return verses


def parse_custom_bible_text(raw_text: str) -> ParsedBiblePassage | None:
    """
    Parse pasted Bible text into a ParsedBiblePassage.

    Args:
        raw_text: Pasted text, e.g. "[Phl 2:1-11 ESV] 1 text 2 text..."

    Returns:
        ParsedBiblePassage, or None if the header is missing or malformed or
        no verse text follows it
    """
    if not isinstance(raw_text, str):
        raise TypeError(f"raw_text must be a str, not {type(raw_text).__name__}")

    trimmed = trim(raw_text)

    extracted = extract_header(trimmed)
    if extracted is None:
        return None
    header_text, remainder = extracted

    header = parse_header(header_text)
    if header is None:
        return None

    content = trim(remainder)
    if not content:
        return None

    verses = parse_verses(content, header.start_verse)
    if not verses:
        return None

    return ParsedBiblePassage(
        book_abbreviation=header.book_abbreviation,
        book_name=get_book_name(header.book_abbreviation),
        start_chapter=header.start_chapter,
        start_verse=header.start_verse,
        end_chapter=header.end_chapter,
        end_verse=header.end_verse,
        version_name=header.version_name,
        verses=tuple(verses),
        html_content=verses_to_html(verses, header.book_abbreviation, header.start_chapter),
        raw_text=trimmed,
    )
