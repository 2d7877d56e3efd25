"""Check a parsed custom passage against the passage an assignment expects."""

from dataclasses import dataclass

from .book_mapping import get_book_name
from .models import ParsedBiblePassage


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing a parsed passage with an expected reference."""

    valid: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.valid


def validate_passage_match(
    parsed: ParsedBiblePassage,
    expected_book_abbrev: str,
    expected_start_chapter: int,
    expected_start_verse: int,
    expected_end_chapter: int,
    expected_end_verse: int,
) -> MatchResult:
    """
    Validate that a parsed passage is the book and chapter an assignment expects.

    Only book and starting chapter are compared. A pasted passage may cover more
    verses than the assignment, so verse ranges are not checked, and a book is
    only compared when both abbreviations resolve to a known book.

    Args:
        parsed: Passage returned by parse_custom_bible_text
        expected_book_abbrev: Assignment book abbreviation, e.g. "Phil"
        expected_start_chapter: Assignment starting chapter
        expected_start_verse: Assignment starting verse
        expected_end_chapter: Assignment ending chapter
        expected_end_verse: Assignment ending verse

    Returns:
        MatchResult with valid=False and a message describing the first mismatch
    """
    parsed_book_name = get_book_name(parsed.book_abbreviation)
    expected_book_name = get_book_name(expected_book_abbrev)

    if parsed_book_name and expected_book_name and parsed_book_name != expected_book_name:
        return MatchResult(
            valid=False,
            message=f"Book mismatch: pasted {parsed_book_name}, expected {expected_book_name}",
        )

    if parsed.start_chapter != expected_start_chapter:
        return MatchResult(
            valid=False,
            message=(
                f"Chapter mismatch: pasted chapter {parsed.start_chapter}, "
                f"expected {expected_start_chapter}"
            ),
        )

    return MatchResult(valid=True)
