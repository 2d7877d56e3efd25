"""Data models for parsed custom Bible passages."""

import json
from dataclasses import dataclass

from .passage_ids import build_passage_id


@dataclass(frozen=True)
class Verse:
    """A single numbered verse taken from pasted text."""

    number: int
    text: str


@dataclass(frozen=True)
class PassageHeader:
    """Fields read from the bracketed header, e.g. "[Phl 2:1-11 ESV]"."""

    book_abbreviation: str
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int
    version_name: str


@dataclass(frozen=True)
class ParsedBiblePassage:
    """A custom passage parsed from pasted Bible text."""

    book_abbreviation: str  # As typed in the header, e.g. "Phl"
    book_name: str | None  # e.g. "Philippians"; None if the abbreviation is unknown
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int
    version_name: str  # e.g. "ESV"
    verses: tuple[Verse, ...]
    html_content: str
    raw_text: str

    @property
    def reference(self) -> str:
        """Human-readable reference, e.g. "Philippians 2:1-11 (ESV)"."""
        book = self.book_name or self.book_abbreviation
        start = f"{self.start_chapter}:{self.start_verse}"

        if self.start_chapter != self.end_chapter:
            span = f"{start}-{self.end_chapter}:{self.end_verse}"
        elif self.start_verse != self.end_verse:
            span = f"{start}-{self.end_verse}"
        else:
            span = start

        return f"{book} {span} ({self.version_name})"

    @property
    def passage_id(self) -> str:
        """API.Bible passage id covering the header range."""
        return build_passage_id(
            self.book_abbreviation,
            self.start_chapter,
            self.start_verse,
            self.end_chapter,
            self.end_verse,
        )

    @property
    def custom_bible_id(self) -> str:
        """Selector id for this translation alongside API Bibles, e.g. "custom:ESV"."""
        return f"custom:{self.version_name}"

    def to_dict(self) -> dict:
        """Convert to a dictionary in the shape of a stored custom passage row."""
        return {
            "version_name": self.version_name,
            "book_abbreviation": self.book_abbreviation,
            "book_name": self.book_name,
            "start_chapter": self.start_chapter,
            "start_verse": self.start_verse,
            "end_chapter": self.end_chapter,
            "end_verse": self.end_verse,
            "content": self.html_content,
            "raw_text": self.raw_text,
            "verses": [{"number": v.number, "text": v.text} for v in self.verses],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
