"""Shared pytest fixtures for scripture-paste tests."""

import pytest

from scripture_paste.models import ParsedBiblePassage, Verse


@pytest.fixture
def sample_range_text():
    """Pasted passage with a same-chapter range header."""
    return (
        "[Phl 2:1-11 ESV] 1 So if there is any encouragement in Christ "
        "2 complete my joy"
    )


@pytest.fixture
def sample_single_verse_text():
    """Pasted passage with a single-verse header."""
    return "[John 3:16 NIV] 16 For God so loved the world"


@pytest.fixture
def sample_cross_chapter_text():
    """Pasted passage whose range crosses chapters and has no inline numbers."""
    return "[Gen 1:1-2:3 KJV] 1 In the beginning God created... "


@pytest.fixture
def sample_multiline_text():
    """Passage pasted with line breaks between verses, as Bible websites copy it."""
    return """[Ps 23:1-3 KJV]
1 The LORD is my shepherd; I shall not want.
2 He maketh me to lie down in green pastures: he leadeth me beside the still waters.
3 He restoreth my soul: he leadeth me in the paths of righteousness for his name's sake.
"""


@pytest.fixture
def sample_verses():
    """Sample Verse objects for rendering tests."""
    return [
        Verse(number=1, text="So if there is any encouragement in Christ"),
        Verse(number=2, text="complete my joy"),
    ]


@pytest.fixture
def sample_passage(sample_verses):
    """Sample ParsedBiblePassage for Genesis 1:1-3."""
    return ParsedBiblePassage(
        book_abbreviation="Gen",
        book_name="Genesis",
        start_chapter=1,
        start_verse=1,
        end_chapter=1,
        end_verse=3,
        version_name="KJV",
        verses=(
            Verse(number=1, text="In the beginning God created the heaven and the earth."),
            Verse(number=2, text="And the earth was without form, and void;"),
            Verse(number=3, text="And God said, Let there be light: and there was light."),
        ),
        html_content='<p class="p"></p>',
        raw_text="[Gen 1:1-3 KJV] 1 In the beginning...",
    )


@pytest.fixture
def pasted_file(tmp_path, sample_range_text):
    """Create a temporary file holding pasted passage text."""
    pasted = tmp_path / "pasted.txt"
    pasted.write_text(sample_range_text, encoding="utf-8")
    return pasted
