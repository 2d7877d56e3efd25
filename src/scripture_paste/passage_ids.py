"""API.Bible book codes and passage ids for custom passages."""

from .book_mapping import get_book_name

# Full book name -> API.Bible (USFM) three-letter book code
API_BIBLE_BOOK_IDS: dict[str, str] = {
    "Genesis": "GEN",
    "Exodus": "EXO",
    "Leviticus": "LEV",
    "Numbers": "NUM",
    "Deuteronomy": "DEU",
    "Joshua": "JOS",
    "Judges": "JDG",
    "Ruth": "RUT",
    "1 Samuel": "1SA",
    "2 Samuel": "2SA",
    "1 Kings": "1KI",
    "2 Kings": "2KI",
    "1 Chronicles": "1CH",
    "2 Chronicles": "2CH",
    "Ezra": "EZR",
    "Nehemiah": "NEH",
    "Esther": "EST",
    "Job": "JOB",
    "Psalms": "PSA",
    "Proverbs": "PRO",
    "Ecclesiastes": "ECC",
    "Song of Solomon": "SNG",
    "Isaiah": "ISA",
    "Jeremiah": "JER",
    "Lamentations": "LAM",
    "Ezekiel": "EZK",
    "Daniel": "DAN",
    "Hosea": "HOS",
    "Joel": "JOL",
    "Amos": "AMO",
    "Obadiah": "OBA",
    "Jonah": "JON",
    "Micah": "MIC",
    "Nahum": "NAM",
    "Habakkuk": "HAB",
    "Zephaniah": "ZEP",
    "Haggai": "HAG",
    "Zechariah": "ZEC",
    "Malachi": "MAL",
    "Matthew": "MAT",
    "Mark": "MRK",
    "Luke": "LUK",
    "John": "JHN",
    "Acts": "ACT",
    "Romans": "ROM",
    "1 Corinthians": "1CO",
    "2 Corinthians": "2CO",
    "Galatians": "GAL",
    "Ephesians": "EPH",
    "Philippians": "PHP",
    "Colossians": "COL",
    "1 Thessalonians": "1TH",
    "2 Thessalonians": "2TH",
    "1 Timothy": "1TI",
    "2 Timothy": "2TI",
    "Titus": "TIT",
    "Philemon": "PHM",
    "Hebrews": "HEB",
    "James": "JAS",
    "1 Peter": "1PE",
    "2 Peter": "2PE",
    "1 John": "1JN",
    "2 John": "2JN",
    "3 John": "3JN",
    "Jude": "JUD",
    "Revelation": "REV",
}


def get_api_bible_book_id(book_abbreviation: str) -> str:
    """
    Convert a book abbreviation to its API.Bible book code.

    Unknown abbreviations are upper-cased with whitespace removed and returned
    as-is, so the caller still gets a usable (if unverified) id.
    """
    book_name = get_book_name(book_abbreviation)
    if book_name is None:
        return "".join(book_abbreviation.split()).upper()
    return API_BIBLE_BOOK_IDS[book_name]


def build_passage_id(
    book_abbreviation: str,
    start_chapter: int,
    start_verse: int,
    end_chapter: int,
    end_verse: int,
) -> str:
    """
    Build an API.Bible passage id.

    Examples: "JHN.3.16" for a single verse, "PHP.2.1-PHP.2.11" for a range and
    "GEN.1.1-GEN.2.3" across chapters.
    """
    book_id = get_api_bible_book_id(book_abbreviation)

    if start_chapter == end_chapter and start_verse == end_verse:
        return f"{book_id}.{start_chapter}.{start_verse}"

    return f"{book_id}.{start_chapter}.{start_verse}-{book_id}.{end_chapter}.{end_verse}"
