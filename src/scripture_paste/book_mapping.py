"""Static mapping from common Bible book abbreviations to full book names."""

import re

_WHITESPACE = re.compile(r"\s")

# Keys are normalized: lower-case with all whitespace removed, so "1 Sam",
# "1Sam" and "1sam" share an entry.
BOOK_MAPPINGS: dict[str, str] = {
    # Old Testament
    "gen": "Genesis", "ge": "Genesis", "gn": "Genesis",
    "exod": "Exodus", "exo": "Exodus", "ex": "Exodus",
    "lev": "Leviticus", "le": "Leviticus", "lv": "Leviticus",
    "num": "Numbers", "nu": "Numbers", "nm": "Numbers",
    "deut": "Deuteronomy", "deu": "Deuteronomy", "dt": "Deuteronomy",
    "josh": "Joshua", "jos": "Joshua", "jsh": "Joshua",
    "judg": "Judges", "jdg": "Judges", "jg": "Judges",
    "ruth": "Ruth", "rth": "Ruth", "rut": "Ruth", "ru": "Ruth",
    "1sam": "1 Samuel", "1sa": "1 Samuel", "1sm": "1 Samuel",
    "2sam": "2 Samuel", "2sa": "2 Samuel", "2sm": "2 Samuel",
    "1kgs": "1 Kings", "1ki": "1 Kings", "1kg": "1 Kings",
    "2kgs": "2 Kings", "2ki": "2 Kings", "2kg": "2 Kings",
    "1chr": "1 Chronicles", "1ch": "1 Chronicles",
    "2chr": "2 Chronicles", "2ch": "2 Chronicles",
    "ezra": "Ezra", "ezr": "Ezra",
    "neh": "Nehemiah", "ne": "Nehemiah",
    "esth": "Esther", "est": "Esther", "es": "Esther",
    "job": "Job", "jb": "Job",
    "ps": "Psalms", "psa": "Psalms", "psm": "Psalms", "pss": "Psalms",
    "prov": "Proverbs", "pro": "Proverbs", "pr": "Proverbs",
    "eccl": "Ecclesiastes", "ecc": "Ecclesiastes", "ec": "Ecclesiastes",
    "song": "Song of Solomon", "sos": "Song of Solomon", "ss": "Song of Solomon",
    "sng": "Song of Solomon",
    "isa": "Isaiah", "is": "Isaiah",
    "jer": "Jeremiah", "je": "Jeremiah",
    "lam": "Lamentations", "la": "Lamentations",
    "ezek": "Ezekiel", "eze": "Ezekiel", "ezk": "Ezekiel",
    "dan": "Daniel", "da": "Daniel", "dn": "Daniel",
    "hos": "Hosea", "ho": "Hosea",
    "joel": "Joel", "jol": "Joel", "jl": "Joel",
    "amos": "Amos", "amo": "Amos", "am": "Amos",
    "obad": "Obadiah", "oba": "Obadiah", "ob": "Obadiah",
    "jonah": "Jonah", "jon": "Jonah",
    "mic": "Micah", "mi": "Micah",
    "nah": "Nahum", "nam": "Nahum", "na": "Nahum",
    "hab": "Habakkuk", "hb": "Habakkuk",
    "zeph": "Zephaniah", "zep": "Zephaniah",
    "hag": "Haggai", "hg": "Haggai",
    "zech": "Zechariah", "zec": "Zechariah",
    "mal": "Malachi", "ml": "Malachi",
    # New Testament
    "matt": "Matthew", "mat": "Matthew", "mt": "Matthew",
    "mark": "Mark", "mrk": "Mark", "mk": "Mark",
    "luke": "Luke", "luk": "Luke", "lk": "Luke",
    "john": "John", "joh": "John", "jhn": "John", "jn": "John",
    "acts": "Acts", "act": "Acts", "ac": "Acts",
    "rom": "Romans", "ro": "Romans", "rm": "Romans",
    "1cor": "1 Corinthians", "1co": "1 Corinthians",
    "2cor": "2 Corinthians", "2co": "2 Corinthians",
    "gal": "Galatians", "ga": "Galatians",
    "eph": "Ephesians", "ep": "Ephesians",
    "phil": "Philippians", "php": "Philippians", "phl": "Philippians",
    "col": "Colossians", "co": "Colossians",
    "1thess": "1 Thessalonians", "1th": "1 Thessalonians", "1thes": "1 Thessalonians",
    "2thess": "2 Thessalonians", "2th": "2 Thessalonians", "2thes": "2 Thessalonians",
    "1tim": "1 Timothy", "1ti": "1 Timothy",
    "2tim": "2 Timothy", "2ti": "2 Timothy",
    "titus": "Titus", "tit": "Titus",
    "phlm": "Philemon", "phm": "Philemon",
    "heb": "Hebrews", "he": "Hebrews",
    "james": "James", "jas": "James", "jm": "James",
    "1pet": "1 Peter", "1pe": "1 Peter", "1pt": "1 Peter",
    "2pet": "2 Peter", "2pe": "2 Peter", "2pt": "2 Peter",
    "1john": "1 John", "1jn": "1 John", "1jo": "1 John",
    "2john": "2 John", "2jn": "2 John", "2jo": "2 John",
    "3john": "3 John", "3jn": "3 John", "3jo": "3 John",
    "jude": "Jude", "jud": "Jude",
    "rev": "Revelation", "re": "Revelation",
}


def normalize_abbreviation(abbreviation: str) -> str:
    """Lower-case an abbreviation and drop all whitespace ("1 Sam" -> "1sam")."""
    return _WHITESPACE.sub("", abbreviation.lower())


def get_book_name(abbreviation: str) -> str | None:
    """
    Resolve a book abbreviation to its full English book name.

    Args:
        abbreviation: Abbreviation as typed, e.g. "Phl", "1 Cor" or "JOHN"

    Returns:
        Full book name (e.g. "Philippians"), or None if the abbreviation is unknown
    """
    return BOOK_MAPPINGS.get(normalize_abbreviation(abbreviation))


def get_default_mapping() -> dict[str, str]:
    """
    Get a copy of the abbreviation table.

    Returns:
        Dictionary mapping normalized abbreviations to full book names
    """
    return dict(BOOK_MAPPINGS)
