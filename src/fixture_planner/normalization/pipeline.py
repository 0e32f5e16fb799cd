"""Team title normalization for fixture-planner.

Handles:
- Titles stored as clean UTF-8 (NFC, single spaces)
- Short ASCII team codes for compact views and CLI output
"""

from __future__ import annotations

import re
import unicodedata

from unidecode import unidecode


def normalize_title(raw: str) -> str:
    """Clean a team title while keeping its original script and accents.

    - Strip leading/trailing whitespace
    - Normalize Unicode to NFC form
    - Collapse runs of whitespace to a single space
    """
    if not raw or not raw.strip():
        raise ValueError("Team title cannot be empty")

    title = unicodedata.normalize("NFC", raw.strip())
    return re.sub(r"\s+", " ", title)


def transliterate(title: str) -> str:
    """Convert a title to plain ASCII.

    "Ливерпуль" → "Liverpul'"
    "Borussia Mönchengladbach" → "Borussia Monchengladbach"
    """
    return unidecode(title)


def generate_team_code(title: str, length: int = 3) -> str:
    """Generate a short upper-case ASCII code from a team title.

    Three or more words use initials, two words use two letters of the
    first and one of the second, a single word uses its first letters.

    Examples:
        "Brighton and Hove Albion" → "BAH"
        "West Ham United" → "WHU"
        "Manchester United" → "MAU"
        "Челси" → "CHE"
    """
    ascii_title = transliterate(normalize_title(title))
    words = [re.sub(r"[^A-Za-z0-9]", "", w) for w in ascii_title.split()]
    words = [w for w in words if w]
    if not words:
        return "TBD"

    if len(words) >= 3:
        code = "".join(w[0] for w in words[:length])
    elif len(words) == 2:
        code = words[0][:length - 1] + words[1][0]
    else:
        code = words[0][:length]

    return code.upper()
