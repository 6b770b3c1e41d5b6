"""
utils/string_tools.py
---------------------

Small string helpers used after template substitution.

Letters are matched with Unicode awareness: any character that `re` treats
as a word character, minus digits and the underscore. That covers Latin,
Greek, Cyrillic, Armenian, Georgian and the other cased scripts, as well as
uncased ones (which simply stay unchanged when upper-cased).
"""

from __future__ import annotations

import re

MATCH_LETTER = r"[^\W\d_]"
MATCH_NON_LETTER = r"[\W\d_]"

_FIRST_LETTER = re.compile(MATCH_LETTER)


def capitalize(text: str) -> str:
    """
    Upper-case the first letter in `text`, wherever it is, and leave every
    other character untouched. The letter is replaced by exactly one
    character (title case, so "ǆ" becomes "ǅ"); letters whose capital form
    is several characters long ("ß", "ﬁ") are left as they are.

        capitalize("you jumped!")     -> "You jumped!"
        capitalize('"ñandú," I said') -> '"Ñandú," I said'
        capitalize("1234 ...")        -> "1234 ..."

    Substituted pronouns can leave a sentence starting in lower case, so this
    runs once after every Being has been substituted. Idempotent.
    """
    match = _FIRST_LETTER.search(text)
    if match is None:
        return text

    start = match.start()
    letter = text[start]
    for cased in (letter.title(), letter.upper()):
        if len(cased) == 1:
            return text[:start] + cased + text[start + 1:]
    return text


__all__ = ["MATCH_LETTER", "MATCH_NON_LETTER", "capitalize"]
