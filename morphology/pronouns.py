"""
morphology/pronouns.py

English personal pronoun and copula forms, keyed by grammatical person and
Gender.

This module is intentionally **stateless**: the table is built once at import
time and never mutated. Each (person, gender) cell is an explicit row rather
than a rule, because English third-person pronouns are irregular across the
gender axis (he/him/his/his/himself vs. she/her/her/hers/herself).

It is responsible for:

- The dense (person, gender) -> PronounSet table
- Deriving the ADDITIONAL and OTHER rows from the MALE row
- Post-processing OTHER placeholders into caller-defined pronouns

Typical usage from the phrasing layer:

    from morphology import pronouns

    forms = pronouns.pronoun_set(GrammaticalPerson.THIRD, Gender.FEMALE)
    forms.token_forms()
    # {"I": "she", "me": "her", "my": "her", "mine": "hers",
    #  "myself": "herself", "was": "was"}

Derivation rules
----------------

- ADDITIONAL: the leading 'h' of every MALE pronoun becomes 'x'
  (he -> xe, his -> xis, himself -> ximself).
- OTHER: the leading 'h' becomes the reserved marker OTHER_MARKER ("``"),
  giving "``e", "``im", "``is", "``imself". The possessive pronoun is the
  determiner plus "s" ("``iss") so that "my" and "mine" stay
  distinguishable when a caller swaps in custom pronouns. After
  capitalization the placeholders read "``E", "``Im", ... ; OTHER_PATTERN
  matches both cases.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Dict, Tuple

from app.core.domain.models import Gender, GrammaticalPerson

OTHER_MARKER = "``"


@dataclass(frozen=True)
class PronounSet:
    """
    The pronoun forms for one agreement class.

    Fields map onto the token names used in templates:
        subject    -> I
        object     -> me
        determiner -> my
        possessive -> mine
        reflexive  -> myself
        copula     -> was
    """

    subject: str
    object: str
    determiner: str
    possessive: str
    reflexive: str
    copula: str

    def token_forms(self) -> Dict[str, str]:
        return {
            "I": self.subject,
            "me": self.object,
            "my": self.determiner,
            "mine": self.possessive,
            "myself": self.reflexive,
            "was": self.copula,
        }


PRONOUN_TOKENS: Tuple[str, ...] = ("I", "me", "my", "mine", "myself", "was")

# Fields that hold pronouns (the copula is not a pronoun and is never derived).
_PRONOUN_FIELDS = ("subject", "object", "determiner", "possessive", "reflexive")


# ---------------------------------------------------------------------------
# 1. Base rows
# ---------------------------------------------------------------------------

FIRST_SINGULAR = PronounSet("I", "me", "my", "mine", "myself", "was")
FIRST_PLURAL = PronounSet("we", "us", "our", "ours", "ourselves", "were")
SECOND_SINGULAR = PronounSet("you", "you", "your", "yours", "yourself", "were")
SECOND_PLURAL = PronounSet("you", "you", "your", "yours", "yourselves", "were")

MALE = PronounSet("he", "him", "his", "his", "himself", "was")
FEMALE = PronounSet("she", "her", "her", "hers", "herself", "was")
GENDERLESS = PronounSet("it", "it", "its", "its", "itself", "was")
THEY = PronounSet("they", "them", "their", "theirs", "themself", "were")
THIRD_PLURAL = PronounSet("they", "them", "their", "theirs", "themselves", "were")


# ---------------------------------------------------------------------------
# 2. Derived rows
# ---------------------------------------------------------------------------


def derive_from_male(prefix: str) -> PronounSet:
    """
    Build a pronoun row from MALE by replacing the leading 'h' of each
    pronoun with `prefix`. The copula is kept as-is.
    """
    changes = {}
    for name in _PRONOUN_FIELDS:
        form = getattr(MALE, name)
        if form.startswith("h"):
            form = prefix + form[1:]
        changes[name] = form
    return dataclasses.replace(MALE, **changes)


ADDITIONAL = derive_from_male("x")

_OTHER_BASE = derive_from_male(OTHER_MARKER)
OTHER = dataclasses.replace(_OTHER_BASE, possessive=_OTHER_BASE.determiner + "s")


# ---------------------------------------------------------------------------
# 3. Dense lookup table
# ---------------------------------------------------------------------------

_THIRD_PERSON: Dict[Gender, PronounSet] = {
    Gender.MALE: MALE,
    Gender.FEMALE: FEMALE,
    Gender.GENDERLESS: GENDERLESS,
    Gender.THEY: THEY,
    Gender.ADDITIONAL: ADDITIONAL,
    Gender.OTHER: OTHER,
    Gender.PLURAL: THIRD_PLURAL,
}


def _build_table() -> Dict[Tuple[GrammaticalPerson, Gender], PronounSet]:
    table: Dict[Tuple[GrammaticalPerson, Gender], PronounSet] = {}
    for gender in Gender:
        plural = gender is Gender.PLURAL
        table[(GrammaticalPerson.FIRST, gender)] = FIRST_PLURAL if plural else FIRST_SINGULAR
        table[(GrammaticalPerson.SECOND, gender)] = SECOND_PLURAL if plural else SECOND_SINGULAR
        table[(GrammaticalPerson.THIRD, gender)] = _THIRD_PERSON[gender]
    return table


PRONOUN_TABLE: Dict[Tuple[GrammaticalPerson, Gender], PronounSet] = _build_table()


def pronoun_set(person: GrammaticalPerson, gender: Gender) -> PronounSet:
    """Look up the pronoun row for a (person, gender) cell."""
    return PRONOUN_TABLE[(GrammaticalPerson(person), Gender(gender))]


# ---------------------------------------------------------------------------
# 4. OTHER placeholder post-processing
# ---------------------------------------------------------------------------

# suffix after the marker -> PronounSet field
_OTHER_SUFFIXES: Dict[str, str] = {
    OTHER.reflexive[len(OTHER_MARKER):]: "reflexive",
    OTHER.possessive[len(OTHER_MARKER):]: "possessive",
    OTHER.object[len(OTHER_MARKER):]: "object",
    OTHER.determiner[len(OTHER_MARKER):]: "determiner",
    OTHER.subject[len(OTHER_MARKER):]: "subject",
}

OTHER_PATTERN = re.compile(
    re.escape(OTHER_MARKER)
    + "("
    + "|".join(sorted(_OTHER_SUFFIXES, key=len, reverse=True))
    + r")\b",
    re.IGNORECASE,
)


def customize_other(text: str, forms: PronounSet) -> str:
    """
    Replace every OTHER placeholder in `text` with the matching form from
    `forms`. A placeholder that was capitalized ("``E") yields a capitalized
    replacement.
    """

    def _swap(match: re.Match) -> str:
        suffix = match.group(1)
        replacement = getattr(forms, _OTHER_SUFFIXES[suffix.lower()])
        if suffix[:1].isupper() and replacement:
            replacement = replacement[0].upper() + replacement[1:]
        return replacement

    return OTHER_PATTERN.sub(_swap, text)


__all__ = [
    "OTHER_MARKER",
    "OTHER_PATTERN",
    "PRONOUN_TABLE",
    "PRONOUN_TOKENS",
    "PronounSet",
    "customize_other",
    "derive_from_male",
    "pronoun_set",
]
