"""
discourse/phrasing.py
=====================

Substitution engine for past-tense message templates.

A template refers to a Being through *tokens*: a marker character
immediately followed by a token name. Each call to `substitute` handles one
Being and one marker, so a template can address two Beings independently:

    "@I jumped with @my spear at ~user!"

    text = phrasing.user(template, GrammaticalPerson.SECOND, rogue)
    text = phrasing.target(text, GrammaticalPerson.THIRD, goblin)
    capitalize(text)   # "You jumped with your spear at the goblin!"

Token names
-----------

    user, target   name of the Being ("I" / "you" / "Brunhilda")
    general        name, always "the <general name>" in third person
    I              subject pronoun    (I, we, you, he, she, it, they, xe)
    me             object pronoun     (me, us, you, him, her, it, them, xim)
    my             possessive det.    (my, our, your, his, her, its, their)
    mine           possessive pron.   (mine, ours, yours, his, hers, theirs)
    myself         reflexive          (myself, yourself, yourselves, ...)
    was            past copula        (was / were, as the Being requires)

Matching rules:

- Case-sensitive, whole-token: the longest token name wins and it must not
  be followed by a word character. "@myself" is never read as "@my"
  followed by "self", and "@mystery" is not a token at all.
- Every occurrence is replaced in a single pass; replacement text is never
  scanned again.
- Unknown tokens and lone marker characters are left as they are.

Only "was"/"were" is conjugated; other verbs in templates should be written
in a form that is the same for every person (past tense).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Optional

from app.core.domain.exceptions import InvalidMarkerError, InvalidPersonError
from app.core.domain.models import Being, GrammaticalPerson
from app.shared.config import settings
from discourse.referring_expression import NAME_TOKENS, name_forms
from morphology.pronouns import PRONOUN_TOKENS, pronoun_set
from utils.logging_setup import get_logger

log = get_logger(__name__)

TOKEN_NAMES = NAME_TOKENS + PRONOUN_TOKENS


# ---------------------------------------------------------------------------
# Token grammar
# ---------------------------------------------------------------------------


def _check_marker(marker: str) -> None:
    if not isinstance(marker, str) or len(marker) != 1 or re.match(r"\w", marker):
        raise InvalidMarkerError(marker)


@lru_cache(maxsize=None)
def token_pattern(marker: str) -> "re.Pattern[str]":
    """
    Compiled regex matching any token for `marker`. Group 1 is the token
    name.
    """
    _check_marker(marker)
    names = sorted(TOKEN_NAMES, key=len, reverse=True)
    return re.compile(
        re.escape(marker) + "(" + "|".join(map(re.escape, names)) + r")(?!\w)"
    )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _coerce_person(person, strict: bool) -> GrammaticalPerson:
    try:
        return GrammaticalPerson.parse(person)
    except InvalidPersonError:
        if strict:
            raise
        log.warning("person_out_of_range", person=repr(person), fallback=3)
        return GrammaticalPerson.THIRD


def resolve_tokens(person: GrammaticalPerson, being: Being) -> Dict[str, str]:
    """Every token name mapped to its replacement for this Being."""
    forms = name_forms(person, being)
    forms.update(pronoun_set(person, being.gender).token_forms())
    return forms


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def substitute(
    template: str,
    person,
    being: Being,
    marker: str,
    *,
    strict: Optional[bool] = None,
) -> str:
    """
    Replace every `marker`-prefixed token in `template` with the form that
    fits `being` addressed in `person`.

    Args:
        template:
            Message template, e.g. "@I jumped with @my spear at ~user!".
        person:
            GrammaticalPerson, or the legacy 1/2/3 encoding.
        being:
            The Being the tokens refer to.
        marker:
            Single non-word character introducing this Being's tokens.
        strict:
            If True, an out-of-range person raises InvalidPersonError. If
            False, it is treated as third person. Defaults to
            settings.contracts_enforced.

    Returns:
        A new string; the template itself if it holds no tokens. The result
        is usually passed to `utils.string_tools.capitalize` once every
        Being has been substituted.
    """
    _check_marker(marker)
    pattern = token_pattern(marker)
    if strict is None:
        strict = settings.contracts_enforced

    forms = resolve_tokens(_coerce_person(person, strict), being)
    return pattern.sub(lambda m: forms[m.group(1)], template)


def user(template: str, person, being: Being, *, strict: Optional[bool] = None) -> str:
    """
    Substitute tokens for the Being performing the action ("@user",
    "@my", ...).
    """
    return substitute(template, person, being, settings.USER_MARKER, strict=strict)


def target(template: str, person, being: Being, *, strict: Optional[bool] = None) -> str:
    """
    Substitute tokens for the Being affected by the action ("~target",
    "~me", ...).
    """
    return substitute(template, person, being, settings.TARGET_MARKER, strict=strict)


__all__ = [
    "TOKEN_NAMES",
    "resolve_tokens",
    "substitute",
    "target",
    "token_pattern",
    "user",
]
