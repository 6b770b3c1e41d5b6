# discourse\referring_expression.py
"""
discourse/referring_expression.py
=================================

Referring expression selection: decide *how* a Being is named in a template
(name token), given the grammatical person it is addressed in.

This module sits between:

- the domain model (which defines what a `Being` is), and
- the phrasing layer (which substitutes tokens in templates).

----------------------------------------------------------------------
Name tokens
----------------------------------------------------------------------

    user / target   "who is this": the display name in third person
    general         like `user`, but always "the <general name>" in third
                    person, even when the Being has a specific name

Resolution by grammatical person:

    person   singular   PLURAL
    1        "I"        "we"
    2        "you"      "you"
    3        display name (specific name, else "the <general name>")

A specific name is used bare ("Brunhilda"), a general name always takes
"the" ("the goblin").
"""

from __future__ import annotations

from typing import Dict

from app.core.domain.models import Being, GrammaticalPerson

# Tokens that name the Being rather than pronominalize it.
DISPLAY_NAME_TOKENS = ("user", "target")
GENERAL_NAME_TOKEN = "general"
NAME_TOKENS = DISPLAY_NAME_TOKENS + (GENERAL_NAME_TOKEN,)


# ---------------------------------------------------------------------------
# Core decision logic
# ---------------------------------------------------------------------------


def _self_reference(person: GrammaticalPerson, being: Being) -> str:
    """How a first- or second-person Being refers to itself."""
    if person == GrammaticalPerson.FIRST:
        return "we" if being.is_plural else "I"
    return "you"


def resolve_name(token: str, person: GrammaticalPerson, being: Being) -> str:
    """
    Resolve one name token for `being` addressed in `person`.

    Args:
        token:
            One of NAME_TOKENS.
        person:
            Grammatical person (already validated by the caller).
        being:
            The Being to refer to.
    """
    if token not in NAME_TOKENS:
        raise KeyError(token)

    if person != GrammaticalPerson.THIRD:
        return _self_reference(person, being)

    if token == GENERAL_NAME_TOKEN:
        return being.general_display_name()
    return being.display_name()


def name_forms(person: GrammaticalPerson, being: Being) -> Dict[str, str]:
    """All name tokens resolved for one (person, being) pair."""
    return {token: resolve_name(token, person, being) for token in NAME_TOKENS}


__all__ = [
    "DISPLAY_NAME_TOKENS",
    "GENERAL_NAME_TOKEN",
    "NAME_TOKENS",
    "name_forms",
    "resolve_name",
]
