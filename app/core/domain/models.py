# app/core/domain/models.py
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain.exceptions import InvalidGenderError, InvalidPersonError


# --- Enums ---

class Gender(str, Enum):
    """
    Gender/number category of a Being; selects third-person pronouns and
    verb agreement.

    - MALE / FEMALE: he, she.
    - GENDERLESS: "it" and related forms; meant for things that aren't alive.
    - THEY: singular "they" for someone of unknown or non-specific gender.
    - ADDITIONAL: a gender in addition to male and female that is not
      genderless (non-human species, non-binary pronouns); "xe".
    - OTHER: an unpronounceable placeholder ("``e") that callers replace
      with their own pronouns afterwards.
    - PLURAL: a group of individuals addressed as one Being; always takes
      plural agreement. Not to be confused with THEY.
    """
    MALE = "male"
    FEMALE = "female"
    GENDERLESS = "genderless"
    THEY = "they"
    ADDITIONAL = "additional"
    OTHER = "other"
    PLURAL = "plural"

    @classmethod
    def parse(cls, value: "Gender | str") -> "Gender":
        """
        Normalize a loose gender label ("f", "Man", "it", "group", ...) into a
        Gender member. Raises InvalidGenderError for unknown labels.
        """
        if isinstance(value, Gender):
            return value

        label = str(value).strip().lower()
        if label in _GENDER_ALIASES:
            return _GENDER_ALIASES[label]
        raise InvalidGenderError(str(value))


_GENDER_ALIASES = {
    **{g.value: g for g in Gender},
    **{g.name.lower(): g for g in Gender},
    "m": Gender.MALE,
    "man": Gender.MALE,
    "he": Gender.MALE,
    "masc": Gender.MALE,
    "f": Gender.FEMALE,
    "w": Gender.FEMALE,
    "woman": Gender.FEMALE,
    "she": Gender.FEMALE,
    "fem": Gender.FEMALE,
    "n": Gender.GENDERLESS,
    "it": Gender.GENDERLESS,
    "neuter": Gender.GENDERLESS,
    "xe": Gender.ADDITIONAL,
    "pl": Gender.PLURAL,
    "group": Gender.PLURAL,
}


class GrammaticalPerson(IntEnum):
    """Grammatical person; the numeric values are the legacy 1/2/3 encoding."""
    FIRST = 1
    SECOND = 2
    THIRD = 3

    @classmethod
    def parse(cls, value: "GrammaticalPerson | int | str") -> "GrammaticalPerson":
        """Accepts members, ints, integral floats, digit strings and names ("second")."""
        if isinstance(value, GrammaticalPerson):
            return value
        if isinstance(value, bool):
            raise InvalidPersonError(value)
        if isinstance(value, float) and not value.is_integer():
            raise InvalidPersonError(value)
        if isinstance(value, str) and not value.strip().isdigit():
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidPersonError(value) from None
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise InvalidPersonError(value) from None


# --- Entities ---

class Being(BaseModel):
    """
    One narrative participant (the user or target of an action).

    Built once per rendered message and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    general_name: str = Field(
        ...,
        description='Name of the general kind of Being, e.g. "store manager" or "copper dragon".',
    )
    gender: Gender = Gender.GENDERLESS
    specific_name: Optional[str] = Field(
        None,
        description='Proper name, e.g. "Duke Graham". Never prefixed with "the".',
    )

    @field_validator("gender", mode="before")
    @classmethod
    def normalize_gender(cls, value):
        return Gender.parse(value)

    def display_name(self) -> str:
        if self.specific_name is not None:
            return self.specific_name
        return self.general_display_name()

    def general_display_name(self) -> str:
        return "the " + self.general_name

    @property
    def is_plural(self) -> bool:
        return self.gender is Gender.PLURAL

    def __str__(self) -> str:
        return self.display_name()


# --- API Payloads ---

class BeingSpec(BaseModel):
    """A Being together with the grammatical person it is addressed in."""
    person: GrammaticalPerson = GrammaticalPerson.THIRD
    being: Being

    @field_validator("person", mode="before")
    @classmethod
    def normalize_person(cls, value):
        return GrammaticalPerson.parse(value)


class RenderRequest(BaseModel):
    """Input payload for rendering one message template."""
    template: str
    user: BeingSpec
    target: Optional[BeingSpec] = None
    capitalize: bool = True


class RenderedMessage(BaseModel):
    """The rendered output text."""
    text: str
    template: str
