# tests/test_render_message.py
"""
Tests for the RenderMessage use case: user pass, target pass, capitalization.
"""

from __future__ import annotations

import pytest

from app.core.domain.exceptions import InvalidPersonError
from app.core.domain.models import Being, BeingSpec, Gender, GrammaticalPerson, RenderedMessage
from app.core.use_cases.render_message import RenderMessage
from app.shared.config import Settings


@pytest.fixture
def use_case() -> RenderMessage:
    return RenderMessage(Settings(STRICT_CONTRACTS=True))


@pytest.mark.parametrize(
    "person, expected",
    [
        (GrammaticalPerson.FIRST, "I jumped with my spear at the goblin!"),
        (GrammaticalPerson.SECOND, "You jumped with your spear at the goblin!"),
        (GrammaticalPerson.THIRD, "She jumped with her spear at the goblin!"),
    ],
)
def test_attack_scenarios(use_case, attack_template, rogue, goblin_target, person, expected) -> None:
    result = use_case.execute(attack_template, BeingSpec(person=person, being=rogue), goblin_target)
    assert isinstance(result, RenderedMessage)
    assert result.text == expected
    assert result.template == attack_template


def test_named_user_scenario(use_case, rogue, goblin_target) -> None:
    result = use_case.execute(
        "@user jumped with @my spear at ~user!", BeingSpec(person=3, being=rogue), goblin_target
    )
    assert result.text == "Brunhilda jumped with her spear at the goblin!"


def test_without_target_leaves_target_tokens(use_case, rogue) -> None:
    result = use_case.execute("@user waved at ~user.", BeingSpec(person=3, being=rogue))
    assert result.text == "Brunhilda waved at ~user."


def test_capitalization_can_be_disabled(use_case, goblin) -> None:
    result = use_case.execute("@user fell.", BeingSpec(person=3, being=goblin), capitalize=False)
    assert result.text == "the goblin fell."


def test_custom_markers(rogue, goblin) -> None:
    use_case = RenderMessage(Settings(USER_MARKER="$", TARGET_MARKER="%"))
    result = use_case.execute(
        "$I kicked %user; %I cursed $me.",
        BeingSpec(person=2, being=rogue),
        BeingSpec(person=3, being=Being(general_name="ogres", gender=Gender.PLURAL)),
    )
    assert result.text == "You kicked the ogres; they cursed you."


def test_strict_settings_reject_bad_person(use_case, goblin) -> None:
    spec = BeingSpec.model_construct(person=9, being=goblin)
    with pytest.raises(InvalidPersonError):
        use_case.execute("@I fled.", spec)


def test_lenient_settings_fall_back_to_third_person(goblin) -> None:
    use_case = RenderMessage(Settings(STRICT_CONTRACTS=False))
    spec = BeingSpec.model_construct(person=9, being=goblin)
    assert use_case.execute("@I fled.", spec).text == "He fled."
