# tests/conftest.py
import pytest

from app.core.domain.models import Being, BeingSpec, Gender, GrammaticalPerson

ALL_TOKENS_TEMPLATE = "@user @general @I @me @my @mine @myself @was"

@pytest.fixture
def rogue() -> Being:
    """A named player character."""
    return Being(general_name="rogue", gender=Gender.FEMALE, specific_name="Brunhilda")

@pytest.fixture
def goblin() -> Being:
    """An unnamed monster."""
    return Being(general_name="goblin", gender=Gender.MALE)

@pytest.fixture
def attack_template() -> str:
    return "@I jumped with @my spear at ~user!"

@pytest.fixture
def all_tokens_template() -> str:
    """One occurrence of every token name for the '@' marker."""
    return ALL_TOKENS_TEMPLATE

@pytest.fixture
def goblin_target(goblin) -> BeingSpec:
    return BeingSpec(person=GrammaticalPerson.THIRD, being=goblin)
