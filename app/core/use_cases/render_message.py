# app/core/use_cases/render_message.py
import structlog
from typing import Optional

from app.core.domain.models import BeingSpec, RenderedMessage
from app.core.domain.exceptions import DomainError
from app.shared.config import Settings, settings as default_settings
from discourse import phrasing
from utils.string_tools import capitalize as capitalize_text

logger = structlog.get_logger()

class RenderMessage:
    """
    Use Case: Renders a message template for an acting Being and an optional
    affected Being.

    Responsibilities:
    1. Substitutes the user's tokens (USER_MARKER, '@' by default).
    2. Substitutes the target's tokens (TARGET_MARKER, '~' by default).
    3. Capitalizes the first letter of the result.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def execute(
        self,
        template: str,
        user: BeingSpec,
        target: Optional[BeingSpec] = None,
        *,
        capitalize: bool = True,
    ) -> RenderedMessage:
        """
        Executes the rendering.

        Args:
            template: Message template, e.g. "@I jumped with @my spear at ~user!".
            user: The acting Being and the person it is addressed in.
            target: The affected Being, if the template mentions one.
            capitalize: Upper-case the first letter of the output.

        Returns:
            RenderedMessage: The rendered text entity.
        """
        strict = self.settings.contracts_enforced
        logger.info(
            "render_started",
            user_person=int(user.person),
            target_person=int(target.person) if target else None,
        )

        try:
            text = phrasing.substitute(
                template, user.person, user.being, self.settings.USER_MARKER, strict=strict
            )
            if target is not None:
                text = phrasing.substitute(
                    text, target.person, target.being, self.settings.TARGET_MARKER, strict=strict
                )
        except DomainError as e:
            logger.warning("render_rejected", error=e.message)
            raise

        if capitalize:
            text = capitalize_text(text)

        logger.info("render_success", text_preview=text[:50])
        return RenderedMessage(text=text, template=template)
