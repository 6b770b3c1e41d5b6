# app/adapters/api/routers/rendering.py
from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from app.core.domain.models import (
    Gender,
    GrammaticalPerson,
    RenderRequest,
    RenderedMessage,
)
from app.core.domain.exceptions import DomainError
from app.core.use_cases.render_message import RenderMessage
from app.adapters.api.dependencies import get_render_message_use_case
from morphology.pronouns import pronoun_set

logger = structlog.get_logger()

router = APIRouter(tags=["Rendering"])

@router.post(
    "/render",
    response_model=RenderedMessage,
    status_code=status.HTTP_200_OK,
    summary="Render a Message Template"
)
async def render_message(
    payload: RenderRequest,
    use_case: RenderMessage = Depends(get_render_message_use_case),
) -> RenderedMessage:
    """
    Substitutes the user's ('@') and target's ('~') tokens in a template and
    capitalizes the result.
    """
    try:
        return use_case.execute(
            payload.template,
            payload.user,
            payload.target,
            capitalize=payload.capitalize,
        )
    except DomainError as e:
        # Map Contract Violations -> HTTP 422
        logger.warning("render_bad_request", error=str(e))
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )

@router.get("/pronouns/{person}/{gender}", summary="Inspect a Pronoun Table Cell")
async def get_pronouns(person: str, gender: str) -> dict:
    """
    Returns the token forms for one (person, gender) cell, e.g.
    /pronouns/3/female -> {"I": "she", "me": "her", ...}.
    """
    try:
        cell = pronoun_set(GrammaticalPerson.parse(person), Gender.parse(gender))
    except DomainError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )
    return cell.token_forms()
