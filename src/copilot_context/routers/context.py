"""Context router for managing prompt context fragments."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from copilot_context.copilot import CopilotContext
from copilot_context.dependencies import get_copilot
from copilot_context.errors import UnknownContextParentError
from copilot_context.models.context import (
    AddContextRequest,
    AddContextResponse,
    ContextStringResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/context", tags=["context"])


@router.get(
    "",
    response_model=ContextStringResponse,
    summary="Get the flattened context",
)
async def get_context(
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> ContextStringResponse:
    """Get all context fragments flattened into one outline string."""
    return ContextStringResponse(context=copilot.get_context_string())


@router.post(
    "",
    response_model=AddContextResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a context fragment",
)
async def add_context(
    request: AddContextRequest,
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> AddContextResponse:
    """Add a context fragment, optionally under an existing one.

    Args:
        request: Fragment text and optional parent id
        copilot: Injected CopilotContext

    Returns:
        The id of the new fragment

    Raises:
        HTTPException: 404 if the parent fragment does not exist
    """
    try:
        node_id = copilot.add_context(request.text, request.parent_id)
    except UnknownContextParentError as e:
        logger.warning(str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return AddContextResponse(id=node_id)


@router.delete(
    "/{node_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a context fragment",
)
async def remove_context(
    node_id: str,
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> None:
    """Remove a context fragment and everything nested under it.

    Unknown ids are ignored.
    """
    copilot.remove_context(node_id)
