"""Functions router for entry point schemas and function call dispatch.

This module provides REST API endpoints for:
- Listing chat-completion function schemas
- Listing and removing registered entry points
- Dispatching a model-issued function call
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from copilot_context.copilot import CopilotContext
from copilot_context.dependencies import get_copilot
from copilot_context.entry_points import FunctionCall
from copilot_context.errors import FunctionArgumentsParseError
from copilot_context.models.functions import (
    ArgumentAnnotationModel,
    EntryPointListItem,
    EntryPointListResponse,
    FunctionCallRequest,
    FunctionListResponse,
    FunctionSchemaModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/functions", tags=["functions"])


@router.get(
    "",
    response_model=FunctionListResponse,
    summary="List chat-completion functions",
)
async def list_functions(
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> FunctionListResponse:
    """List the schemas of all registered entry points.

    Args:
        copilot: Injected CopilotContext

    Returns:
        Function schemas in registration order
    """
    schemas = copilot.get_chat_completion_functions()
    return FunctionListResponse(
        functions=[FunctionSchemaModel.model_validate(s) for s in schemas]
    )


@router.get(
    "/entry-points",
    response_model=EntryPointListResponse,
    summary="List registered entry points",
)
async def list_entry_points(
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> EntryPointListResponse:
    """List registered entry points with their registration ids.

    Args:
        copilot: Injected CopilotContext

    Returns:
        Entry point metadata (implementations are not exposed)
    """
    items = [
        EntryPointListItem(
            entry_id=entry_id,
            name=entry_point.name,
            description=entry_point.description,
            argument_annotations=[
                ArgumentAnnotationModel.model_validate(a)
                for a in entry_point.argument_annotations
            ],
        )
        for entry_id, entry_point in copilot.entry_points.items()
    ]
    return EntryPointListResponse(entry_points=items)


@router.delete(
    "/entry-points/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an entry point",
)
async def remove_entry_point(
    entry_id: str,
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> None:
    """Remove a registered entry point. Unknown ids are ignored.

    Args:
        entry_id: Registration id
        copilot: Injected CopilotContext
    """
    copilot.remove_entry_point(entry_id)


@router.post(
    "/call",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Dispatch a function call",
)
async def call_function(
    request: FunctionCallRequest,
    copilot: Annotated[CopilotContext, Depends(get_copilot)],
) -> None:
    """Dispatch a model-issued function call to the matching entry point.

    Calls to unknown functions are ignored. The implementation's result is
    not returned.

    Args:
        request: Function name, JSON argument list, and conversation history
        copilot: Injected CopilotContext

    Raises:
        HTTPException: 400 if the arguments are not a JSON array
        HTTPException: 500 if the implementation fails
    """
    handler = copilot.get_function_call_handler()
    function_call = FunctionCall(name=request.name, arguments=request.arguments)

    try:
        await handler(request.messages, function_call)
    except FunctionArgumentsParseError as e:
        logger.warning(str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Function '{request.name}' failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Function '{request.name}' failed: {str(e)}",
        )
