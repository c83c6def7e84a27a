"""
Session router exposing the summarize-and-share workflow.

Each trigger endpoint is refused with 409 while its request kind is in
flight, which is how at most one request of each kind runs at a time.
Validation and backend outcomes are returned as the session status, not
as HTTP errors.
"""
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request

from models.session_api import (
    PromptPreset,
    PromptPresetRequest,
    SessionEditRequest,
    SessionSnapshot,
)
from services.workflow_controller import (
    PROMPT_PRESETS,
    SummaryNotAvailableError,
    WorkflowController,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


def get_controller(request: Request) -> WorkflowController:
    """Return the application's single WorkflowController."""
    return request.app.state.controller


@router.get("", response_model=SessionSnapshot)
async def get_session(request: Request):
    return get_controller(request).snapshot()


@router.patch("", response_model=SessionSnapshot)
async def edit_session(body: SessionEditRequest, request: Request):
    """
    Apply edits to the session's text fields.

    Raises:
        HTTPException: 409 if editable_summary is set before a summary exists
    """
    controller = get_controller(request)
    edits = body.model_dump(exclude_unset=True, exclude_none=True)

    # Reject the whole edit before applying any part of it
    if "editable_summary" in edits and not controller.state.has_summary:
        logger.warning("Edit rejected: editable_summary set before a summary exists")
        raise HTTPException(
            status_code=409,
            detail="editable_summary can only be edited after a summary is generated"
        )

    try:
        for field, value in edits.items():
            controller.edit(field, value)
    except SummaryNotAvailableError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return controller.snapshot()


@router.get("/prompt-presets", response_model=List[PromptPreset])
async def list_prompt_presets():
    return list(PROMPT_PRESETS.values())


@router.post("/prompt-preset", response_model=SessionSnapshot)
async def apply_prompt_preset(body: PromptPresetRequest, request: Request):
    controller = get_controller(request)
    try:
        controller.apply_prompt_preset(body.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return controller.snapshot()


@router.post("/summarize", response_model=SessionSnapshot)
async def summarize(request: Request):
    """
    Validate transcript and prompt, then request a summary.

    Raises:
        HTTPException: 409 if a summarization is already in flight
    """
    controller = get_controller(request)
    if controller.state.summarizing:
        logger.warning("Summarize refused: summarization already in flight")
        raise HTTPException(status_code=409, detail="Summarization already in progress")

    await controller.validate_and_summarize()
    return controller.snapshot()


@router.post("/send", response_model=SessionSnapshot)
async def send(request: Request):
    """
    Validate the editable summary and recipients, then dispatch the email.

    Raises:
        HTTPException: 409 if a dispatch is already in flight
    """
    controller = get_controller(request)
    if controller.state.sending:
        logger.warning("Send refused: dispatch already in flight")
        raise HTTPException(status_code=409, detail="Email dispatch already in progress")

    await controller.validate_and_send()
    return controller.snapshot()


@router.post("/reset", response_model=SessionSnapshot)
async def reset(request: Request):
    """
    Clear all session text.

    Raises:
        HTTPException: 409 while a summarization or dispatch is in flight
    """
    controller = get_controller(request)
    if not controller.reset_enabled:
        raise HTTPException(status_code=409, detail="Cannot reset while a request is in progress")

    controller.reset()
    return controller.snapshot()
