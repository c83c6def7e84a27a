"""
Session API Request/Response Models

This module defines the Pydantic models for the /session endpoints, which
expose the WorkflowController over HTTP.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from models.session_state import SessionState, StatusKind


class SessionEditRequest(BaseModel):
    """
    Partial edit of the session's text fields.

    Only fields that are set are applied; no validation happens here.
    """
    transcript: Optional[str] = None
    prompt: Optional[str] = None
    editable_summary: Optional[str] = None
    recipients: Optional[str] = Field(
        default=None,
        description="Comma-separated recipient addresses"
    )


class PromptPresetRequest(BaseModel):
    """Request body for applying a named prompt preset."""
    name: str = Field(..., description="Preset name, e.g. 'action_items'")


class PromptPreset(BaseModel):
    """A named canned summarization instruction."""
    name: str
    label: str
    prompt: str


class StatusView(BaseModel):
    """Status message with its explicit classification."""
    kind: StatusKind
    text: str


class SessionSnapshot(BaseModel):
    """
    Read-only view of the session state plus derived availability flags.

    Attributes:
        recipients: Parsed recipient list derived from recipients_raw
        has_summary: True once a summary has been generated
        summarize_enabled: Whether the summarize trigger is available
        send_enabled: Whether the send trigger is available
        reset_enabled: Whether the reset trigger is available
    """
    transcript: str
    prompt: str
    summary: str
    editable_summary: str
    recipients_raw: str
    recipients: List[str]
    summarizing: bool
    sending: bool
    status: Optional[StatusView] = None
    has_summary: bool
    summarize_enabled: bool
    send_enabled: bool
    reset_enabled: bool

    @classmethod
    def from_state(
        cls,
        state: SessionState,
        summarize_enabled: bool,
        send_enabled: bool,
        reset_enabled: bool
    ) -> "SessionSnapshot":
        status = None
        if state.status is not None:
            status = StatusView(kind=state.status.kind, text=state.status.text)
        return cls(
            transcript=state.transcript,
            prompt=state.prompt,
            summary=state.summary,
            editable_summary=state.editable_summary,
            recipients_raw=state.recipients_raw,
            recipients=state.recipients,
            summarizing=state.summarizing,
            sending=state.sending,
            status=status,
            has_summary=state.has_summary,
            summarize_enabled=summarize_enabled,
            send_enabled=send_enabled,
            reset_enabled=reset_enabled
        )
