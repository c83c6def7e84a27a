"""Data models for the meeting notes summarizer."""
from .session_state import SessionState, StatusKind, StatusMessage
from .backend_models import (
    DEFAULT_EMAIL_SUBJECT,
    SummarizeRequest,
    SummarizeResponse,
    SendEmailRequest,
    SendEmailResponse,
    ErrorResponse,
)
from .session_api import (
    SessionEditRequest,
    SessionSnapshot,
    StatusView,
    PromptPreset,
    PromptPresetRequest,
)

__all__ = [
    # Session state
    "SessionState",
    "StatusKind",
    "StatusMessage",
    # Backend contracts
    "DEFAULT_EMAIL_SUBJECT",
    "SummarizeRequest",
    "SummarizeResponse",
    "SendEmailRequest",
    "SendEmailResponse",
    "ErrorResponse",
    # Session API
    "SessionEditRequest",
    "SessionSnapshot",
    "StatusView",
    "PromptPreset",
    "PromptPresetRequest",
]
