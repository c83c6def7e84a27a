"""
Backend Request/Response Models

Pydantic models for the JSON contracts of the two external services the
workflow depends on:

- POST /api/summarize
- POST /api/send-email
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EMAIL_SUBJECT = "Meeting Summary"


class SummarizeRequest(BaseModel):
    """Request body for the summarization backend."""
    transcript: str = Field(..., description="Trimmed meeting transcript")
    prompt: str = Field(..., description="Trimmed summarization instruction")


class SummarizeResponse(BaseModel):
    """Successful summarization response."""
    model_config = ConfigDict(extra="ignore")

    summary: str = Field(..., description="Generated summary text")


class SendEmailRequest(BaseModel):
    """
    Request body for the email dispatch backend.

    Attributes:
        emails: Parsed recipient addresses, in the order typed
        summary: Trimmed editable summary to send as the email body
        subject: Email subject line
    """
    emails: List[str] = Field(..., description="Recipient email addresses")
    summary: str = Field(..., description="Email body")
    subject: str = Field(
        default=DEFAULT_EMAIL_SUBJECT,
        description="Email subject line"
    )


class SendEmailResponse(BaseModel):
    """Successful dispatch response."""
    model_config = ConfigDict(extra="ignore")

    message: str = Field(..., description="Confirmation text from the backend")


class ErrorResponse(BaseModel):
    """Error body returned by either backend on a non-2xx status."""
    model_config = ConfigDict(extra="ignore")

    error: Optional[str] = None
