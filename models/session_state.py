"""
Session State Data Model

This module defines the single session-scoped state record held by the
WorkflowController, along with the tagged status message shown to the user.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from utils.recipients import parse_recipients


class StatusKind(str, enum.Enum):
    """Classification of a status message."""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusMessage:
    """
    Last outcome or validation message shown to the user.

    Attributes:
        kind: Whether the message reports a success or an error
        text: Display text
    """
    kind: StatusKind
    text: str

    @classmethod
    def success(cls, text: str) -> "StatusMessage":
        return cls(kind=StatusKind.SUCCESS, text=text)

    @classmethod
    def error(cls, text: str) -> "StatusMessage":
        return cls(kind=StatusKind.ERROR, text=text)

    @property
    def is_error(self) -> bool:
        return self.kind is StatusKind.ERROR


@dataclass
class SessionState:
    """
    State of the current summarize-and-share session.

    All text fields start empty and both in-flight flags start False.
    An empty summary means no summary has been generated yet.

    Attributes:
        transcript: Raw meeting transcript as typed
        prompt: Summarization instruction as typed
        summary: Text returned by the last successful summarization
        editable_summary: User-editable copy of the summary, the dispatch payload
        recipients_raw: Comma-separated recipient addresses as typed
        summarizing: True while a summarization request is in flight
        sending: True while a dispatch request is in flight
        status: Last outcome or validation message, if any
    """
    transcript: str = ""
    prompt: str = ""
    summary: str = ""
    editable_summary: str = ""
    recipients_raw: str = ""
    summarizing: bool = False
    sending: bool = False
    status: Optional[StatusMessage] = field(default=None)

    @property
    def recipients(self) -> List[str]:
        """Recipient addresses parsed from the raw input."""
        return parse_recipients(self.recipients_raw)

    @property
    def has_summary(self) -> bool:
        return bool(self.summary)
