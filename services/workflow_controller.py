"""WorkflowController: the summarize, edit and dispatch state machine.

The controller exclusively owns the session's SessionState. Callers read it
through ``state`` or ``snapshot()`` and change it only through the
operations below, so the in-flight flags are managed in one place.
"""
import logging
from typing import Dict, Optional

from models.backend_models import DEFAULT_EMAIL_SUBJECT
from models.session_api import PromptPreset, SessionSnapshot
from models.session_state import SessionState, StatusMessage
from services.backend_client import BackendClient, BackendError
from services.dispatch_client import DispatchClient
from services.summarization_client import SummarizationClient
from utils.text import trim

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please provide both transcript and prompt"
SUMMARY_SUCCESS_MESSAGE = "Summary generated successfully!"
NO_SUMMARY_MESSAGE = "No summary to send"
NO_EMAILS_MESSAGE = "Please provide email addresses"
INVALID_EMAILS_MESSAGE = "Please provide valid email addresses"

PROMPT_PRESETS: Dict[str, PromptPreset] = {
    preset.name: preset for preset in (
        PromptPreset(
            name="executive_summary",
            label="Executive Summary",
            prompt="Summarize in bullet points for executives"
        ),
        PromptPreset(
            name="action_items",
            label="Action Items",
            prompt="List all action items with responsible persons"
        ),
        PromptPreset(
            name="key_decisions",
            label="Key Decisions",
            prompt="Highlight key decisions made and next steps"
        ),
    )
}

EDITABLE_FIELDS = ("transcript", "prompt", "editable_summary", "recipients")


class SummaryNotAvailableError(Exception):
    """Raised when the editable summary is edited before a summary exists."""


class WorkflowController:
    """Drive one session through summarize, edit and dispatch."""

    def __init__(
        self,
        summarization_client: Optional[SummarizationClient] = None,
        dispatch_client: Optional[DispatchClient] = None
    ):
        self.summarization_client = summarization_client or SummarizationClient()
        self.dispatch_client = dispatch_client or DispatchClient()
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    # Derived availability of the trigger controls

    @property
    def summarize_enabled(self) -> bool:
        s = self._state
        return not s.summarizing and bool(trim(s.transcript)) and bool(trim(s.prompt))

    @property
    def send_enabled(self) -> bool:
        s = self._state
        return (
            not s.sending
            and bool(trim(s.editable_summary))
            and bool(trim(s.recipients_raw))
        )

    @property
    def reset_enabled(self) -> bool:
        return not self._state.summarizing and not self._state.sending

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot.from_state(
            self._state,
            summarize_enabled=self.summarize_enabled,
            send_enabled=self.send_enabled,
            reset_enabled=self.reset_enabled
        )

    # Edits

    def set_transcript(self, value: str) -> None:
        self._state.transcript = value

    def set_prompt(self, value: str) -> None:
        self._state.prompt = value

    def set_editable_summary(self, value: str) -> None:
        if not self._state.has_summary:
            raise SummaryNotAvailableError(
                "editable_summary can only be edited after a summary is generated"
            )
        self._state.editable_summary = value

    def set_recipients(self, value: str) -> None:
        self._state.recipients_raw = value

    def edit(self, field: str, value: str) -> None:
        """
        Set one user-editable text field.

        Args:
            field: One of transcript, prompt, editable_summary, recipients
            value: New text, stored as typed

        Raises:
            ValueError: If the field is not user-editable
            SummaryNotAvailableError: If editable_summary is edited before
                a summary exists
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(
                f"Unknown field '{field}'. Editable fields: {', '.join(EDITABLE_FIELDS)}"
            )
        getattr(self, f"set_{field}")(value)

    def apply_prompt_preset(self, name: str) -> PromptPreset:
        """Fill the prompt with a named preset instruction."""
        preset = PROMPT_PRESETS.get(name)
        if preset is None:
            raise ValueError(
                f"Unknown prompt preset '{name}'. Available: {', '.join(PROMPT_PRESETS)}"
            )
        self._state.prompt = preset.prompt
        return preset

    # Operations

    async def validate_and_summarize(self) -> StatusMessage:
        """
        Validate the inputs and request a summary.

        Returns:
            The resulting status message (also stored on the state)
        """
        state = self._state
        transcript = trim(state.transcript)
        prompt = trim(state.prompt)

        if not transcript or not prompt:
            logger.warning("Summarization rejected: transcript or prompt is empty")
            state.status = StatusMessage.error(MISSING_INPUT_MESSAGE)
            return state.status

        state.summarizing = True
        state.status = None

        try:
            summary = await self.summarization_client.summarize(transcript, prompt)
            state.summary = summary
            state.editable_summary = summary
            state.status = StatusMessage.success(SUMMARY_SUCCESS_MESSAGE)
            logger.info(f"Summarization complete: summary_length={len(summary)}")
        except Exception as e:
            message = self._failure_text(e, self.summarization_client)
            state.status = StatusMessage.error(f"Error: {message}")
            self._log_failure("Summarization error", e, message)
        finally:
            state.summarizing = False

        return state.status

    async def validate_and_send(self) -> StatusMessage:
        """
        Validate the editable summary and recipients, then dispatch the email.

        Returns:
            The resulting status message (also stored on the state)
        """
        state = self._state

        if not trim(state.editable_summary):
            return self._reject_send(NO_SUMMARY_MESSAGE)
        if not trim(state.recipients_raw):
            return self._reject_send(NO_EMAILS_MESSAGE)

        emails = state.recipients
        if not emails:
            return self._reject_send(INVALID_EMAILS_MESSAGE)

        state.sending = True
        state.status = None

        try:
            confirmation = await self.dispatch_client.send(
                emails,
                trim(state.editable_summary),
                DEFAULT_EMAIL_SUBJECT
            )
            state.status = StatusMessage.success(f"✅ {confirmation}")
            state.recipients_raw = ""
            logger.info(f"Dispatch complete: recipients={len(emails)}")
        except Exception as e:
            message = self._failure_text(e, self.dispatch_client)
            state.status = StatusMessage.error(f"Email error: {message}")
            self._log_failure("Email error", e, message)
        finally:
            state.sending = False

        return state.status

    @staticmethod
    def _failure_text(error: Exception, client: BackendClient) -> str:
        """Text for a failed request: BackendError carries the server's text."""
        if isinstance(error, BackendError) and str(error):
            return str(error)
        return client.fallback_error

    @staticmethod
    def _log_failure(prefix: str, error: Exception, message: str) -> None:
        # BackendError is already logged by the client
        if isinstance(error, BackendError):
            logger.debug(f"{prefix}: {message}")
        else:
            logger.error(f"{prefix}: {type(error).__name__}: {message}", exc_info=error)

    def _reject_send(self, message: str) -> StatusMessage:
        logger.warning(f"Dispatch rejected: {message}")
        self._state.status = StatusMessage.error(message)
        return self._state.status

    def reset(self) -> None:
        """Clear every text field and the status; in-flight flags are kept."""
        state = self._state
        state.transcript = ""
        state.prompt = ""
        state.summary = ""
        state.editable_summary = ""
        state.recipients_raw = ""
        state.status = None
        logger.info("Session reset")

    async def aclose(self) -> None:
        await self.summarization_client.aclose()
        await self.dispatch_client.aclose()
