"""DispatchClient for emailing a summary to a list of recipients."""
import logging
from typing import List

from pydantic import ValidationError

from models.backend_models import (
    DEFAULT_EMAIL_SUBJECT,
    SendEmailRequest,
    SendEmailResponse,
)
from services.backend_client import BackendClient, BackendError

logger = logging.getLogger(__name__)


class DispatchClient(BackendClient):
    """Client for the POST /api/send-email backend."""

    endpoint = "/api/send-email"
    fallback_error = "Failed to send email"

    async def send(
        self,
        emails: List[str],
        summary: str,
        subject: str = DEFAULT_EMAIL_SUBJECT
    ) -> str:
        """
        Send the summary by email.

        Args:
            emails: Parsed recipient addresses
            summary: Trimmed summary text used as the email body
            subject: Email subject line

        Returns:
            Confirmation text from the backend

        Raises:
            BackendError: With the server's error text or the generic fallback
        """
        request = SendEmailRequest(emails=emails, summary=summary, subject=subject)
        logger.info(f"Dispatching summary: recipients={len(emails)}, subject={subject}")

        data = await self._post(request.model_dump())

        try:
            result = SendEmailResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Dispatch response missing 'message' field: error={e}")
            raise BackendError(self.fallback_error) from e

        logger.info(f"Dispatch confirmed: recipients={len(emails)}")
        return result.message
