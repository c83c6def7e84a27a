"""SummarizationClient for requesting AI-generated meeting summaries."""
import logging

from pydantic import ValidationError

from models.backend_models import SummarizeRequest, SummarizeResponse
from services.backend_client import BackendClient, BackendError

logger = logging.getLogger(__name__)


class SummarizationClient(BackendClient):
    """Client for the POST /api/summarize backend."""

    endpoint = "/api/summarize"
    fallback_error = "Failed to generate summary"

    async def summarize(self, transcript: str, prompt: str) -> str:
        """
        Request a summary of a transcript.

        Args:
            transcript: Trimmed meeting transcript
            prompt: Trimmed summarization instruction

        Returns:
            Generated summary text

        Raises:
            BackendError: With the server's error text or the generic fallback
        """
        request = SummarizeRequest(transcript=transcript, prompt=prompt)
        logger.info(
            f"Requesting summary: transcript_length={len(transcript)}, "
            f"prompt_length={len(prompt)}"
        )

        data = await self._post(request.model_dump())

        try:
            result = SummarizeResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Summary response missing 'summary' field: error={e}")
            raise BackendError(self.fallback_error) from e

        logger.info(f"Summary received: summary_length={len(result.summary)}")
        return result.summary
