"""
Summarizer for generating concise summaries of transcriptions
"""

import logging
from typing import Dict, Any

from ..providers.base import BaseProvider
from ..core.config import LinguaScribeConfig
from ..core.utils import truncate
from ..exceptions import LinguaScribeError, ProviderError
from ..models.media import TextRequest
from ..models.results import Capability, SummaryResult
from .prompts import SYSTEM_SUMMARIZER, GENERATE_SUMMARY_PROMPT

logger = logging.getLogger(__name__)


class Summarizer:
    """Generates summaries for text using the configured text model"""

    def __init__(self, config: LinguaScribeConfig, provider: BaseProvider):
        self.config = config
        self.provider = provider

    async def summarize(self, text: str) -> SummaryResult:
        """
        Generate a summary of the text

        Args:
            text: Transcription or pasted text

        Returns:
            SummaryResult with the summary

        Raises:
            ValidationError: If the text is empty
            ProviderError: If the model call fails or returns nothing
        """
        request = TextRequest(text)
        logger.info(f"Summarizing text ({len(request.text)} characters)")

        messages = [
            {"role": "system", "content": SYSTEM_SUMMARIZER},
            {"role": "user", "content": GENERATE_SUMMARY_PROMPT.format(transcription=request.text)}
        ]

        try:
            summary = await self.provider.process_text_messages(
                messages=messages,
                max_tokens=self.config.summary_max_tokens,
                temperature=self.config.temperature
            )
        except LinguaScribeError:
            raise
        except Exception as e:
            logger.error(f"Failed to generate summary: {e}")
            raise ProviderError(f"Failed to generate summary: {e}", self.provider.name, Capability.SUMMARIZE.value)

        summary = (summary or "").strip()
        if not summary:
            raise ProviderError("Model returned an empty summary", self.provider.name, Capability.SUMMARIZE.value)

        logger.debug(f"Generated summary: {truncate(summary)}")
        return SummaryResult(summary=summary)

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get summarizer statistics"""
        return {
            'provider': self.config.provider,
            'model': self.config.model,
            'max_tokens': self.config.summary_max_tokens
        }
