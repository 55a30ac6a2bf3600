"""
Text improver - corrects spelling, grammar, punctuation and clarity
"""

import logging

from ..providers.base import BaseProvider
from ..core.config import LinguaScribeConfig
from ..exceptions import LinguaScribeError, ProviderError
from ..models.media import TextRequest
from ..models.results import Capability, ImprovedText
from .prompts import SYSTEM_TRANSCRIPTION_EDITOR, IMPROVE_TRANSCRIPTION_PROMPT

logger = logging.getLogger(__name__)


class TextImprover:
    """Edits a transcription into clean written text"""

    def __init__(self, provider: BaseProvider, config: LinguaScribeConfig):
        self.provider = provider
        self.config = config

    async def improve(self, text: str) -> ImprovedText:
        """
        Return a corrected version of the text

        Raises:
            ValidationError: If the text is empty
            ProviderError: If the model call fails or returns nothing
        """
        request = TextRequest(text)
        logger.info(f"Improving text ({len(request.text)} characters)")

        messages = [
            {"role": "system", "content": SYSTEM_TRANSCRIPTION_EDITOR},
            {"role": "user", "content": IMPROVE_TRANSCRIPTION_PROMPT.format(transcription=request.text)}
        ]

        try:
            response = await self.provider.process_text_messages(
                messages=messages,
                max_tokens=self.config.improve_max_tokens,
                temperature=self.config.temperature
            )
        except LinguaScribeError:
            raise
        except Exception as e:
            logger.error(f"Text improvement failed: {e}")
            raise ProviderError(f"Failed to improve text: {e}", self.provider.name, Capability.IMPROVE.value)

        improved = (response or "").strip()
        if not improved:
            raise ProviderError("Model returned no improved text", self.provider.name, Capability.IMPROVE.value)

        return ImprovedText(improved_transcription=improved)
