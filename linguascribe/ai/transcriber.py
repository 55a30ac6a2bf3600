"""
Transcriber - turns an audio/video payload into text
"""

import logging

from ..providers.base import BaseProvider
from ..core.config import LinguaScribeConfig
from ..exceptions import LinguaScribeError, ProviderError, ValidationError
from ..models.media import MediaPayload
from ..models.results import Capability, TranscriptionResult
from .prompts import SYSTEM_TRANSCRIBER, TRANSCRIBE_AUDIO_PROMPT

logger = logging.getLogger(__name__)


class Transcriber:
    """Transcribes media files with a multimodal model"""

    def __init__(self, provider: BaseProvider, config: LinguaScribeConfig):
        self.provider = provider
        self.config = config

    async def transcribe(self, media: MediaPayload) -> TranscriptionResult:
        """
        Transcribe the spoken content of a media payload

        Args:
            media: Base64-encoded audio or video with its MIME type

        Returns:
            TranscriptionResult with the transcribed text

        Raises:
            ValidationError: If no media payload is given
            ProviderError: If the model call fails or returns no text
        """
        if not isinstance(media, MediaPayload):
            raise ValidationError("Please select an audio or video file to transcribe.")

        logger.info(f"Transcribing {media.filename or 'media'} ({media.mime_type}, {media.size_bytes} bytes)")

        messages = [
            {"role": "system", "content": SYSTEM_TRANSCRIBER},
            {
                "role": "user",
                "content": [
                    {"type": "media", "media": media},
                    {"type": "text", "text": TRANSCRIBE_AUDIO_PROMPT}
                ]
            }
        ]

        try:
            response = await self.provider.process_multimodal_messages(
                messages=messages,
                max_tokens=self.config.transcription_max_tokens,
                temperature=0.0
            )
        except LinguaScribeError:
            raise
        except Exception as e:
            logger.error(f"Transcription failed: {e}")
            raise ProviderError(f"Failed to transcribe media: {e}", self.provider.name, Capability.TRANSCRIBE.value)

        transcription = (response or "").strip()
        if not transcription:
            raise ProviderError("Model returned an empty transcription", self.provider.name, Capability.TRANSCRIBE.value)

        logger.info(f"Transcription complete: {len(transcription)} characters")
        return TranscriptionResult(transcription=transcription)
