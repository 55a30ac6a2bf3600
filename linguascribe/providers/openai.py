"""
OpenAI provider for raw API operations
Audio is sent as an input_audio part; the media model must accept audio input
"""

import logging
from typing import List, Dict, Any, Optional

from .base import BaseProvider
from ..core.config import LinguaScribeConfig
from ..core.utils import truncate
from ..exceptions import LinguaScribeError, ProviderError

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseProvider):
    """OpenAI provider for raw API operations"""

    name = "openai"

    # MIME type -> input_audio format
    AUDIO_FORMATS = {
        "audio/mpeg": "mp3",
        "audio/mp3": "mp3",
        "audio/wav": "wav",
        "audio/x-wav": "wav",
        "audio/wave": "wav",
    }
    ACCEPTS_VIDEO = False

    def __init__(self, config: LinguaScribeConfig):
        super().__init__(config)
        self.client = self._create_client(self._get_api_key(config), self._get_base_url())

    def _get_api_key(self, config: LinguaScribeConfig) -> str:
        if not config.openai_api_key:
            raise ValueError("OpenAI API key is required")
        return config.openai_api_key

    def _get_base_url(self) -> Optional[str]:
        return None

    def _create_client(self, api_key: str, base_url: Optional[str]):
        # Import here to make it optional dependency
        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError("OpenAI library not found. Install with: pip install openai")
        if base_url:
            return AsyncOpenAI(api_key=api_key, base_url=base_url)
        return AsyncOpenAI(api_key=api_key)

    async def process_text_messages(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Process text-only messages through the chat completions API"""
        try:
            self.call_count += 1
            response = await self.client.chat.completions.create(
                model=self.config.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature
            )

            result = (response.choices[0].message.content or "").strip()
            logger.debug(f"{self.name} text response: {truncate(result)}")

            return result

        except Exception as e:
            logger.error(f"{self.name} text processing failed: {e}")
            raise ProviderError(f"Text processing failed: {e}", self.name)

    async def process_multimodal_messages(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Process multimodal messages (text + audio) through the chat completions API"""
        try:
            processed_messages = self._prepare_openai_messages(messages)

            self.call_count += 1
            response = await self.client.chat.completions.create(
                model=self.config.media_model,
                messages=processed_messages,
                max_tokens=max_tokens,
                temperature=temperature
            )

            result = (response.choices[0].message.content or "").strip()
            logger.debug(f"{self.name} multimodal response: {truncate(result)}")

            return result

        except LinguaScribeError:
            raise
        except Exception as e:
            logger.error(f"{self.name} multimodal processing failed: {e}")
            raise ProviderError(f"Multimodal processing failed: {e}", self.name)

    def _prepare_openai_messages(self, messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Convert media parts to the chat completions content format"""
        processed_messages = []

        for message in messages:
            if message["role"] == "user" and isinstance(message["content"], list):
                processed_content = []

                for content_item in message["content"]:
                    if content_item["type"] == "media":
                        processed_content.append(self._media_part(self._get_media(content_item)))
                    else:
                        processed_content.append(content_item)

                processed_messages.append({
                    "role": message["role"],
                    "content": processed_content
                })
            else:
                processed_messages.append(message)

        return processed_messages

    def _media_part(self, media) -> Dict[str, Any]:
        if media.is_video:
            if not self.ACCEPTS_VIDEO:
                raise ProviderError(f"{self.name} does not accept video input ({media.mime_type})", self.name)
            return {
                "type": "video_url",
                "video_url": {"url": media.to_data_uri()}
            }

        audio_format = self.AUDIO_FORMATS.get(media.mime_type)
        if not audio_format:
            supported = ", ".join(sorted(set(self.AUDIO_FORMATS.values())))
            raise ProviderError(
                f"{self.name} does not accept {media.mime_type} audio (supported: {supported})",
                self.name
            )
        return {
            "type": "input_audio",
            "input_audio": {"data": media.data, "format": audio_format}
        }
